# app/conftest.py
"""
pytest fixtures for API testing
"""

import pytest
from job.models import JobCompany, JobLocation, JobPostActivity
from profiles.adapters.django_profile_repo import DjangoProfileRepository
from user.models import User, UsersType

DEFAULT_PASSWORD = "testpass123"


@pytest.fixture
def users_types(db):
    """
    사용자 유형 (테스트는 --nomigrations 로 실행되므로 직접 생성합니다).
    """
    recruiter_type, _ = UsersType.objects.get_or_create(
        pk=1, defaults={"user_type_name": UsersType.RECRUITER}
    )
    job_seeker_type, _ = UsersType.objects.get_or_create(
        pk=2, defaults={"user_type_name": UsersType.JOB_SEEKER}
    )
    return {"recruiter": recruiter_type, "job_seeker": job_seeker_type}


@pytest.fixture
def make_user(users_types):
    """
    사용자 + 유형에 맞는 빈 프로필을 생성하는 팩토리.
    """

    def _make_user(
        email: str,
        role: str = "job_seeker",
        first_name: str = "Test",
        last_name: str = "User",
        password: str = DEFAULT_PASSWORD,
    ) -> User:
        user = User.objects.create_user(
            username=email,
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            user_type=users_types[role],
        )
        DjangoProfileRepository().create_for_user(user)
        return user

    return _make_user


@pytest.fixture
def recruiter(make_user):
    return make_user("recruiter@example.com", role="recruiter", first_name="Rita")


@pytest.fixture
def other_recruiter(make_user):
    return make_user("other.recruiter@example.com", role="recruiter", first_name="Omar")


@pytest.fixture
def job_seeker(make_user):
    return make_user("seeker@example.com", role="job_seeker", first_name="Sam")


@pytest.fixture
def other_job_seeker(make_user):
    return make_user("other.seeker@example.com", role="job_seeker", first_name="Olga")


@pytest.fixture
def company(db):
    return JobCompany.objects.create(name="Acme Corp", website="https://acme.example.com")


@pytest.fixture
def location(db):
    return JobLocation.objects.create(city="Seoul", state="Seoul", country="South Korea")


@pytest.fixture
def make_job(recruiter, company, location):
    """
    채용 공고 팩토리 (기본: recruiter 가 등록한 Full-Time / Office-Only 공고).
    """

    def _make_job(**overrides) -> JobPostActivity:
        fields = {
            "posted_by": recruiter,
            "job_company": company,
            "job_location": location,
            "job_title": "Backend Developer",
            "description_of_job": "Build and run Django services",
            "job_type": "Full-Time",
            "salary": "60000",
            "remote": "Office-Only",
        }
        fields.update(overrides)
        return JobPostActivity.objects.create(**fields)

    return _make_job


@pytest.fixture
def media_root(settings, tmp_path):
    """업로드 파일을 임시 디렉터리에 저장합니다."""
    settings.MEDIA_ROOT = str(tmp_path)
    return tmp_path
