"""
Tests for Saved Job Views

관심 공고 목록 / 개수 API 테스트
"""

from datetime import timedelta

import pytest
from django.utils import timezone
from job.models import JobCompany
from job_application.models import JobSeekerApply
from rest_framework import status
from rest_framework.test import APIClient
from saved_job.models import JobSeekerSave


@pytest.fixture
def saved_jobs(job_seeker, make_job):
    """Alpha(Remote-Only, Contract) / Beta(Office-Only, Full-Time) 를 저장"""
    profile = job_seeker.job_seeker_profile
    globex = JobCompany.objects.create(name="Globex")
    alpha = make_job(job_title="Alpha Engineer", job_type="Contract", remote="Remote-Only")
    beta = make_job(job_title="Beta Analyst", job_company=globex)
    first = JobSeekerSave.objects.create(job_seeker=profile, job=alpha)
    JobSeekerSave.objects.filter(pk=first.pk).update(
        saved_at=timezone.now() - timedelta(hours=1)
    )
    JobSeekerSave.objects.create(job_seeker=profile, job=beta)
    return {"alpha": alpha, "beta": beta}


@pytest.mark.django_db
class TestSavedJobList:
    """GET /api/saved-jobs/"""

    def setup_method(self):
        self.client = APIClient()

    def _titles(self, response):
        return [item["job"]["job_title"] for item in response.data["data"]]

    def test_list_default_order_is_newest_saved_first(self, job_seeker, saved_jobs):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.get("/api/saved-jobs/")

        assert response.status_code == status.HTTP_200_OK
        assert self._titles(response) == ["Beta Analyst", "Alpha Engineer"]
        assert all(item["is_saved"] for item in response.data["data"])

    def test_is_applied_flag(self, job_seeker, saved_jobs):
        JobSeekerApply.objects.create(
            job_seeker=job_seeker.job_seeker_profile, job=saved_jobs["alpha"]
        )
        self.client.force_authenticate(user=job_seeker)

        response = self.client.get("/api/saved-jobs/")

        flags = {item["job"]["job_title"]: item["is_applied"] for item in response.data["data"]}
        assert flags == {"Alpha Engineer": True, "Beta Analyst": False}

    def test_search_matches_company_name(self, job_seeker, saved_jobs):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.get("/api/saved-jobs/", {"search": "globex"})

        assert self._titles(response) == ["Beta Analyst"]

    def test_filter_by_type_and_remote(self, job_seeker, saved_jobs):
        self.client.force_authenticate(user=job_seeker)

        by_type = self.client.get("/api/saved-jobs/", {"type": "Contract"})
        remote = self.client.get("/api/saved-jobs/", {"remote": "true"})
        office = self.client.get("/api/saved-jobs/", {"remote": "false"})

        assert self._titles(by_type) == ["Alpha Engineer"]
        assert self._titles(remote) == ["Alpha Engineer"]
        assert self._titles(office) == ["Beta Analyst"]

    def test_sort_by_title_ascending(self, job_seeker, saved_jobs):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.get(
            "/api/saved-jobs/", {"sortBy": "job_title", "sortOrder": "ASC"}
        )

        assert self._titles(response) == ["Alpha Engineer", "Beta Analyst"]

    def test_unknown_sort_field_falls_back_to_saved_at(self, job_seeker, saved_jobs):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.get("/api/saved-jobs/", {"sortBy": "salary"})

        assert response.status_code == status.HTTP_200_OK
        assert self._titles(response) == ["Beta Analyst", "Alpha Engineer"]

    def test_other_job_seeker_sees_only_own(self, other_job_seeker, saved_jobs):
        self.client.force_authenticate(user=other_job_seeker)

        response = self.client.get("/api/saved-jobs/")

        assert response.data["data"] == []

    def test_recruiter_is_forbidden(self, recruiter):
        self.client.force_authenticate(user=recruiter)

        response = self.client.get("/api/saved-jobs/")

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestSavedJobCount:
    def setup_method(self):
        self.client = APIClient()

    def test_count(self, job_seeker, saved_jobs):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.get("/api/saved-jobs/count/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["data"] == {"count": 2}

    def test_deleting_job_removes_saved_entry(self, job_seeker, saved_jobs):
        saved_jobs["beta"].delete()
        self.client.force_authenticate(user=job_seeker)

        response = self.client.get("/api/saved-jobs/count/")

        assert response.data["data"] == {"count": 1}
