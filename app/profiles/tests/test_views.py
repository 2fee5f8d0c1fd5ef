"""
Tests for Profile Views

프로필 조회 / 부분 수정 / 업로드 파일 API 테스트
"""

from datetime import date

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from profiles.models import JobSeekerProfile, RecruiterProfile
from rest_framework import status
from rest_framework.test import APIClient


def make_upload(name: str, content: bytes = b"file-content", content_type: str = "application/pdf"):
    return SimpleUploadedFile(name, content, content_type=content_type)


@pytest.mark.django_db
class TestProfileView:
    """GET /api/profile/"""

    def setup_method(self):
        self.client = APIClient()

    def test_job_seeker_profile(self, job_seeker):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.get("/api/profile/")

        assert response.status_code == status.HTTP_200_OK
        data = response.data["data"]
        assert data["user"]["email"] == job_seeker.email
        assert data["profile"]["first_name"] == "Sam"
        assert data["profile"]["willing_to_relocate"] is False

    def test_recruiter_profile_is_created_when_missing(self, recruiter):
        RecruiterProfile.objects.filter(user=recruiter).delete()
        self.client.force_authenticate(user=recruiter)

        response = self.client.get("/api/profile/")

        assert response.status_code == status.HTTP_200_OK
        assert "company" in response.data["data"]["profile"]
        assert RecruiterProfile.objects.filter(user=recruiter).exists()

    def test_anonymous_returns_401(self, db):
        response = self.client.get("/api/profile/")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestJobSeekerProfileUpdate:
    """PUT /api/profile/job-seeker/"""

    def setup_method(self):
        self.client = APIClient()

    def test_partial_update_keeps_blank_fields(self, job_seeker):
        # Given
        profile = job_seeker.job_seeker_profile
        profile.phone = "010-0000-0000"
        profile.save()
        self.client.force_authenticate(user=job_seeker)

        # When
        response = self.client.put(
            "/api/profile/job-seeker/",
            {
                "first_name": "Samantha",
                "phone": "",
                "city": "Busan",
                "date_of_birth": "1995-04-01",
                "availability_date": "not-a-date",
                "willing_to_relocate": "true",
            },
            format="multipart",
        )

        # Then
        assert response.status_code == status.HTTP_200_OK
        profile = JobSeekerProfile.objects.get(user=job_seeker)
        assert profile.first_name == "Samantha"
        assert profile.phone == "010-0000-0000"
        assert profile.city == "Busan"
        assert profile.date_of_birth == date(1995, 4, 1)
        assert profile.availability_date is None
        assert profile.willing_to_relocate is True
        job_seeker.refresh_from_db()
        assert job_seeker.first_name == "Samantha"

    def test_upload_resume_and_photo(self, job_seeker, media_root):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.put(
            "/api/profile/job-seeker/",
            {
                "resume": make_upload("My CV.pdf", b"%PDF-1.4 resume"),
                "profile_photo": make_upload("me.png", b"png-bytes", "image/png"),
            },
            format="multipart",
        )

        assert response.status_code == status.HTTP_200_OK
        profile = JobSeekerProfile.objects.get(user=job_seeker)
        directory = f"photos/jobseeker/{job_seeker.id}"
        assert profile.resume.startswith(f"{directory}/")
        assert profile.resume_original_name == "My CV.pdf"
        assert profile.resume_file_size == len(b"%PDF-1.4 resume")
        assert profile.resume_upload_date is not None
        assert (media_root / profile.resume).exists()
        assert response.data["data"]["profile"]["photos_image_path"] == (
            f"/media/{profile.profile_photo}"
        )

    def test_upload_with_unsupported_extension_returns_400(self, job_seeker, media_root):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.put(
            "/api/profile/job-seeker/",
            {"resume": make_upload("virus.exe")},
            format="multipart",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["message"].startswith("Unsupported file type")
        assert JobSeekerProfile.objects.get(user=job_seeker).resume == ""

    def test_upload_too_large_returns_400(self, job_seeker, media_root, settings):
        settings.UPLOAD_MAX_SIZE_MB = 0
        self.client.force_authenticate(user=job_seeker)

        response = self.client.put(
            "/api/profile/job-seeker/",
            {"resume": make_upload("cv.pdf")},
            format="multipart",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["message"] == "File too large. Maximum size: 0MB"

    def test_recruiter_cannot_update_job_seeker_profile(self, recruiter):
        self.client.force_authenticate(user=recruiter)

        response = self.client.put(
            "/api/profile/job-seeker/", {"city": "Busan"}, format="multipart"
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestRecruiterProfileUpdate:
    """PUT /api/profile/recruiter/"""

    def setup_method(self):
        self.client = APIClient()

    def test_update_company_and_photo(self, recruiter, media_root):
        self.client.force_authenticate(user=recruiter)

        response = self.client.put(
            "/api/profile/recruiter/",
            {
                "company": "Acme Corp",
                "country": "South Korea",
                "profile_photo": make_upload("logo.jpg", b"jpg", "image/jpeg"),
            },
            format="multipart",
        )

        assert response.status_code == status.HTTP_200_OK
        profile = RecruiterProfile.objects.get(user=recruiter)
        assert profile.company == "Acme Corp"
        assert profile.profile_photo.startswith(f"photos/recruiter/{recruiter.id}/")

    def test_json_body_is_accepted(self, recruiter):
        self.client.force_authenticate(user=recruiter)

        response = self.client.put(
            "/api/profile/recruiter/", {"city": "Daegu"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert RecruiterProfile.objects.get(user=recruiter).city == "Daegu"


@pytest.mark.django_db
class TestProfileFileDownload:
    """GET /api/profile/download/<type>/<name>/"""

    def setup_method(self):
        self.client = APIClient()

    def test_returns_url_of_uploaded_file(self, job_seeker, media_root):
        # Given
        self.client.force_authenticate(user=job_seeker)
        self.client.put(
            "/api/profile/job-seeker/",
            {"resume": make_upload("cv.pdf")},
            format="multipart",
        )

        # When
        response = self.client.get("/api/profile/download/resume/cv.pdf/")

        # Then
        assert response.status_code == status.HTTP_200_OK
        assert response.data["data"]["url"] == (
            f"/media/photos/jobseeker/{job_seeker.id}/cv.pdf"
        )

    def test_missing_file_returns_404(self, job_seeker, media_root):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.get("/api/profile/download/resume/nothing.pdf/")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["message"] == "File not found"

    def test_unknown_file_type_returns_400(self, job_seeker, media_root):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.get("/api/profile/download/video/cv.mp4/")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
