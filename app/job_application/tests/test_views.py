"""
Tests for Job Application Views

지원 / 지원자 관리 API 테스트
"""

from datetime import timedelta

import pytest
from django.utils import timezone
from job_application.models import ApplicationStatus, JobSeekerApply
from rest_framework import status
from rest_framework.test import APIClient


@pytest.fixture
def application(job_seeker, make_job):
    return JobSeekerApply.objects.create(
        job_seeker=job_seeker.job_seeker_profile,
        job=make_job(),
        cover_letter="I love Django",
    )


@pytest.mark.django_db
class TestApplyForJob:
    """POST /api/applications/job/<id>/apply/"""

    def setup_method(self):
        self.client = APIClient()

    def test_apply_success(self, job_seeker, make_job):
        # Given
        job = make_job()
        self.client.force_authenticate(user=job_seeker)

        # When
        response = self.client.post(
            f"/api/applications/job/{job.id}/apply/",
            {"cover_letter": "Please hire me"},
            format="json",
        )

        # Then
        assert response.status_code == status.HTTP_201_CREATED
        data = response.data["data"]
        assert data["job_id"] == job.id
        assert data["status"] == "APPLIED"
        assert data["status_display"] == "Applied"
        assert data["company_name"] == "Acme Corp"
        assert data["job_location"] == "Seoul, Seoul"
        assert data["cover_letter"] == "Please hire me"

    def test_apply_uses_profile_resume_when_not_given(self, job_seeker, make_job):
        profile = job_seeker.job_seeker_profile
        profile.resume = "photos/jobseeker/1/cv.pdf"
        profile.save()
        job = make_job()
        self.client.force_authenticate(user=job_seeker)

        response = self.client.post(f"/api/applications/job/{job.id}/apply/", {}, format="json")

        assert response.data["data"]["resume_path"] == "photos/jobseeker/1/cv.pdf"

    def test_apply_twice_returns_409(self, application, job_seeker):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.post(
            f"/api/applications/job/{application.job_id}/apply/", {}, format="json"
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data["message"] == "You have already applied for this job"
        assert JobSeekerApply.objects.count() == 1

    def test_apply_to_missing_job_returns_404(self, job_seeker):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.post("/api/applications/job/9999/apply/", {}, format="json")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_application_status_for_job(self, application, job_seeker, other_job_seeker):
        self.client.force_authenticate(user=job_seeker)
        response = self.client.get(f"/api/applications/job/{application.job_id}/status/")
        assert response.data["data"] == {"has_applied": True}

        self.client.force_authenticate(user=other_job_seeker)
        response = self.client.get(f"/api/applications/job/{application.job_id}/status/")
        assert response.data["data"] == {"has_applied": False}

    def test_application_status_for_missing_job_returns_404(self, job_seeker):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.get("/api/applications/job/9999/status/")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["success"] is False
        assert response.data["message"] == "Job not found"


@pytest.mark.django_db
class TestJobSeekerApplications:
    def setup_method(self):
        self.client = APIClient()

    def test_my_applications(self, application, job_seeker, other_job_seeker):
        self.client.force_authenticate(user=job_seeker)
        response = self.client.get("/api/applications/my-applications/")
        assert response.status_code == status.HTTP_200_OK
        assert [item["id"] for item in response.data["data"]] == [application.id]

        self.client.force_authenticate(user=other_job_seeker)
        response = self.client.get("/api/applications/my-applications/")
        assert response.data["data"] == []

    def test_my_applications_forbidden_for_recruiter(self, recruiter):
        self.client.force_authenticate(user=recruiter)

        response = self.client.get("/api/applications/my-applications/")

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_withdraw_application(self, application, job_seeker):
        self.client.force_authenticate(user=job_seeker)

        response = self.client.put(f"/api/applications/{application.id}/withdraw/")

        assert response.status_code == status.HTTP_200_OK
        application.refresh_from_db()
        assert application.status == ApplicationStatus.WITHDRAWN

    def test_withdraw_hired_application_returns_409(self, application, job_seeker):
        application.status = ApplicationStatus.HIRED
        application.save()
        self.client.force_authenticate(user=job_seeker)

        response = self.client.put(f"/api/applications/{application.id}/withdraw/")

        assert response.status_code == status.HTTP_409_CONFLICT
        application.refresh_from_db()
        assert application.status == ApplicationStatus.HIRED

    def test_withdraw_someone_elses_application_returns_404(
        self, application, other_job_seeker
    ):
        self.client.force_authenticate(user=other_job_seeker)

        response = self.client.put(f"/api/applications/{application.id}/withdraw/")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_application_detail_access(self, application, job_seeker, recruiter, other_job_seeker):
        self.client.force_authenticate(user=job_seeker)
        assert self.client.get(f"/api/applications/{application.id}/").status_code == 200

        self.client.force_authenticate(user=recruiter)
        assert self.client.get(f"/api/applications/{application.id}/").status_code == 200

        self.client.force_authenticate(user=other_job_seeker)
        response = self.client.get(f"/api/applications/{application.id}/")
        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestRecruiterApplications:
    def setup_method(self):
        self.client = APIClient()

    def test_update_status_with_notes(self, application, recruiter):
        # Given
        self.client.force_authenticate(user=recruiter)

        # When
        response = self.client.put(
            f"/api/applications/{application.id}/status/",
            {"status": "under_review", "recruiter_notes": "Strong CV"},
            format="json",
        )

        # Then
        assert response.status_code == status.HTTP_200_OK
        assert response.data["data"]["status"] == "UNDER_REVIEW"
        application.refresh_from_db()
        assert application.recruiter_notes == "Strong CV"

    def test_update_status_blank_notes_keep_existing(self, application, recruiter):
        application.recruiter_notes = "Keep me"
        application.save()
        self.client.force_authenticate(user=recruiter)

        self.client.put(
            f"/api/applications/{application.id}/status/",
            {"status": "INTERVIEWED", "recruiter_notes": "  "},
            format="json",
        )

        application.refresh_from_db()
        assert application.status == ApplicationStatus.INTERVIEWED
        assert application.recruiter_notes == "Keep me"

    def test_update_status_invalid_value_returns_400(self, application, recruiter):
        self.client.force_authenticate(user=recruiter)

        response = self.client.put(
            f"/api/applications/{application.id}/status/", {"status": "PROMOTED"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "status" in response.data["data"]

    def test_update_status_by_other_recruiter_is_forbidden(self, application, other_recruiter):
        self.client.force_authenticate(user=other_recruiter)

        response = self.client.put(
            f"/api/applications/{application.id}/status/", {"status": "REJECTED"}, format="json"
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        application.refresh_from_db()
        assert application.status == ApplicationStatus.APPLIED

    def test_update_status_of_missing_application_returns_404(self, recruiter):
        self.client.force_authenticate(user=recruiter)

        response = self.client.put(
            "/api/applications/9999/status/", {"status": "REJECTED"}, format="json"
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_recruiter_applications_filtered_by_status(
        self, application, recruiter, other_job_seeker
    ):
        JobSeekerApply.objects.create(
            job_seeker=other_job_seeker.job_seeker_profile,
            job=application.job,
            status=ApplicationStatus.REJECTED,
        )
        self.client.force_authenticate(user=recruiter)

        all_items = self.client.get("/api/applications/recruiter/applications/")
        rejected = self.client.get(
            "/api/applications/recruiter/applications/", {"status": "rejected"}
        )
        invalid = self.client.get(
            "/api/applications/recruiter/applications/", {"status": "LOST"}
        )

        assert len(all_items.data["data"]) == 2
        assert [item["status"] for item in rejected.data["data"]] == ["REJECTED"]
        assert invalid.status_code == status.HTTP_400_BAD_REQUEST

    def test_job_applications_for_owner(self, application, recruiter, other_recruiter):
        self.client.force_authenticate(user=recruiter)
        response = self.client.get(f"/api/applications/job/{application.job_id}/applications/")
        assert [item["id"] for item in response.data["data"]] == [application.id]

        self.client.force_authenticate(user=other_recruiter)
        response = self.client.get(f"/api/applications/job/{application.job_id}/applications/")
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_statistics_include_every_status(self, application, recruiter, other_job_seeker):
        # Given
        JobSeekerApply.objects.create(
            job_seeker=other_job_seeker.job_seeker_profile,
            job=application.job,
            status=ApplicationStatus.HIRED,
        )
        self.client.force_authenticate(user=recruiter)

        # When
        response = self.client.get("/api/applications/recruiter/statistics/")

        # Then
        data = response.data["data"]
        assert data["APPLIED"] == 1
        assert data["HIRED"] == 1
        assert data["OFFERED"] == 0
        assert data["WITHDRAWN"] == 0
        assert data["total_applications"] == 2

    def test_recent_applications_last_30_days(self, application, recruiter, other_job_seeker):
        old = JobSeekerApply.objects.create(
            job_seeker=other_job_seeker.job_seeker_profile, job=application.job
        )
        JobSeekerApply.objects.filter(pk=old.pk).update(
            apply_date=timezone.now() - timedelta(days=45)
        )
        self.client.force_authenticate(user=recruiter)

        response = self.client.get("/api/applications/recruiter/recent/")

        assert [item["id"] for item in response.data["data"]] == [application.id]

    def test_status_choices_are_public(self, db):
        response = self.client.get("/api/applications/statuses/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["data"]["INTERVIEW_SCHEDULED"] == "Interview Scheduled"
        assert len(response.data["data"]) == 8
