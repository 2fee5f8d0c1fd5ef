import logging

import pytest
from common.application.result import Err, Ok
from job_application.application.container import build_update_application_status_usecase
from job_application.application.usecases.update_application_status import (
    is_unusual_transition,
)
from job_application.models import ApplicationStatus, JobSeekerApply


class TestIsUnusualTransition:
    @pytest.mark.parametrize(
        "current,new,expected",
        [
            ("APPLIED", "UNDER_REVIEW", False),
            ("APPLIED", "REJECTED", False),
            ("INTERVIEWED", "APPLIED", True),
            ("HIRED", "OFFERED", True),
            ("REJECTED", "UNDER_REVIEW", True),
            ("OFFERED", "OFFERED", False),
        ],
    )
    def test_transition(self, current, new, expected):
        assert is_unusual_transition(current, new) is expected


@pytest.mark.django_db
class TestUpdateApplicationStatusUseCase:
    @pytest.fixture
    def application(self, job_seeker, make_job):
        return JobSeekerApply.objects.create(
            job_seeker=job_seeker.job_seeker_profile, job=make_job()
        )

    def test_invalid_status(self, application, recruiter):
        result = build_update_application_status_usecase().execute(
            recruiter_id=recruiter.id, application_id=application.id, status="PROMOTED"
        )

        assert isinstance(result, Err)
        assert result.code == "INVALID_STATUS"

    def test_not_owner(self, application, other_recruiter):
        result = build_update_application_status_usecase().execute(
            recruiter_id=other_recruiter.id,
            application_id=application.id,
            status="REJECTED",
        )

        assert isinstance(result, Err)
        assert result.code == "FORBIDDEN"

    def test_reopening_terminal_status_is_allowed_but_logged(
        self, application, recruiter, caplog
    ):
        # Given: 이미 거절된 지원
        application.status = ApplicationStatus.REJECTED
        application.save()

        # When
        with caplog.at_level(logging.WARNING):
            result = build_update_application_status_usecase().execute(
                recruiter_id=recruiter.id,
                application_id=application.id,
                status="UNDER_REVIEW",
            )

        # Then
        assert isinstance(result, Ok)
        assert result.value.status == ApplicationStatus.UNDER_REVIEW
        assert "Unusual status transition" in caplog.text
