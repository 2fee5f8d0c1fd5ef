"""
Job Application Service

구직자 지원 / Recruiter 지원자 관리 서비스
"""

import logging
from datetime import timedelta
from typing import Dict, Optional

from common.application.result import Err, Ok
from common.exceptions import Conflict, Forbidden, NotFound, ValidationFailed
from django.db import IntegrityError, transaction
from django.db.models import QuerySet
from django.utils import timezone
from job.services import JobPostActivityService
from job_application.application.container import (
    build_application_repo,
    build_update_application_status_usecase,
)
from job_application.dtos import ApplicationStatisticsDTO
from job_application.models import ApplicationStatus, JobSeekerApply
from profiles.services import ProfileService
from user.models import User

logger = logging.getLogger(__name__)

RECENT_APPLICATION_DAYS = 30

NON_WITHDRAWABLE_STATUSES = {ApplicationStatus.HIRED, ApplicationStatus.WITHDRAWN}


def _validate_status_filter(status: Optional[str]) -> Optional[str]:
    if not status:
        return None
    status = status.strip().upper()
    if status not in ApplicationStatus.values:
        raise ValidationFailed(f"Invalid status: {status}")
    return status


class JobSeekerApplyService:
    """
    지원 서비스

    - 구직자: 지원, 지원 내역 조회, 지원 철회
    - Recruiter: 지원자 조회, 상태 변경, 통계
    """

    @staticmethod
    def apply_for_job(
        user: User,
        job_id: int,
        *,
        cover_letter: str = "",
        resume_path: str = "",
    ) -> JobSeekerApply:
        """
        채용 공고 지원

        Args:
            user: 지원하는 Job Seeker
            job_id: 공고 ID
            cover_letter: 자기소개서
            resume_path: 이력서 경로 (없으면 프로필의 이력서 사용)

        Raises:
            NotFound: 존재하지 않는 공고
            Conflict: 이미 지원한 공고
        """
        profile = ProfileService.require_job_seeker_profile(user)
        job = JobPostActivityService.get_one(job_id)
        repo = build_application_repo()

        if repo.exists(job_seeker_id=profile.pk, job_id=job.id):
            logger.warning(f"User {user.id} already applied to job {job_id}")
            raise Conflict("You have already applied for this job")

        try:
            with transaction.atomic():
                application = repo.create(
                    job_seeker=profile,
                    job=job,
                    cover_letter=cover_letter or "",
                    resume_path=resume_path or profile.resume or "",
                    status=ApplicationStatus.APPLIED,
                )
        except IntegrityError:
            # 동시 요청으로 unique 제약에 걸린 경우
            logger.warning(f"Concurrent duplicate application: user {user.id}, job {job_id}")
            raise Conflict("You have already applied for this job")

        logger.info(f"User {user.id} applied to job {job_id} (application {application.id})")
        return application

    @staticmethod
    def has_applied(user: User, job_id: int) -> bool:
        if not user.is_authenticated or not user.is_job_seeker:
            return False
        return build_application_repo().exists(job_seeker_id=user.id, job_id=job_id)

    @staticmethod
    def applied_job_ids(user: User, job_ids) -> set[int]:
        if not user.is_authenticated or not user.is_job_seeker:
            return set()
        return build_application_repo().applied_job_ids(user.id, job_ids)

    @staticmethod
    def get_candidates_jobs(user: User) -> QuerySet[JobSeekerApply]:
        """구직자 본인의 지원 내역 (최신순)"""
        profile = ProfileService.require_job_seeker_profile(user)
        return build_application_repo().list_by_job_seeker(profile.pk)

    @staticmethod
    def get_job_candidates(
        recruiter: User, job_id: int, *, status: Optional[str] = None
    ) -> QuerySet[JobSeekerApply]:
        """공고 지원자 목록 (공고 등록자만)"""
        status = _validate_status_filter(status)
        job = JobPostActivityService.get_owned_job(recruiter, job_id)
        return build_application_repo().list_by_job(job.id, status=status)

    @staticmethod
    def get_application(user: User, application_id: int) -> JobSeekerApply:
        """
        지원 상세 조회

        지원자 본인 또는 공고 등록 Recruiter 만 조회할 수 있습니다.
        """
        application = build_application_repo().get_by_id(application_id)
        if application is None:
            raise NotFound("Application not found")
        if user.id not in (application.job_seeker_id, application.job.posted_by_id):
            logger.warning(f"User {user.id} denied access to application {application_id}")
            raise Forbidden("You do not have access to this application")
        return application

    @staticmethod
    def update_status(
        recruiter: User,
        application_id: int,
        *,
        status: str,
        recruiter_notes: Optional[str] = None,
    ) -> JobSeekerApply:
        usecase = build_update_application_status_usecase()
        with transaction.atomic():
            result = usecase.execute(
                recruiter_id=recruiter.id,
                application_id=application_id,
                status=(status or "").strip().upper(),
                recruiter_notes=recruiter_notes,
            )
        if isinstance(result, Err):
            logger.warning(f"Status update rejected ({result.code}): {result.message}")
            if result.code == "NOT_FOUND":
                raise NotFound("Application not found")
            if result.code == "FORBIDDEN":
                raise Forbidden(result.message)
            raise ValidationFailed(result.message)

        assert isinstance(result, Ok)
        return result.value

    @staticmethod
    def withdraw(user: User, application_id: int) -> JobSeekerApply:
        """
        지원 철회 (지원자 본인만)

        Raises:
            NotFound: 없는 지원이거나 본인 지원이 아닌 경우
            Conflict: Hired / Withdrawn 상태는 철회 불가
        """
        profile = ProfileService.require_job_seeker_profile(user)
        repo = build_application_repo()
        application = repo.get_by_id(application_id)
        if application is None or application.job_seeker_id != profile.pk:
            raise NotFound("Application not found")

        if application.status in NON_WITHDRAWABLE_STATUSES:
            label = ApplicationStatus(application.status).label
            raise Conflict(f"Cannot withdraw an application with status {label}")

        with transaction.atomic():
            application.status = ApplicationStatus.WITHDRAWN
            application = repo.save(application, update_fields=["status", "last_updated"])
        logger.info(f"User {user.id} withdrew application {application_id}")
        return application

    @staticmethod
    def get_applications_for_recruiter(
        recruiter: User, *, status: Optional[str] = None
    ) -> QuerySet[JobSeekerApply]:
        status = _validate_status_filter(status)
        return build_application_repo().list_by_recruiter(recruiter.id, status=status)

    @staticmethod
    def get_recent_applications_for_recruiter(
        recruiter: User, *, days: int = RECENT_APPLICATION_DAYS
    ) -> QuerySet[JobSeekerApply]:
        since = timezone.now() - timedelta(days=days)
        return build_application_repo().list_by_recruiter(recruiter.id, since=since)

    @staticmethod
    def get_statistics_for_recruiter(recruiter: User) -> ApplicationStatisticsDTO:
        counts = {status: 0 for status in ApplicationStatus.values}
        counts.update(
            build_application_repo().count_by_status_for_recruiter(recruiter.id)
        )
        return ApplicationStatisticsDTO(
            counts=counts, total_applications=sum(counts.values())
        )

    @staticmethod
    def status_choices() -> Dict[str, str]:
        return {status.value: status.label for status in ApplicationStatus}
