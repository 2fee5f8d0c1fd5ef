from __future__ import annotations

import logging

from common.application.result import Err, Ok, Result
from job_application.models import (
    STATUS_PROGRESSION,
    TERMINAL_STATUSES,
    ApplicationStatus,
    JobSeekerApply,
)
from job_application.ports.application_repo import ApplicationRepositoryPort

logger = logging.getLogger(__name__)


def is_unusual_transition(current: str, new: str) -> bool:
    """
    종료 상태에서 벗어나거나 진행 순서를 거꾸로 가는 전이인지 판단합니다.

    전이 자체는 막지 않고 경고 로그 대상만 판별합니다.
    """
    if current == new:
        return False
    if current in TERMINAL_STATUSES:
        return True
    if current in STATUS_PROGRESSION and new in STATUS_PROGRESSION:
        return STATUS_PROGRESSION.index(new) < STATUS_PROGRESSION.index(current)
    return False


class UpdateApplicationStatusUseCase:
    """
    지원 상태 변경 유스케이스 (Recruiter)

    - 공고 등록자만 변경 가능 (FORBIDDEN)
    - 상태 전이는 제한하지 않음 (비정상 전이는 경고 로그)
    - recruiter_notes 는 값이 있을 때만 갱신
    """

    def __init__(self, *, application_repo: ApplicationRepositoryPort):
        self._repo = application_repo

    def execute(
        self,
        *,
        recruiter_id: int,
        application_id: int,
        status: str,
        recruiter_notes: str | None = None,
    ) -> Result[JobSeekerApply]:
        if status not in ApplicationStatus.values:
            return Err(
                code="INVALID_STATUS",
                message=f"Invalid status: {status}",
                details={"allowed": list(ApplicationStatus.values)},
            )

        application = self._repo.get_by_id(application_id)
        if application is None:
            return Err(
                code="NOT_FOUND", message=f"Application {application_id} not found"
            )

        if application.job.posted_by_id != recruiter_id:
            return Err(
                code="FORBIDDEN",
                message="You can only update applications for your own job postings",
                details={"application_id": application_id},
            )

        previous = application.status
        if is_unusual_transition(previous, status):
            logger.warning(
                f"Unusual status transition for application {application_id}: "
                f"{previous} -> {status}"
            )

        application.status = status
        update_fields = ["status", "last_updated"]
        if recruiter_notes and recruiter_notes.strip():
            application.recruiter_notes = recruiter_notes.strip()
            update_fields.append("recruiter_notes")

        application = self._repo.save(application, update_fields=update_fields)
        logger.info(
            f"Application {application_id} status changed: {previous} -> {status}"
        )
        return Ok(application)
