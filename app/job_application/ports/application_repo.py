from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Protocol

from django.db.models import QuerySet
from job_application.models import JobSeekerApply


class ApplicationRepositoryPort(Protocol):
    def get_by_id(self, application_id: int) -> Optional[JobSeekerApply]: ...

    def exists(self, *, job_seeker_id: int, job_id: int) -> bool: ...

    def create(self, **fields) -> JobSeekerApply: ...

    def save(
        self, application: JobSeekerApply, *, update_fields: Optional[list[str]] = None
    ) -> JobSeekerApply: ...

    def list_by_job_seeker(self, job_seeker_id: int) -> QuerySet[JobSeekerApply]: ...

    def list_by_job(
        self, job_id: int, *, status: Optional[str] = None
    ) -> QuerySet[JobSeekerApply]: ...

    def list_by_recruiter(
        self,
        recruiter_id: int,
        *,
        status: Optional[str] = None,
        since: Optional[datetime] = None,
    ) -> QuerySet[JobSeekerApply]: ...

    def count_by_status_for_recruiter(self, recruiter_id: int) -> dict[str, int]: ...

    def applied_job_ids(
        self, job_seeker_id: int, job_ids: Iterable[int]
    ) -> set[int]: ...
