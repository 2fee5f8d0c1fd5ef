from __future__ import annotations

from typing import Optional, Protocol

from django.db.models import QuerySet
from job.dtos import JobSearchCriteria
from job.models import JobPostActivity


class JobPostRepositoryPort(Protocol):
    def get_by_id(self, job_id: int) -> Optional[JobPostActivity]: ...

    def list_all(self) -> QuerySet[JobPostActivity]: ...

    def search(self, criteria: JobSearchCriteria) -> QuerySet[JobPostActivity]: ...

    def list_by_poster(self, user_id: int) -> QuerySet[JobPostActivity]: ...

    def create(self, **fields) -> JobPostActivity: ...

    def save(
        self, job: JobPostActivity, *, update_fields: Optional[list[str]] = None
    ) -> JobPostActivity: ...

    def delete(self, job: JobPostActivity) -> None: ...
