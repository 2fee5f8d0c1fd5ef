from __future__ import annotations

from typing import Protocol

from django.db.models import QuerySet
from saved_job.models import JobSeekerSave


class SavedJobRepositoryPort(Protocol):
    def exists(self, *, job_seeker_id: int, job_id: int) -> bool: ...

    def create(self, **fields) -> JobSeekerSave: ...

    def delete_for(self, *, job_seeker_id: int, job_id: int) -> int: ...

    def list_by_job_seeker(self, job_seeker_id: int) -> QuerySet[JobSeekerSave]: ...

    def count_by_job_seeker(self, job_seeker_id: int) -> int: ...
