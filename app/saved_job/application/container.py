from __future__ import annotations

from saved_job.adapters.django_saved_job_repo import DjangoSavedJobRepository


def build_saved_job_repo() -> DjangoSavedJobRepository:
    return DjangoSavedJobRepository()
