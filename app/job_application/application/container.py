from __future__ import annotations

from job_application.adapters.django_application_repo import (
    DjangoApplicationRepository,
)
from job_application.application.usecases.update_application_status import (
    UpdateApplicationStatusUseCase,
)


def build_application_repo() -> DjangoApplicationRepository:
    return DjangoApplicationRepository()


def build_update_application_status_usecase() -> UpdateApplicationStatusUseCase:
    return UpdateApplicationStatusUseCase(application_repo=build_application_repo())
