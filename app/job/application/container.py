from __future__ import annotations

from common.adapters.django_job_repo import DjangoJobPostRepository
from job.adapters.django_job_data_repo import (
    DjangoJobCompanyRepository,
    DjangoJobLocationRepository,
)


def build_job_post_repo() -> DjangoJobPostRepository:
    """
    Job 저장소 조립(Dependency Injection).
    """
    return DjangoJobPostRepository()


def build_job_location_repo() -> DjangoJobLocationRepository:
    return DjangoJobLocationRepository()


def build_job_company_repo() -> DjangoJobCompanyRepository:
    return DjangoJobCompanyRepository()
