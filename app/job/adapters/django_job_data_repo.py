from __future__ import annotations

from typing import Optional

from django.db import IntegrityError, transaction
from job.models import JobCompany, JobLocation
from job.ports.job_data_repo import JobCompanyRepositoryPort, JobLocationRepositoryPort


class DjangoJobLocationRepository(JobLocationRepositoryPort):
    def get_by_id(self, location_id: int) -> Optional[JobLocation]:
        try:
            return JobLocation.objects.get(pk=location_id)
        except JobLocation.DoesNotExist:
            return None

    def list_all(self) -> list[JobLocation]:
        return list(JobLocation.objects.all())

    def get_or_create(
        self, *, city: str, state: str, country: str
    ) -> tuple[JobLocation, bool]:
        lookup = {"city": city, "state": state, "country": country}
        try:
            with transaction.atomic():
                return JobLocation.objects.get_or_create(**lookup)
        except IntegrityError:
            # 동시 생성 경합: 먼저 생성된 행을 사용
            return JobLocation.objects.get(**lookup), False

    def search(
        self,
        *,
        city: Optional[str] = None,
        state: Optional[str] = None,
        country: Optional[str] = None,
    ) -> list[JobLocation]:
        """city > state > country 우선순위로 하나의 조건만 적용합니다."""
        queryset = JobLocation.objects.all()
        if city:
            queryset = queryset.filter(city__icontains=city)
        elif state:
            queryset = queryset.filter(state__icontains=state)
        elif country:
            queryset = queryset.filter(country__icontains=country)
        return list(queryset)


class DjangoJobCompanyRepository(JobCompanyRepositoryPort):
    def get_by_id(self, company_id: int) -> Optional[JobCompany]:
        try:
            return JobCompany.objects.get(pk=company_id)
        except JobCompany.DoesNotExist:
            return None

    def list_all(self) -> list[JobCompany]:
        return list(JobCompany.objects.all())

    def get_or_create(self, *, name: str, **defaults) -> tuple[JobCompany, bool]:
        try:
            with transaction.atomic():
                return JobCompany.objects.get_or_create(name=name, defaults=defaults)
        except IntegrityError:
            return JobCompany.objects.get(name=name), False

    def search(self, *, name: str) -> list[JobCompany]:
        return list(JobCompany.objects.filter(name__icontains=name))
