from __future__ import annotations

from typing import Optional, Protocol

from job.models import JobCompany, JobLocation


class JobLocationRepositoryPort(Protocol):
    def get_by_id(self, location_id: int) -> Optional[JobLocation]: ...

    def list_all(self) -> list[JobLocation]: ...

    def get_or_create(
        self, *, city: str, state: str, country: str
    ) -> tuple[JobLocation, bool]: ...

    def search(
        self,
        *,
        city: Optional[str] = None,
        state: Optional[str] = None,
        country: Optional[str] = None,
    ) -> list[JobLocation]: ...


class JobCompanyRepositoryPort(Protocol):
    def get_by_id(self, company_id: int) -> Optional[JobCompany]: ...

    def list_all(self) -> list[JobCompany]: ...

    def get_or_create(self, *, name: str, **defaults) -> tuple[JobCompany, bool]: ...

    def search(self, *, name: str) -> list[JobCompany]: ...
