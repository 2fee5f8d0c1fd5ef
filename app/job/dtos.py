from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from django.utils import timezone
from pydantic import BaseModel, Field, field_validator

MAX_SEARCH_DAYS = 36500


class JobSearchCriteria(BaseModel):
    """채용 공고 검색 조건 (GET /api/jobs/, /api/jobs/search/)"""

    job: Optional[str] = Field(default=None, description="공고 제목 검색어")
    location: Optional[str] = Field(
        default=None, description="city/state/country 검색어"
    )
    job_types: list[str] = Field(default_factory=list, description="고용 형태 목록")
    remote: list[str] = Field(default_factory=list, description="원격 근무 옵션 목록")
    days: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_SEARCH_DAYS,
        description="최근 N일 이내 등록 공고만",
    )

    @field_validator("job", "location", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
        return value or None

    @field_validator("job_types", "remote", mode="before")
    @classmethod
    def _drop_blank_items(cls, value):
        if value is None:
            return []
        return [item.strip() for item in value if item and item.strip()]

    @property
    def has_filters(self) -> bool:
        return bool(
            self.job or self.location or self.job_types or self.remote or self.days
        )

    @property
    def posted_since(self) -> Optional[datetime]:
        if not self.days:
            return None
        return timezone.now() - timedelta(days=self.days)


class JobFormMetadataDTO(BaseModel):
    """공고 등록 폼 메타데이터 (GET /api/jobs/create/)"""

    companies: list[dict] = Field(description="회사 목록 (id, name)")
    locations: list[dict] = Field(description="근무지 목록 (id, city, state, country)")
    job_types: list[str] = Field(description="고용 형태 옵션")
    remote_options: list[str] = Field(description="원격 근무 옵션")
