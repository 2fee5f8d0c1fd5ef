from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

SORT_FIELDS = {
    "saved_at": "saved_at",
    "job_title": "job__job_title",
    "posted_date": "job__posted_date",
}


class SavedJobFilter(BaseModel):
    """저장한 공고 목록 필터 (GET /api/saved-jobs/)"""

    search: Optional[str] = Field(default=None, description="제목/회사/지역 검색어")
    job_type: Optional[str] = Field(default=None, description="고용 형태")
    remote: Optional[str] = Field(
        default=None, description="'true' 면 원격 가능 공고, 그 외 값은 사무실 근무"
    )
    sort_by: str = Field(default="saved_at", description="정렬 기준")
    sort_order: Literal["asc", "desc"] = Field(default="desc", description="정렬 방향")

    @field_validator("search", "job_type", "remote", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
        return value or None

    @field_validator("sort_by", mode="before")
    @classmethod
    def _known_sort_field(cls, value):
        return value if value in SORT_FIELDS else "saved_at"

    @field_validator("sort_order", mode="before")
    @classmethod
    def _normalize_order(cls, value):
        value = (value or "desc").lower()
        return value if value in ("asc", "desc") else "desc"

    @property
    def ordering(self) -> str:
        field = SORT_FIELDS[self.sort_by]
        return field if self.sort_order == "asc" else f"-{field}"
