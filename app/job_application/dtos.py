from __future__ import annotations

from pydantic import BaseModel, Field


class ApplicationStatisticsDTO(BaseModel):
    """Recruiter 지원 현황 통계 (모든 상태가 0 으로 초기화됨)"""

    counts: dict[str, int] = Field(description="상태별 지원 수")
    total_applications: int = Field(description="전체 지원 수")

    def as_payload(self) -> dict:
        return {**self.counts, "total_applications": self.total_applications}
