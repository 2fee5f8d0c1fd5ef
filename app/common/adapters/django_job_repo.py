from __future__ import annotations

from typing import Optional

from django.db.models import Count, Q, QuerySet
from job.dtos import JobSearchCriteria
from job.models import JobPostActivity


class DjangoJobPostRepository:
    def _base_queryset(self) -> QuerySet[JobPostActivity]:
        return JobPostActivity.objects.select_related(
            "posted_by", "job_location", "job_company"
        )

    def get_by_id(self, job_id: int) -> Optional[JobPostActivity]:
        try:
            return self._base_queryset().get(pk=job_id)
        except JobPostActivity.DoesNotExist:
            return None

    def list_all(self) -> QuerySet[JobPostActivity]:
        return self._base_queryset().order_by("-posted_date", "-id")

    def search(self, criteria: JobSearchCriteria) -> QuerySet[JobPostActivity]:
        """
        검색 조건을 AND 로 결합합니다.

        - job: 제목 부분 일치 (대소문자 무시)
        - location: city OR state OR country 부분 일치
        - job_types / remote: IN 필터 (비어 있으면 전체)
        - days: posted_date >= now - days
        """
        queryset = self._base_queryset()

        if criteria.job:
            queryset = queryset.filter(job_title__icontains=criteria.job)

        if criteria.location:
            queryset = queryset.filter(
                Q(job_location__city__icontains=criteria.location)
                | Q(job_location__state__icontains=criteria.location)
                | Q(job_location__country__icontains=criteria.location)
            )

        if criteria.job_types:
            queryset = queryset.filter(job_type__in=criteria.job_types)

        if criteria.remote:
            queryset = queryset.filter(remote__in=criteria.remote)

        if posted_since := criteria.posted_since:
            queryset = queryset.filter(posted_date__gte=posted_since)

        return queryset.order_by("-posted_date", "-id")

    def list_by_poster(self, user_id: int) -> QuerySet[JobPostActivity]:
        return (
            self._base_queryset()
            .filter(posted_by_id=user_id)
            .annotate(total_candidates=Count("applications", distinct=True))
            .order_by("-posted_date", "-id")
        )

    def create(self, **fields) -> JobPostActivity:
        job = JobPostActivity.objects.create(**fields)
        return self.get_by_id(job.pk) or job

    def save(
        self, job: JobPostActivity, *, update_fields: Optional[list[str]] = None
    ) -> JobPostActivity:
        job.save(update_fields=update_fields)
        job.refresh_from_db()
        return job

    def delete(self, job: JobPostActivity) -> None:
        job.delete()
