from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from django.db.models import Count, QuerySet
from job_application.models import JobSeekerApply
from job_application.ports.application_repo import ApplicationRepositoryPort


class DjangoApplicationRepository(ApplicationRepositoryPort):
    def _base_queryset(self) -> QuerySet[JobSeekerApply]:
        return JobSeekerApply.objects.select_related(
            "job",
            "job__posted_by",
            "job__job_company",
            "job__job_location",
            "job_seeker",
            "job_seeker__user",
        )

    def get_by_id(self, application_id: int) -> Optional[JobSeekerApply]:
        try:
            return self._base_queryset().get(pk=application_id)
        except JobSeekerApply.DoesNotExist:
            return None

    def exists(self, *, job_seeker_id: int, job_id: int) -> bool:
        return JobSeekerApply.objects.filter(
            job_seeker_id=job_seeker_id, job_id=job_id
        ).exists()

    def create(self, **fields) -> JobSeekerApply:
        application = JobSeekerApply.objects.create(**fields)
        return self.get_by_id(application.pk) or application

    def save(
        self, application: JobSeekerApply, *, update_fields: Optional[list[str]] = None
    ) -> JobSeekerApply:
        application.save(update_fields=update_fields)
        application.refresh_from_db()
        return application

    def list_by_job_seeker(self, job_seeker_id: int) -> QuerySet[JobSeekerApply]:
        return self._base_queryset().filter(job_seeker_id=job_seeker_id)

    def list_by_job(
        self, job_id: int, *, status: Optional[str] = None
    ) -> QuerySet[JobSeekerApply]:
        queryset = self._base_queryset().filter(job_id=job_id)
        if status:
            queryset = queryset.filter(status=status)
        return queryset

    def list_by_recruiter(
        self,
        recruiter_id: int,
        *,
        status: Optional[str] = None,
        since: Optional[datetime] = None,
    ) -> QuerySet[JobSeekerApply]:
        queryset = self._base_queryset().filter(job__posted_by_id=recruiter_id)
        if status:
            queryset = queryset.filter(status=status)
        if since is not None:
            queryset = queryset.filter(apply_date__gte=since)
        return queryset.order_by("-apply_date", "-id")

    def count_by_status_for_recruiter(self, recruiter_id: int) -> dict[str, int]:
        rows = (
            JobSeekerApply.objects.filter(job__posted_by_id=recruiter_id)
            .values("status")
            .annotate(total=Count("id"))
        )
        return {row["status"]: row["total"] for row in rows}

    def applied_job_ids(self, job_seeker_id: int, job_ids: Iterable[int]) -> set[int]:
        return set(
            JobSeekerApply.objects.filter(
                job_seeker_id=job_seeker_id, job_id__in=list(job_ids)
            ).values_list("job_id", flat=True)
        )
