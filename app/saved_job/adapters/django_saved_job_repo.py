from __future__ import annotations

from django.db.models import QuerySet
from saved_job.models import JobSeekerSave
from saved_job.ports.saved_job_repo import SavedJobRepositoryPort


class DjangoSavedJobRepository(SavedJobRepositoryPort):
    def exists(self, *, job_seeker_id: int, job_id: int) -> bool:
        return JobSeekerSave.objects.filter(
            job_seeker_id=job_seeker_id, job_id=job_id
        ).exists()

    def create(self, **fields) -> JobSeekerSave:
        return JobSeekerSave.objects.create(**fields)

    def delete_for(self, *, job_seeker_id: int, job_id: int) -> int:
        deleted, _ = JobSeekerSave.objects.filter(
            job_seeker_id=job_seeker_id, job_id=job_id
        ).delete()
        return deleted

    def list_by_job_seeker(self, job_seeker_id: int) -> QuerySet[JobSeekerSave]:
        return JobSeekerSave.objects.select_related(
            "job",
            "job__posted_by",
            "job__job_company",
            "job__job_location",
        ).filter(job_seeker_id=job_seeker_id)

    def count_by_job_seeker(self, job_seeker_id: int) -> int:
        return JobSeekerSave.objects.filter(job_seeker_id=job_seeker_id).count()
