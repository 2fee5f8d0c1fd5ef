from django.db import models
from django.utils import timezone
from job.models import JobPostActivity
from profiles.models import JobSeekerProfile


class JobSeekerSave(models.Model):
    """구직자가 저장한 채용 공고 ((job_seeker, job) 조합 유일)"""

    job_seeker = models.ForeignKey(
        JobSeekerProfile,
        on_delete=models.CASCADE,
        related_name="saved_jobs",
    )
    job = models.ForeignKey(
        JobPostActivity,
        on_delete=models.CASCADE,
        related_name="saves",
    )
    saved_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "job_seeker_save"
        ordering = ["-saved_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["job_seeker", "job"],
                name="uniq_save_job_seeker_job",
            ),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"JobSeekerSave(job_seeker={self.job_seeker_id}, job={self.job_id})"
