from django.db import models
from django.utils import timezone
from job.models import JobPostActivity
from profiles.models import JobSeekerProfile


class ApplicationStatus(models.TextChoices):
    APPLIED = "APPLIED", "Applied"
    UNDER_REVIEW = "UNDER_REVIEW", "Under Review"
    INTERVIEW_SCHEDULED = "INTERVIEW_SCHEDULED", "Interview Scheduled"
    INTERVIEWED = "INTERVIEWED", "Interviewed"
    OFFERED = "OFFERED", "Offered"
    HIRED = "HIRED", "Hired"
    REJECTED = "REJECTED", "Rejected"
    WITHDRAWN = "WITHDRAWN", "Withdrawn"


# 정상 진행 순서 (Rejected / Withdrawn 은 순서 밖의 종료 상태)
STATUS_PROGRESSION = [
    ApplicationStatus.APPLIED,
    ApplicationStatus.UNDER_REVIEW,
    ApplicationStatus.INTERVIEW_SCHEDULED,
    ApplicationStatus.INTERVIEWED,
    ApplicationStatus.OFFERED,
    ApplicationStatus.HIRED,
]

TERMINAL_STATUSES = {
    ApplicationStatus.HIRED,
    ApplicationStatus.REJECTED,
    ApplicationStatus.WITHDRAWN,
}


class JobSeekerApply(models.Model):
    """
    구직자의 채용 공고 지원 내역

    (job_seeker, job) 조합은 유일합니다. 중복 지원은 DB 제약으로도 막힙니다.
    """

    job_seeker = models.ForeignKey(
        JobSeekerProfile,
        on_delete=models.CASCADE,
        related_name="applications",
    )
    job = models.ForeignKey(
        JobPostActivity,
        on_delete=models.CASCADE,
        related_name="applications",
    )
    apply_date = models.DateTimeField(default=timezone.now)
    cover_letter = models.TextField(blank=True)
    status = models.CharField(
        max_length=30,
        choices=ApplicationStatus.choices,
        default=ApplicationStatus.APPLIED,
    )
    resume_path = models.CharField(max_length=255, blank=True)
    last_updated = models.DateTimeField(auto_now=True)
    recruiter_notes = models.TextField(blank=True)

    class Meta:
        db_table = "job_seeker_apply"
        ordering = ["-apply_date", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["job_seeker", "job"],
                name="uniq_apply_job_seeker_job",
            ),
        ]
        indexes = [
            models.Index(fields=["status"], name="apply_status_idx"),
            models.Index(fields=["apply_date"], name="apply_date_idx"),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return (
            f"JobSeekerApply(job_seeker={self.job_seeker_id}, job={self.job_id}, "
            f"status={self.status})"
        )
