from django.conf import settings
from django.db import models
from django.utils import timezone


class JobCompany(models.Model):
    """회사"""

    name = models.CharField(max_length=200, unique=True)
    logo = models.CharField(max_length=255, blank=True)
    website = models.CharField(max_length=255, blank=True)

    class Meta:
        db_table = "job_company"
        ordering = ["name"]

    def __str__(self) -> str:  # pragma: no cover
        return self.name


class JobLocation(models.Model):
    """근무지 (city, state, country 조합 유일)"""

    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100)

    class Meta:
        db_table = "job_location"
        ordering = ["country", "state", "city"]
        constraints = [
            models.UniqueConstraint(
                fields=["city", "state", "country"],
                name="uniq_job_location_city_state_country",
            ),
        ]

    @property
    def display(self) -> str:
        return ", ".join(part for part in (self.city, self.country) if part)

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.city}, {self.state}, {self.country}"


class JobPostActivity(models.Model):
    """
    채용 공고

    - posted_by: 공고를 등록한 Recruiter
    - job_location / job_company: 선택 항목
    """

    JOB_TYPES = ["Full-Time", "Part-Time", "Contract", "Freelance", "InternShip"]
    REMOTE_OPTIONS = ["Office-Only", "Remote-Only", "Partial-Remote"]

    JOB_TYPE_CHOICES = [(value, value) for value in JOB_TYPES]
    REMOTE_CHOICES = [(value, value) for value in REMOTE_OPTIONS]

    posted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="job_posts",
        help_text="공고를 등록한 Recruiter",
    )
    job_location = models.ForeignKey(
        JobLocation,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="jobs",
    )
    job_company = models.ForeignKey(
        JobCompany,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="jobs",
    )
    job_title = models.CharField(max_length=200)
    description_of_job = models.TextField(max_length=5000)
    job_type = models.CharField(max_length=50, choices=JOB_TYPE_CHOICES)
    salary = models.CharField(max_length=100)
    remote = models.CharField(max_length=50, choices=REMOTE_CHOICES)
    posted_date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "job_post_activity"
        ordering = ["-posted_date", "-id"]
        indexes = [
            models.Index(fields=["posted_date"], name="job_posted_date_idx"),
            models.Index(fields=["job_type", "remote"], name="job_type_remote_idx"),
        ]

    @property
    def company_name(self) -> str | None:
        return self.job_company.name if self.job_company_id else None

    def __str__(self) -> str:  # pragma: no cover
        return f"JobPostActivity(id={self.id}, title={self.job_title})"
