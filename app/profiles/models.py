from django.conf import settings
from django.db import models


class JobSeekerProfile(models.Model):
    """
    구직자 프로필 (User 와 1:1, PK = user_id)

    profile_photo / resume 에는 MEDIA_ROOT 기준 저장 경로가 들어갑니다.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="job_seeker_profile",
    )

    # Personal
    first_name = models.CharField(max_length=150, blank=True)
    last_name = models.CharField(max_length=150, blank=True)
    phone = models.CharField(max_length=30, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=30, blank=True)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, blank=True)
    willing_to_relocate = models.BooleanField(default=False)

    # Professional
    current_job_title = models.CharField(max_length=200, blank=True)
    experience = models.TextField(blank=True)
    education = models.TextField(blank=True)
    work_authorization = models.CharField(max_length=100, blank=True)
    employment_type = models.CharField(max_length=50, blank=True)
    expected_salary = models.CharField(max_length=100, blank=True)
    availability_date = models.DateField(null=True, blank=True)
    linkedin_profile = models.CharField(max_length=255, blank=True)
    github_profile = models.CharField(max_length=255, blank=True)
    portfolio_website = models.CharField(max_length=255, blank=True)

    # Documents
    profile_photo = models.CharField(max_length=255, blank=True)
    resume = models.CharField(max_length=255, blank=True)
    resume_original_name = models.CharField(max_length=255, blank=True)
    resume_upload_date = models.DateTimeField(null=True, blank=True)
    resume_file_size = models.BigIntegerField(null=True, blank=True)
    cover_letter = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "job_seeker_profile"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def photos_image_path(self) -> str | None:
        if not self.profile_photo:
            return None
        return f"{settings.MEDIA_URL}{self.profile_photo}"

    def __str__(self) -> str:  # pragma: no cover
        return f"JobSeekerProfile(user_id={self.user_id})"


class RecruiterProfile(models.Model):
    """채용 담당자 프로필 (User 와 1:1, PK = user_id)"""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="recruiter_profile",
    )
    first_name = models.CharField(max_length=150, blank=True)
    last_name = models.CharField(max_length=150, blank=True)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, blank=True)
    company = models.CharField(max_length=200, blank=True)
    profile_photo = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "recruiter_profile"

    @property
    def photos_image_path(self) -> str | None:
        if not self.profile_photo:
            return None
        return f"{settings.MEDIA_URL}{self.profile_photo}"

    def __str__(self) -> str:  # pragma: no cover
        return f"RecruiterProfile(user_id={self.user_id})"
