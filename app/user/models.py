from django.contrib.auth.models import AbstractUser
from django.db import models


class UsersType(models.Model):
    """
    사용자 유형 (Recruiter / Job Seeker)

    초기 데이터는 마이그레이션(0002_seed_users_types)에서 생성합니다.
    """

    RECRUITER = "Recruiter"
    JOB_SEEKER = "Job Seeker"

    user_type_name = models.CharField(max_length=50, unique=True)

    class Meta:
        db_table = "users_type"
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover
        return self.user_type_name


class User(AbstractUser):
    """
    이메일 로그인 사용자

    - email 이 로그인 식별자(USERNAME_FIELD)
    - date_joined 가 가입일(registration date)
    """

    email = models.EmailField(unique=True)
    user_type = models.ForeignKey(
        UsersType,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="users",
        help_text="사용자 유형 (Recruiter / Job Seeker)",
    )

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["username"]

    class Meta:
        indexes = [
            models.Index(fields=["user_type"], name="user_user_type_idx"),
        ]

    @property
    def role(self) -> str | None:
        return self.user_type.user_type_name if self.user_type_id else None

    @property
    def is_recruiter(self) -> bool:
        return self.role == UsersType.RECRUITER

    @property
    def is_job_seeker(self) -> bool:
        return self.role == UsersType.JOB_SEEKER

    def __str__(self) -> str:  # pragma: no cover
        return f"User(email={self.email}, role={self.role})"
