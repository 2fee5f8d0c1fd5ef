"""
Profile Service

구직자 / Recruiter 프로필 조회 및 부분 수정, 파일 업로드 처리
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Optional

from common.exceptions import Forbidden, NotFound, ValidationFailed
from common.uploads import store_upload, upload_directory
from django.conf import settings
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import UploadedFile
from django.db import transaction
from django.utils import timezone
from profiles.application.container import build_profile_repo
from profiles.models import JobSeekerProfile, RecruiterProfile
from user.models import User

logger = logging.getLogger(__name__)

JOB_SEEKER_TEXT_FIELDS = [
    "first_name",
    "last_name",
    "phone",
    "gender",
    "city",
    "state",
    "country",
    "current_job_title",
    "experience",
    "education",
    "work_authorization",
    "employment_type",
    "expected_salary",
    "linkedin_profile",
    "github_profile",
    "portfolio_website",
    "cover_letter",
]
JOB_SEEKER_DATE_FIELDS = ["date_of_birth", "availability_date"]

RECRUITER_TEXT_FIELDS = [
    "first_name",
    "last_name",
    "company",
    "city",
    "state",
    "country",
]

DOWNLOAD_FILE_TYPES = {"photo", "resume"}


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _apply_text_fields(profile, data: Dict, field_names: list[str]) -> list[str]:
    """비어 있지 않은 값만 반영하고, 변경된 필드명을 반환합니다."""
    changed = []
    for name in field_names:
        value = data.get(name)
        if value is None:
            continue
        value = str(value).strip()
        if not value:
            continue
        setattr(profile, name, value)
        changed.append(name)
    return changed


class ProfileService:
    """
    프로필 서비스

    수정 요청은 값이 있는 필드만 반영합니다 (부분 수정).
    """

    @staticmethod
    def require_job_seeker_profile(user: User) -> JobSeekerProfile:
        """
        구직자 프로필 조회 (없으면 생성)

        Raises:
            Forbidden: Job Seeker 가 아닌 사용자
        """
        if not user.is_job_seeker:
            raise Forbidden("Only job seekers can perform this action")
        repo = build_profile_repo()
        profile = repo.get_job_seeker_profile(user.id)
        if profile is None:
            profile = repo.create_for_user(user)
        return profile

    @staticmethod
    def require_recruiter_profile(user: User) -> RecruiterProfile:
        """
        Recruiter 프로필 조회 (없으면 생성)

        Raises:
            Forbidden: Recruiter 가 아닌 사용자
        """
        if not user.is_recruiter:
            raise Forbidden("Only recruiters can perform this action")
        repo = build_profile_repo()
        profile = repo.get_recruiter_profile(user.id)
        if profile is None:
            profile = repo.create_for_user(user)
        return profile

    @staticmethod
    def get_profile(user: User) -> Optional[JobSeekerProfile | RecruiterProfile]:
        if user.is_job_seeker:
            return ProfileService.require_job_seeker_profile(user)
        if user.is_recruiter:
            return ProfileService.require_recruiter_profile(user)
        return None

    @staticmethod
    def _sync_user_name(user: User, profile) -> None:
        update_fields = []
        if profile.first_name and profile.first_name != user.first_name:
            user.first_name = profile.first_name
            update_fields.append("first_name")
        if profile.last_name and profile.last_name != user.last_name:
            user.last_name = profile.last_name
            update_fields.append("last_name")
        if update_fields:
            user.save(update_fields=update_fields)

    @staticmethod
    def update_job_seeker_profile(
        user: User,
        data: Dict,
        *,
        profile_photo: Optional[UploadedFile] = None,
        resume: Optional[UploadedFile] = None,
    ) -> JobSeekerProfile:
        """
        구직자 프로필 부분 수정

        Args:
            user: Job Seeker
            data: 폼 필드 (빈 값은 무시)
            profile_photo: 프로필 사진 업로드 (선택)
            resume: 이력서 업로드 (선택)

        Returns:
            수정된 JobSeekerProfile
        """
        profile = ProfileService.require_job_seeker_profile(user)
        changed = _apply_text_fields(profile, data, JOB_SEEKER_TEXT_FIELDS)

        for name in JOB_SEEKER_DATE_FIELDS:
            raw = (data.get(name) or "").strip()
            if not raw:
                continue
            try:
                setattr(profile, name, date.fromisoformat(raw))
                changed.append(name)
            except ValueError:
                # 잘못된 날짜는 무시하고 나머지 필드는 반영
                logger.warning(f"Ignoring invalid {name} for user {user.id}: {raw}")

        relocate = data.get("willing_to_relocate")
        if relocate is not None and str(relocate).strip():
            profile.willing_to_relocate = _parse_bool(str(relocate))
            changed.append("willing_to_relocate")

        directory = upload_directory(user.role, user.id)
        if profile_photo is not None:
            stored = store_upload(
                profile_photo,
                directory=directory,
                allowed_extensions=settings.UPLOAD_PHOTO_EXTENSIONS,
            )
            profile.profile_photo = stored.path
            changed.append("profile_photo")

        if resume is not None:
            stored = store_upload(
                resume,
                directory=directory,
                allowed_extensions=settings.UPLOAD_RESUME_EXTENSIONS,
            )
            profile.resume = stored.path
            profile.resume_original_name = stored.original_name
            profile.resume_file_size = stored.size
            profile.resume_upload_date = timezone.now()
            changed.append("resume")

        with transaction.atomic():
            profile = build_profile_repo().save(profile)
            ProfileService._sync_user_name(user, profile)
        logger.info(f"Updated job seeker profile {user.id}: {changed}")
        return profile

    @staticmethod
    def update_recruiter_profile(
        user: User,
        data: Dict,
        *,
        profile_photo: Optional[UploadedFile] = None,
    ) -> RecruiterProfile:
        """Recruiter 프로필 부분 수정"""
        profile = ProfileService.require_recruiter_profile(user)
        changed = _apply_text_fields(profile, data, RECRUITER_TEXT_FIELDS)

        if profile_photo is not None:
            stored = store_upload(
                profile_photo,
                directory=upload_directory(user.role, user.id),
                allowed_extensions=settings.UPLOAD_PHOTO_EXTENSIONS,
            )
            profile.profile_photo = stored.path
            changed.append("profile_photo")

        with transaction.atomic():
            profile = build_profile_repo().save(profile)
            ProfileService._sync_user_name(user, profile)
        logger.info(f"Updated recruiter profile {user.id}: {changed}")
        return profile

    @staticmethod
    def resolve_download_url(user: User, file_type: str, file_name: str) -> str:
        """
        사용자 본인 업로드 파일의 URL

        Raises:
            ValidationFailed: 지원하지 않는 파일 유형
            NotFound: 파일 없음
        """
        if file_type not in DOWNLOAD_FILE_TYPES:
            raise ValidationFailed(f"Unsupported file type: {file_type}")
        if not user.role:
            raise Forbidden("User has no profile")

        if "/" in file_name or ".." in file_name:
            raise NotFound("File not found")
        relative_path = f"{upload_directory(user.role, user.id)}/{file_name}"
        if not default_storage.exists(relative_path):
            raise NotFound("File not found")
        return f"{settings.MEDIA_URL}{relative_path}"
