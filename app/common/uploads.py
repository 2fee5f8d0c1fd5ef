"""
파일 업로드 유틸리티

프로필 사진/이력서를 검증(확장자, 크기)한 뒤 default_storage에 저장합니다.
저장 경로: photos/<role>/<user_id>/<file_name>
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from common.exceptions import ValidationFailed
from django.conf import settings
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import UploadedFile
from django.utils.text import get_valid_filename

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StoredFile:
    path: str
    original_name: str
    size: int


def get_file_extension(filename: str) -> str:
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


def upload_directory(role_name: str, user_id: int) -> str:
    """'Job Seeker' -> photos/jobseeker/<id>"""
    role_dir = role_name.replace(" ", "").lower()
    return f"photos/{role_dir}/{user_id}"


def store_upload(
    upload: UploadedFile, *, directory: str, allowed_extensions: Iterable[str]
) -> StoredFile:
    """
    업로드 파일 저장

    Args:
        upload: request.FILES 의 파일 객체
        directory: 저장 디렉터리 (MEDIA_ROOT 기준 상대 경로)
        allowed_extensions: 허용 확장자 (점 없이, 소문자)

    Returns:
        StoredFile (저장 경로, 원본 파일명, 크기)

    Raises:
        ValidationFailed: 파일명 누락, 허용되지 않은 확장자, 크기 초과
    """
    original_name = upload.name or ""
    if not original_name:
        raise ValidationFailed("No filename provided")

    allowed = {ext.lower() for ext in allowed_extensions}
    ext = get_file_extension(original_name)
    if ext not in allowed:
        raise ValidationFailed(
            f"Unsupported file type '{ext}'. Allowed: {', '.join(sorted(allowed))}"
        )

    max_mb = getattr(settings, "UPLOAD_MAX_SIZE_MB", 10)
    if upload.size > max_mb * 1024 * 1024:
        raise ValidationFailed(f"File too large. Maximum size: {max_mb}MB")

    file_name = get_valid_filename(original_name.rsplit("/", 1)[-1])
    saved_path = default_storage.save(f"{directory}/{file_name}", upload)
    logger.info(f"Stored upload {saved_path} ({upload.size} bytes)")
    return StoredFile(path=saved_path, original_name=original_name, size=upload.size)
