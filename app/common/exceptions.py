"""
API 예외 계층 및 공통 예외 핸들러

서비스 계층은 아래 예외를 raise 하고, api_exception_handler가
HTTP 상태 코드와 {success, message, data} 응답 봉투로 변환합니다.
"""

from __future__ import annotations

import logging
from typing import Any

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class JobPortalError(APIException):
    """애플리케이션 예외의 기반 클래스."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "An unexpected error occurred"
    default_code = "error"


class ValidationFailed(JobPortalError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"
    default_code = "validation_failed"


class Forbidden(JobPortalError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You do not have permission to perform this action"
    default_code = "forbidden"


class NotFound(JobPortalError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"
    default_code = "not_found"


class Conflict(JobPortalError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists"
    default_code = "conflict"


def _split_detail(payload: Any) -> tuple[str, Any]:
    """DRF 에러 payload를 (message, data)로 분리합니다."""
    if isinstance(payload, dict):
        if "detail" in payload:
            extra = {key: value for key, value in payload.items() if key != "detail"}
            return str(payload["detail"]), extra or None
        return "Validation failed", payload
    if isinstance(payload, list):
        return (str(payload[0]) if payload else "Validation failed"), payload
    return str(payload), None


def api_exception_handler(exc: Exception, context: dict) -> Response:
    """
    REST_FRAMEWORK["EXCEPTION_HANDLER"]

    - APIException 계열: DRF 기본 핸들러로 상태 코드를 결정
    - IntegrityError: 409 (unique 제약 위반)
    - Django ValidationError: 400
    - 그 외: 500 + 스택 트레이스 로깅
    """
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if isinstance(exc, IntegrityError):
        logger.warning(f"Integrity violation in {view_name}: {exc}")
        exc = Conflict("Duplicate entry or constraint violation")
    elif isinstance(exc, DjangoValidationError):
        exc = ValidationFailed(detail=exc.messages)

    response = exception_handler(exc, context)
    if response is None:
        logger.error(f"Unhandled exception in {view_name}: {exc}", exc_info=exc)
        return Response(
            {
                "success": False,
                "message": "An unexpected error occurred",
                "data": None,
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    message, data = _split_detail(response.data)
    if response.status_code >= 500:
        logger.error(f"{view_name} failed: {message}")
    response.data = {"success": False, "message": message, "data": data}
    return response
