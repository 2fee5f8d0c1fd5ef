"""
Tests for api_exception_handler

예외 -> {success, message, data} 응답 봉투 변환 테스트
"""

import logging

import pytest
from common.exceptions import (
    Conflict,
    Forbidden,
    NotFound,
    ValidationFailed,
    api_exception_handler,
)
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError
from rest_framework import serializers, status
from rest_framework.exceptions import NotAuthenticated


class DummyView:
    pass


CONTEXT = {"view": DummyView()}


class TestApiExceptionHandler:
    @pytest.mark.parametrize(
        "exc,expected_status",
        [
            (ValidationFailed("bad input"), status.HTTP_400_BAD_REQUEST),
            (Forbidden("nope"), status.HTTP_403_FORBIDDEN),
            (NotFound("missing"), status.HTTP_404_NOT_FOUND),
            (Conflict("twice"), status.HTTP_409_CONFLICT),
        ],
    )
    def test_application_errors_map_to_status(self, exc, expected_status):
        response = api_exception_handler(exc, CONTEXT)

        assert response.status_code == expected_status
        assert response.data == {
            "success": False,
            "message": str(exc.detail),
            "data": None,
        }

    def test_serializer_errors_are_returned_as_data(self):
        exc = serializers.ValidationError({"email": ["Enter a valid email address."]})

        response = api_exception_handler(exc, CONTEXT)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["message"] == "Validation failed"
        assert response.data["data"] == {"email": ["Enter a valid email address."]}

    def test_not_authenticated_is_401(self):
        response = api_exception_handler(NotAuthenticated(), CONTEXT)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["success"] is False

    def test_integrity_error_is_conflict(self, caplog):
        with caplog.at_level(logging.WARNING):
            response = api_exception_handler(IntegrityError("UNIQUE failed"), CONTEXT)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data["message"] == "Duplicate entry or constraint violation"
        assert "DummyView" in caplog.text

    def test_django_validation_error_is_400(self):
        response = api_exception_handler(DjangoValidationError("Bad value"), CONTEXT)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["message"] == "Bad value"

    def test_unexpected_error_is_500_and_logged(self, caplog):
        with caplog.at_level(logging.ERROR):
            response = api_exception_handler(RuntimeError("boom"), CONTEXT)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {
            "success": False,
            "message": "An unexpected error occurred",
            "data": None,
        }
        assert "boom" in caplog.text
