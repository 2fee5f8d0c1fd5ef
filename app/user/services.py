"""
User / Auth Service

회원 가입, 로그인, JWT 발급/검증 로직
"""

from __future__ import annotations

import logging

from common.application.result import Err, Ok
from common.exceptions import Conflict, ValidationFailed
from django.contrib.auth import authenticate
from django.db import transaction
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken
from user.adapters.django_user_repo import DjangoUserRepository
from user.application.container import build_register_user_usecase
from user.models import User, UsersType

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class UserService:
    """
    사용자/인증 서비스
    """

    @staticmethod
    def register(
        *,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        user_type_id: int,
    ) -> User:
        """
        회원 가입

        Raises:
            Conflict: 이미 가입된 이메일
            ValidationFailed: 존재하지 않는 사용자 유형
        """
        usecase = build_register_user_usecase()
        with transaction.atomic():
            result = usecase.execute(
                email=email,
                password=password,
                first_name=first_name,
                last_name=last_name,
                user_type_id=user_type_id,
            )
        if isinstance(result, Err):
            logger.warning(f"Registration rejected ({result.code}): {result.details}")
            if result.code == "EMAIL_EXISTS":
                raise Conflict(result.message)
            raise ValidationFailed(result.message)

        assert isinstance(result, Ok)
        user = result.value
        logger.info(f"Registered user {user.id} as {user.role}")
        return user

    @staticmethod
    def authenticate(request, *, email: str, password: str) -> User:
        """
        이메일/비밀번호 인증

        Raises:
            AuthenticationFailed: 자격 증명 불일치 또는 비활성 사용자 (401)
        """
        user = authenticate(
            request=request, username=email.strip().lower(), password=password
        )
        if user is None:
            logger.warning(f"Failed login attempt for {email}")
            raise AuthenticationFailed("Invalid email or password")
        return user

    @staticmethod
    def issue_tokens(user: User) -> dict:
        """
        access/refresh 토큰 발급

        access 토큰에는 user_id 외에 email, role 클레임이 포함됩니다.
        """
        refresh = RefreshToken.for_user(user)
        refresh["email"] = user.email
        refresh["role"] = user.role
        access = refresh.access_token
        return {
            "token": str(access),
            "type": "Bearer",
            "refresh": str(refresh),
            "user_id": user.id,
            "email": user.email,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "user_type": user.role,
            "expires_in": int(access.lifetime.total_seconds()),
        }

    @staticmethod
    def verify_token(raw_token: str | None) -> bool:
        """
        access 토큰 검증 (서명, 만료, 사용자 존재/활성 여부)

        예외를 던지지 않고 bool 로만 응답합니다.
        """
        if not raw_token:
            return False
        try:
            token = AccessToken(raw_token)
        except TokenError as e:
            logger.info(f"Token verification failed: {e}")
            return False

        user_id = token.get(api_settings.USER_ID_CLAIM)
        if user_id is None:
            return False
        user = DjangoUserRepository().get_by_id(int(user_id))
        return bool(user and user.is_active)

    @staticmethod
    def extract_bearer_token(authorization: str | None) -> str | None:
        if authorization and authorization.startswith(BEARER_PREFIX):
            return authorization[len(BEARER_PREFIX) :].strip() or None
        return None

    @staticmethod
    def list_user_types() -> list[UsersType]:
        return DjangoUserRepository().list_user_types()
