"""
Auth Views

로그인/회원가입/로그아웃, 토큰 검증, 세션 로그인 엔드포인트 (Thin Controller)
"""

import logging

from common.jwt_cookies import delete_jwt_cookies, set_jwt_cookies
from common.responses import api_response
from django.contrib.auth import login, logout
from drf_spectacular.utils import OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView
from user.serializers import (
    UserLoginSerializer,
    UserRegistrationSerializer,
    UserSummarySerializer,
    UsersTypeSerializer,
)
from user.services import UserService

logger = logging.getLogger(__name__)


class AuthLoginView(APIView):
    authentication_classes = []
    permission_classes = []  # No permission required for login

    @extend_schema(
        request=UserLoginSerializer,
        responses={200: OpenApiTypes.OBJECT},
        summary="User Login",
        description="Login with email and password to get a JWT token.",
    )
    def post(self, request):
        serializer = UserLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserService.authenticate(
            request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        tokens = UserService.issue_tokens(user)
        logger.info(f"User {user.id} logged in")
        response = api_response(tokens, message="Login successful")
        return set_jwt_cookies(response, tokens["token"], tokens["refresh"])


class AuthRegisterView(APIView):
    authentication_classes = []
    permission_classes = []  # No permission required for registration

    @extend_schema(
        request=UserRegistrationSerializer,
        responses={201: OpenApiTypes.OBJECT},
        summary="User Registration",
        description="Register a Recruiter (user_type_id=1) or Job Seeker (user_type_id=2).",
    )
    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserService.register(**serializer.validated_data)
        tokens = UserService.issue_tokens(user)
        response = api_response(
            tokens, message="Registration successful", status=status.HTTP_201_CREATED
        )
        return set_jwt_cookies(response, tokens["token"], tokens["refresh"])


class AuthLogoutView(APIView):
    authentication_classes = []
    permission_classes = []

    @extend_schema(request=None, responses={200: OpenApiTypes.OBJECT})
    def post(self, request):
        # 세션 로그인 사용자도 함께 정리
        logout(request)
        response = api_response(message="Logout successful")
        return delete_jwt_cookies(response)


class CurrentUserView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: UserSummarySerializer})
    def get(self, request):
        data = UserSummarySerializer(request.user).data
        return api_response(data, message="User retrieved successfully")


class VerifyTokenView(APIView):
    """
    Authorization: Bearer <token> 헤더의 토큰 유효성 확인

    유효하지 않은 토큰도 에러가 아닌 data=false 로 응답합니다.
    """

    authentication_classes = []
    permission_classes = []

    def _verify(self, request):
        raw = UserService.extract_bearer_token(request.headers.get("Authorization"))
        is_valid = UserService.verify_token(raw)
        message = "Token is valid" if is_valid else "Token is invalid"
        return api_response(is_valid, message=message)

    @extend_schema(responses={200: OpenApiTypes.BOOL})
    def get(self, request):
        return self._verify(request)

    @extend_schema(request=None, responses={200: OpenApiTypes.BOOL})
    def post(self, request):
        return self._verify(request)


class SessionLoginView(APIView):
    """세션 기반 로그인 (Django session + SessionAuthentication)"""

    authentication_classes = []
    permission_classes = []

    @extend_schema(request=UserLoginSerializer, responses={200: UserSummarySerializer})
    def post(self, request):
        serializer = UserLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserService.authenticate(
            request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        login(request, user)
        logger.info(f"User {user.id} logged in with session")
        return api_response(UserSummarySerializer(user).data, message="Login successful")


class SessionLogoutView(APIView):
    authentication_classes = []
    permission_classes = []

    @extend_schema(request=None, responses={200: OpenApiTypes.OBJECT})
    def post(self, request):
        logout(request)
        return api_response(message="Logout successful")


class UserTypeListView(APIView):
    authentication_classes = []
    permission_classes = []

    @extend_schema(responses={200: UsersTypeSerializer(many=True)})
    def get(self, request):
        data = UsersTypeSerializer(UserService.list_user_types(), many=True).data
        return api_response(data, message="User types retrieved successfully")
