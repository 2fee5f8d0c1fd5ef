"""
JWT 인증 (Authorization 헤더 / HttpOnly Cookie)

브라우저 클라이언트는 로그인 시 설정된 access_token 쿠키로,
API 클라이언트는 Authorization: Bearer <token> 헤더로 인증합니다.
"""

import logging

from django.conf import settings
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication

logger = logging.getLogger(__name__)


class JWTCookieAuthentication(JWTAuthentication):
    """
    Authorization 헤더를 먼저 확인하고, 없으면 access_token 쿠키를 사용합니다.

    만료/위조 토큰이나 삭제된 사용자의 토큰은 익명 요청으로 처리합니다.
    공개 엔드포인트는 그대로 응답하고, 인증이 필요한 엔드포인트는
    IsAuthenticated 등 권한 검사에서 401 을 반환합니다.
    """

    def get_cookie_token(self, request):
        cookie_name = getattr(settings, "JWT_AUTH_COOKIE", "access_token")
        raw = request.COOKIES.get(cookie_name)
        return raw or None

    def authenticate(self, request):
        try:
            return self._authenticate(request)
        except AuthenticationFailed as e:
            logger.info(f"Ignoring invalid token on {request.path}: {e.detail}")
            return None

    def _authenticate(self, request):
        from_header = super().authenticate(request)
        if from_header is not None:
            return from_header

        raw = self.get_cookie_token(request)
        if raw is None:
            return None

        validated = self.get_validated_token(raw)
        return self.get_user(validated), validated
