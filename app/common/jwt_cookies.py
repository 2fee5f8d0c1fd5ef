"""
로그인/회원가입 응답에 access/refresh 토큰을 HttpOnly 쿠키로 싣고,
로그아웃 응답에서 제거합니다.
"""

from django.conf import settings
from rest_framework.response import Response


def _cookie_names() -> tuple[str, str]:
    return (
        getattr(settings, "JWT_AUTH_COOKIE", "access_token"),
        getattr(settings, "JWT_AUTH_REFRESH_COOKIE", "refresh_token"),
    )


def _cookie_scope() -> dict:
    return {
        "path": getattr(settings, "JWT_AUTH_COOKIE_PATH", "/"),
        "domain": getattr(settings, "JWT_AUTH_COOKIE_DOMAIN", None),
        "samesite": getattr(settings, "JWT_AUTH_COOKIE_SAMESITE", "Lax"),
    }


def set_jwt_cookies(
    response: Response, access_token: str, refresh_token: str
) -> Response:
    """토큰 수명과 같은 max_age 로 쿠키를 설정합니다."""
    access_name, refresh_name = _cookie_names()
    options = {
        **_cookie_scope(),
        "httponly": getattr(settings, "JWT_AUTH_COOKIE_HTTP_ONLY", True),
        "secure": getattr(settings, "JWT_AUTH_COOKIE_SECURE", not settings.DEBUG),
    }
    lifetimes = {
        access_name: settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"],
        refresh_name: settings.SIMPLE_JWT["REFRESH_TOKEN_LIFETIME"],
    }

    for name, value in ((access_name, access_token), (refresh_name, refresh_token)):
        response.set_cookie(
            key=name,
            value=value,
            max_age=int(lifetimes[name].total_seconds()),
            **options,
        )
    return response


def delete_jwt_cookies(response: Response) -> Response:
    for name in _cookie_names():
        response.delete_cookie(key=name, **_cookie_scope())
    return response
