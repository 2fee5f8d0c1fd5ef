from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from common.request_id import set_request_id
from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class RequestIdMiddleware:
    """
    요청마다 request_id 를 정하고 (X-Request-ID 헤더가 있으면 그대로 사용)
    응답 헤더와 로그 레코드에 싣습니다. API 요청은 처리 시간도 기록합니다.
    """

    header_name = "HTTP_X_REQUEST_ID"
    response_header = "X-Request-ID"
    logged_prefix = "/api/"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        incoming = (request.META.get(self.header_name) or "").strip()
        request_id = incoming or uuid.uuid4().hex

        request.request_id = request_id  # type: ignore[attr-defined]
        set_request_id(request_id)

        started = time.monotonic()
        response = self.get_response(request)
        response[self.response_header] = request_id

        if request.path.startswith(self.logged_prefix):
            elapsed_ms = (time.monotonic() - started) * 1000
            logger.info(
                f"{request.method} {request.path} -> {response.status_code} "
                f"({elapsed_ms:.1f}ms)"
            )
        return response
