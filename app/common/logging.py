from __future__ import annotations

import logging

from common.request_id import get_request_id


class RequestIdFilter(logging.Filter):
    """
    LOGGING 포맷의 %(request_id)s 를 채웁니다.

    요청 밖(관리 명령, 테스트)에서는 "-" 가 들어갑니다.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = get_request_id()  # type: ignore[attr-defined]
        return True
