"""
유스케이스 반환 타입

유스케이스는 예외 대신 Ok / Err 를 반환하고,
서비스 계층이 Err.code 를 보고 HTTP 예외(409, 403, 404, 400)로 변환합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Err:
    """
    실패 결과

    - code: EMAIL_EXISTS, INVALID_USER_TYPE, INVALID_STATUS, NOT_FOUND, FORBIDDEN 등
    - message: 응답 봉투의 message 로 그대로 쓰일 수 있는 문장
    - details: 로그용 부가 정보
    """

    code: str
    message: str
    details: Optional[dict] = None


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


Result = Ok[T] | Err
