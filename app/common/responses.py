from __future__ import annotations

from typing import Any

from rest_framework import status as http_status
from rest_framework.response import Response


def api_response(
    data: Any = None,
    message: str = "Success",
    status: int = http_status.HTTP_200_OK,
) -> Response:
    """성공 응답 봉투 {success, message, data}"""
    return Response(
        {"success": True, "message": message, "data": data}, status=status
    )
