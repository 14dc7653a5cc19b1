"""Shared response envelope used by all JSON endpoints"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def send_response(message: str, data: Any = None, code: int = 200) -> JSONResponse:
    """Wrap a payload as {"code", "message", "data"}"""
    return JSONResponse(
        status_code=code,
        content=jsonable_encoder({"code": code, "message": message, "data": data}),
    )
