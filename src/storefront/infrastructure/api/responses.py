"""The response envelope shared by every endpoint.

    {"success": bool, "data": ..., "message": ..., "count": ...}

Keys without a value are left out.
"""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse


def envelope(
    data: Any = None,
    *,
    status_code: int = 200,
    message: str | None = None,
    count: int | None = None,
    success: bool = True,
    **extra: Any,
) -> JSONResponse:
    content: dict[str, Any] = {"success": success}
    if count is not None:
        content["count"] = count
    if message is not None:
        content["message"] = message
    if data is not None:
        content["data"] = data
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


def failure(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return envelope(status_code=status_code, message=message, success=False, **extra)
