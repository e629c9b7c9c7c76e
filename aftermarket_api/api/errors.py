"""Error types and JSON renderers for the mock parts API.

Error bodies follow the shapes the frontend already parses:

    400  {"success": false, "message" | "error": ...}
    401  {"error": ..., "code": "MISSING_TENANT_ID", "timestamp": ...}
    404  {"success": false, "message": ..., "timestamp": ...}
    500  {"success": false, "error": ..., "timestamp": ...}
"""

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from aftermarket_api.utils.timestamps import iso_now


class ApiError(Exception):
    """Raised by handlers to return a non-2xx JSON body verbatim."""

    def __init__(self, status_code: int, body: dict[str, Any]) -> None:
        super().__init__(body.get("message") or body.get("error"))
        self.status_code = status_code
        self.body = body


def not_found(message: str) -> ApiError:
    return ApiError(
        404, {"success": False, "message": message, "timestamp": iso_now()}
    )


def server_error_body(exc: Exception) -> dict[str, Any]:
    return {"success": False, "error": str(exc), "timestamp": iso_now()}


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.body)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Routing misses (unknown path or wrong method) are all reported as 404
    if exc.status_code in (404, 405):
        err = not_found(f"Not found: {request.url.path}")
        return JSONResponse(status_code=err.status_code, content=err.body)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail), "timestamp": iso_now()},
    )
