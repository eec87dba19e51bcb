import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from services.errors import PortalError

logger = logging.getLogger(__name__)


def _message(status_code: int, message: str, headers=None) -> JSONResponse:
    # 모든 실패 응답은 {"message": ...} 하나로 통일
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


_LOC_SOURCES = ("body", "path", "query", "header", "cookie")


def _describe_validation(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # 요청 위치 접두어(body/path/...)와 JSON 위치 인덱스(int) 제외
    parts = [p for p in first.get("loc", ()) if not isinstance(p, int)]
    if parts and parts[0] in _LOC_SOURCES:
        parts = parts[1:]
    loc = ".".join(str(p) for p in parts)
    msg = first.get("msg", "")
    if loc:
        return f"Invalid request: {loc} {msg}"
    return f"Invalid request: {msg}"


def add_error_handlers(app: FastAPI):
    @app.exception_handler(PortalError)
    async def portal_error_handler(request: Request, exc: PortalError):
        return _message(exc.status_code, exc.message, exc.headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # 경로 ID 형식 오류, 깨진 JSON 등 → 400
        return _message(400, _describe_validation(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _message(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error: {request.method} {request.url.path}")
        return _message(500, "Internal server error")
