"""exception_handler: 전역 예외 처리 핸들러 모듈.

처리되지 않은 예외와 요청 파싱 오류를 표준 응답 형식으로 변환합니다.
"""

import logging
import traceback
import uuid
from http import HTTPStatus
from logging.handlers import RotatingFileHandler

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from schemas.common import (
    STATUS_BAD_REQUEST,
    STATUS_INTERNAL_SERVER_ERROR,
    create_response,
)


logger = logging.getLogger("api")

# 에러 전용 파일 로거
error_logger = logging.getLogger("api.error")
error_logger.setLevel(logging.ERROR)


def configure_error_log(path: str) -> None:
    """에러 전용 파일 로거에 RotatingFileHandler를 연결합니다.

    10MB 단위로 로테이션하며 최대 5개 백업 파일을 유지합니다.
    path가 비어 있거나 이미 핸들러가 있으면 아무것도 하지 않습니다.
    """
    if not path or error_logger.handlers:
        return
    error_file_handler = RotatingFileHandler(
        path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    error_file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    error_logger.addHandler(error_file_handler)


def _internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    tracking_id = str(uuid.uuid4())

    logger.error(f"[{tracking_id}] Unhandled exception: {exc}")
    error_logger.error(
        f"[{tracking_id}] Unhandled exception: {exc}\n"
        + "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )

    # DEBUG 모드에서만 상세 정보 포함
    settings = getattr(request.app.state, "settings", None)
    detail = str(exc) if settings is not None and settings.DEBUG else None

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=create_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            STATUS_INTERNAL_SERVER_ERROR,
            detail,
        ),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """전역 예외 처리 핸들러.

    데이터베이스 연결 실패, 프로그래밍 오류 등 모든 미처리 예외를
    500 응답으로 변환합니다. 프로세스는 종료되지 않습니다.

    Args:
        request: FastAPI Request 객체.
        exc: 발생한 예외.

    Returns:
        500 에러 JSON 응답.
    """
    return _internal_error_response(request, exc)


def _is_body_decode_error(error: dict) -> bool:
    """본문을 JSON으로 해석하지 못한 오류인지 확인합니다.

    빈 본문은 본문 전체에 대한 missing 오류(loc == ("body",))로 보고됩니다.
    """
    if error.get("type") == "json_invalid":
        return True
    return error.get("type") == "missing" and tuple(error.get("loc", ())) == ("body",)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """요청 데이터 유효성 검사 예외 처리 핸들러.

    JSON으로 해석할 수 없거나 비어 있는 본문은 미처리 오류로 취급하여 500을 반환합니다.
    숫자가 아닌 경로 ID, 잘못된 필드 타입 등은 400 BAD REQUEST로 변환합니다.

    Args:
        request: FastAPI Request 객체.
        exc: 발생한 Validation 예외.

    Returns:
        400 또는 500 에러 JSON 응답.
    """
    errors = exc.errors()
    if any(_is_body_decode_error(error) for error in errors):
        return _internal_error_response(request, exc)

    messages = [
        f"{'.'.join(str(loc) for loc in error.get('loc', ()))}: {error.get('msg')}"
        for error in errors
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=create_response(
            status.HTTP_400_BAD_REQUEST, STATUS_BAD_REQUEST, messages
        ),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """라우팅 단계의 HTTP 예외(404 경로 없음, 405 메소드 불일치)를 표준 응답으로 변환합니다."""
    return JSONResponse(
        status_code=exc.status_code,
        content=create_response(
            exc.status_code, HTTPStatus(exc.status_code).phrase.upper()
        ),
        headers=getattr(exc, "headers", None),
    )
