# logging: 요청/응답 로깅 미들웨어
# 요청마다 응답 봉투의 code/status와 처리 시간을 남긴다.

import logging
import time
from http import HTTPStatus

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("api")
logger.setLevel(logging.INFO)

if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)


def outcome_level(status_code: int) -> int:
    """상태 코드에 맞는 로그 레벨을 반환합니다. 4xx는 WARNING, 5xx는 ERROR."""
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


def outcome_label(status_code: int) -> str:
    """응답 봉투와 같은 형식의 결과 문자열 (예: "404 NOT FOUND")."""
    try:
        phrase = HTTPStatus(status_code).phrase.upper()
    except ValueError:
        phrase = "UNKNOWN"
    return f"{status_code} {phrase}"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    요청/응답 로깅 미들웨어

    ApiKeyMiddleware 바깥에서 실행되므로 401 응답도 기록된다.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        client = request.client.host if request.client else "unknown"

        logger.info(f"-> {request.method} {request.url.path} from {client}")

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        logger.log(
            outcome_level(response.status_code),
            f"<- {request.method} {request.url.path} - "
            f"{outcome_label(response.status_code)} - "
            f"Time: {process_time:.3f}s",
        )

        return response
