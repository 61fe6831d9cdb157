# api_key: 공유 비밀 키 인증 미들웨어
# X-API-Key 헤더가 설정된 키와 일치하지 않으면 라우터에 도달하기 전에 401을 반환한다.

import hmac
import logging

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from schemas.common import STATUS_UNAUTHORIZED, create_response


API_KEY_HEADER = "X-API-Key"

logger = logging.getLogger("api")


def is_authorized(expected: str, provided: str | None) -> bool:
    """제공된 키가 기대하는 키와 일치하는지 확인합니다.

    헤더가 없거나 설정된 키가 비어 있으면 항상 거부합니다.
    """
    if not expected or provided is None:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), provided.encode("utf-8"))


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """
    API 키 인증 미들웨어

    모든 요청의 X-API-Key 헤더를 검사하고, 불일치 시 내부 앱을 호출하지 않는다.
    """

    def __init__(self, app, api_key: str, header_name: str = API_KEY_HEADER):
        super().__init__(app)
        self.api_key = api_key
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next):
        if is_authorized(self.api_key, request.headers.get(self.header_name)):
            return await call_next(request)

        logger.warning(f"인증 실패: {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=create_response(
                status.HTTP_401_UNAUTHORIZED, STATUS_UNAUTHORIZED
            ),
        )
