"""middleware: 미들웨어 패키지.

요청 로깅, API 키 인증 등 HTTP 요청/응답 처리를 위한 미들웨어를 제공합니다.
"""

from .logging import LoggingMiddleware
from .api_key import ApiKeyMiddleware

__all__ = [
    "LoggingMiddleware",
    "ApiKeyMiddleware",
]
