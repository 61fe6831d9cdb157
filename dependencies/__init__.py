"""dependencies: FastAPI 의존성 주입 패키지.

서비스 객체 조회 의존성 함수를 제공합니다.
"""

from .services import get_category_service

__all__ = [
    "get_category_service",
]
