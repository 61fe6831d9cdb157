"""services: 서비스 객체 의존성 주입 모듈.

lifespan에서 생성되어 app.state에 저장된 서비스 인스턴스를 제공합니다.
"""

from fastapi import Request

from services.category_service import CategoryService


def get_category_service(request: Request) -> CategoryService:
    """애플리케이션에 등록된 CategoryService를 반환합니다.

    Raises:
        RuntimeError: 애플리케이션 시작(lifespan) 전에 호출된 경우.
    """
    service = getattr(request.app.state, "category_service", None)
    if service is None:
        raise RuntimeError("CategoryService가 초기화되지 않았습니다.")
    return service
