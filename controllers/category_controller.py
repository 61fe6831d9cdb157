"""category_controller: 카테고리 관련 컨트롤러 모듈.

서비스 결과를 표준 응답 형식으로 감싸고,
비즈니스 예외(ValidationError, NotFoundError)를 HTTP 응답으로 변환합니다.
그 외 예외는 전역 예외 핸들러로 전파됩니다.
"""

from typing import Any, Awaitable

from fastapi import status
from fastapi.responses import JSONResponse

from schemas.category_schemas import CategoryCreateRequest, CategoryUpdateRequest
from schemas.common import (
    STATUS_BAD_REQUEST,
    STATUS_NOT_FOUND,
    STATUS_OK,
    create_response,
)
from services.category_service import CategoryService
from utils.exceptions import NotFoundError, ValidationError


def _serialize(result: Any) -> Any:
    if isinstance(result, list):
        return [item.model_dump() for item in result]
    if result is None:
        return None
    return result.model_dump()


async def _handle(operation: Awaitable[Any]) -> dict | JSONResponse:
    """서비스 호출을 실행하고 결과 또는 비즈니스 예외를 응답으로 변환합니다."""
    try:
        result = await operation
    except ValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=create_response(
                status.HTTP_400_BAD_REQUEST, STATUS_BAD_REQUEST, e.message
            ),
        )
    except NotFoundError as e:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=create_response(
                status.HTTP_404_NOT_FOUND, STATUS_NOT_FOUND, e.message
            ),
        )

    return create_response(status.HTTP_200_OK, STATUS_OK, _serialize(result))


async def get_categories(service: CategoryService) -> dict | JSONResponse:
    """카테고리 목록을 조회합니다."""
    return await _handle(service.find_all())


async def get_category(
    category_id: int, service: CategoryService
) -> dict | JSONResponse:
    """카테고리를 조회합니다."""
    return await _handle(service.find_by_id(category_id))


async def create_category(
    category_data: CategoryCreateRequest, service: CategoryService
) -> dict | JSONResponse:
    """카테고리를 생성합니다."""
    return await _handle(service.create(category_data))


async def update_category(
    category_id: int,
    category_data: CategoryUpdateRequest,
    service: CategoryService,
) -> dict | JSONResponse:
    """카테고리 이름을 수정합니다."""
    return await _handle(service.update(category_id, category_data))


async def delete_category(
    category_id: int, service: CategoryService
) -> dict | JSONResponse:
    """카테고리를 삭제합니다."""
    return await _handle(service.delete(category_id))
