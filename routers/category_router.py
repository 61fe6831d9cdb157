"""category_router: 카테고리 CRUD 라우터 모듈.

모든 엔드포인트는 ApiKeyMiddleware를 통과한 요청만 처리합니다.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from controllers import category_controller
from dependencies.services import get_category_service
from schemas.category_schemas import CategoryCreateRequest, CategoryUpdateRequest
from services.category_service import CategoryService


category_router = APIRouter(prefix="/api/categories", tags=["categories"])
"""카테고리 관련 라우터 인스턴스."""


@category_router.get("", status_code=status.HTTP_200_OK, response_model=None)
async def get_categories(
    service: CategoryService = Depends(get_category_service),
) -> dict | JSONResponse:
    """카테고리 전체 목록을 생성 순서대로 조회합니다."""
    return await category_controller.get_categories(service)


@category_router.get(
    "/{category_id}", status_code=status.HTTP_200_OK, response_model=None
)
async def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> dict | JSONResponse:
    """ID로 카테고리를 조회합니다.

    Args:
        category_id: 조회할 카테고리 ID.
        service: 카테고리 서비스.

    Returns:
        카테고리 정보가 포함된 응답. 없으면 404.
    """
    return await category_controller.get_category(category_id, service)


@category_router.post("", status_code=status.HTTP_200_OK, response_model=None)
async def create_category(
    category_data: CategoryCreateRequest,
    service: CategoryService = Depends(get_category_service),
) -> dict | JSONResponse:
    """새 카테고리를 생성합니다. 이름이 비어 있으면 400."""
    return await category_controller.create_category(category_data, service)


@category_router.put(
    "/{category_id}", status_code=status.HTTP_200_OK, response_model=None
)
async def update_category(
    category_id: int,
    category_data: CategoryUpdateRequest,
    service: CategoryService = Depends(get_category_service),
) -> dict | JSONResponse:
    """카테고리 이름을 수정합니다.

    Args:
        category_id: 수정할 카테고리 ID.
        category_data: 새 이름.
        service: 카테고리 서비스.

    Returns:
        수정된 카테고리 정보가 포함된 응답.
    """
    return await category_controller.update_category(
        category_id, category_data, service
    )


@category_router.delete(
    "/{category_id}", status_code=status.HTTP_200_OK, response_model=None
)
async def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> dict | JSONResponse:
    """카테고리를 삭제합니다. 응답 data는 null입니다."""
    return await category_controller.delete_category(category_id, service)
