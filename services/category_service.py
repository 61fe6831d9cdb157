"""category_service: 카테고리 관련 비즈니스 로직을 처리하는 서비스."""

import logging
from typing import List

from database.connection import Database
from models import category_models
from models.category_models import Category
from schemas.category_schemas import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)
from utils.exceptions import NotFoundError, ValidationError


logger = logging.getLogger("api")


def _validate_name(name: str | None) -> str:
    """카테고리 이름을 검증하고 입력값 그대로 반환합니다.

    Raises:
        ValidationError: 이름이 없거나 공백뿐인 경우.
    """
    if name is None or not name.strip():
        raise ValidationError("name is required")
    return name


def _to_response(category: Category) -> CategoryResponse:
    assert category.id is not None  # 저장된 엔티티만 변환됨
    return CategoryResponse(id=category.id, name=category.name)


class CategoryService:
    """카테고리 관리 서비스.

    모든 작업은 하나의 트랜잭션 안에서 실행됩니다.
    예외가 발생하면 롤백된 뒤 호출자에게 전파됩니다.
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    async def create(self, request: CategoryCreateRequest) -> CategoryResponse:
        """카테고리 생성."""
        name = _validate_name(request.name)

        async with self._database.transactional() as cur:
            category = await category_models.save(cur, Category(id=None, name=name))

        logger.info(f"카테고리 생성: id={category.id}")
        return _to_response(category)

    async def update(
        self, category_id: int, request: CategoryUpdateRequest
    ) -> CategoryResponse:
        """카테고리 이름 수정."""
        name = _validate_name(request.name)

        async with self._database.transactional() as cur:
            # 1. 존재 확인
            category = await category_models.find_by_id(cur, category_id)
            if not category:
                raise NotFoundError(category_id)

            # 2. DB 업데이트
            category.name = name
            category = await category_models.update(cur, category)

        logger.info(f"카테고리 수정: id={category_id}")
        return _to_response(category)

    async def delete(self, category_id: int) -> None:
        """카테고리 삭제."""
        async with self._database.transactional() as cur:
            category = await category_models.find_by_id(cur, category_id)
            if not category:
                raise NotFoundError(category_id)

            await category_models.delete(cur, category_id)

        logger.info(f"카테고리 삭제: id={category_id}")

    async def find_by_id(self, category_id: int) -> CategoryResponse:
        """카테고리 단건 조회."""
        async with self._database.transactional() as cur:
            category = await category_models.find_by_id(cur, category_id)

        if not category:
            raise NotFoundError(category_id)
        return _to_response(category)

    async def find_all(self) -> List[CategoryResponse]:
        """카테고리 전체 목록 조회."""
        async with self._database.transactional() as cur:
            categories = await category_models.find_all(cur)

        return [_to_response(category) for category in categories]
