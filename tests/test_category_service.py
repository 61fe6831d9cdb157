"""CategoryService 단위 테스트.

트랜잭션 경계(커밋/롤백)와 비즈니스 예외를 검증합니다.
"""

import pytest

from schemas.category_schemas import CategoryCreateRequest, CategoryUpdateRequest
from utils.exceptions import NotFoundError, ValidationError


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_commits_and_keeps_name_as_sent(
        self, service, store, database
    ):
        """앞뒤 공백을 포함해 요청한 이름 그대로 저장합니다."""
        result = await service.create(CategoryCreateRequest(name="  Rendang "))

        assert result.id == 1
        assert result.name == "  Rendang "
        assert store.rows == {1: "  Rendang "}
        assert database.commits == 1
        assert database.rollbacks == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", [None, "", "  \t "])
    async def test_create_invalid_name_opens_no_transaction(
        self, service, store, database, name
    ):
        """검증 실패 시 트랜잭션을 열지 않습니다."""
        with pytest.raises(ValidationError):
            await service.create(CategoryCreateRequest(name=name))

        assert store.rows == {}
        assert database.transactions == 0

    @pytest.mark.asyncio
    async def test_generated_ids_are_unique(self, service):
        first = await service.create(CategoryCreateRequest(name="a"))
        second = await service.create(CategoryCreateRequest(name="b"))

        assert first.id != second.id


class TestUpdate:
    @pytest.mark.asyncio
    async def test_update_existing(self, service, store, database):
        created = await service.create(CategoryCreateRequest(name="Rendang"))

        result = await service.update(created.id, CategoryUpdateRequest(name="Yuhuu"))

        assert result.id == created.id
        assert result.name == "Yuhuu"
        assert store.rows[created.id] == "Yuhuu"
        assert database.commits == 2

    @pytest.mark.asyncio
    async def test_update_missing_rolls_back(self, service, database):
        with pytest.raises(NotFoundError) as exc_info:
            await service.update(99, CategoryUpdateRequest(name="Yuhuu"))

        assert exc_info.value.category_id == 99
        assert database.rollbacks == 1
        assert database.commits == 0

    @pytest.mark.asyncio
    async def test_update_empty_name_keeps_row(self, service, store):
        created = await service.create(CategoryCreateRequest(name="Rendang"))

        with pytest.raises(ValidationError):
            await service.update(created.id, CategoryUpdateRequest(name=""))

        assert store.rows[created.id] == "Rendang"


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_existing(self, service, store):
        created = await service.create(CategoryCreateRequest(name="Rendang"))

        assert await service.delete(created.id) is None
        assert store.rows == {}

    @pytest.mark.asyncio
    async def test_delete_missing_raises_each_time(self, service, database):
        for _ in range(2):
            with pytest.raises(NotFoundError):
                await service.delete(7)

        assert database.rollbacks == 2


class TestFind:
    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, service):
        with pytest.raises(NotFoundError):
            await service.find_by_id(1)

    @pytest.mark.asyncio
    async def test_find_all_maps_every_row(self, service):
        for name in ("a", "b", "c"):
            await service.create(CategoryCreateRequest(name=name))

        result = await service.find_all()

        assert [(c.id, c.name) for c in result] == [(1, "a"), (2, "b"), (3, "c")]
