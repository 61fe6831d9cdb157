import os

# main 모듈 임포트 시 Settings()가 환경 변수를 요구함
os.environ.setdefault("AUTH_KEY", "test-secret-key")
os.environ.setdefault("DB_CONNECTION_STRING", "test:test@tcp(localhost:3306)/category_test")
os.environ["ERROR_LOG_FILE"] = ""

from contextlib import asynccontextmanager
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from faker import Faker
from httpx import ASGITransport, AsyncClient

from core.config import Settings
from main import create_app
from models.category_models import Category
from services.category_service import CategoryService


AUTH_KEY = "test-secret-key"


class InMemoryCategoryStore:
    """테스트용 헬퍼: category_models와 같은 시그니처의 인메모리 저장소.

    커서 인자는 무시하며, MySQL AUTO_INCREMENT처럼 ID를 1부터 증가시킵니다.
    """

    def __init__(self) -> None:
        self.rows: dict[int, str] = {}
        self._next_id = 1

    async def save(self, cur, category: Category) -> Category:
        category.id = self._next_id
        self._next_id += 1
        self.rows[category.id] = category.name
        return category

    async def update(self, cur, category: Category) -> Category:
        if category.id in self.rows:
            self.rows[category.id] = category.name
        return category

    async def delete(self, cur, category_id: int) -> None:
        self.rows.pop(category_id, None)

    async def find_by_id(self, cur, category_id: int) -> Category | None:
        if category_id not in self.rows:
            return None
        return Category(id=category_id, name=self.rows[category_id])

    async def find_all(self, cur) -> list[Category]:
        return [
            Category(id=cid, name=name)
            for cid, name in sorted(self.rows.items())
        ]


class FakeDatabase:
    """테스트용 헬퍼: 커밋/롤백 횟수를 기록하는 Database 대역."""

    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0
        self.transactions = 0

    @asynccontextmanager
    async def transactional(self):
        self.transactions += 1
        try:
            yield MagicMock()
        except Exception:
            self.rollbacks += 1
            raise
        self.commits += 1

    async def ping(self) -> bool:
        return True


@pytest.fixture
def store(monkeypatch):
    """서비스가 사용하는 category_models를 인메모리 저장소로 교체합니다."""
    memory_store = InMemoryCategoryStore()
    monkeypatch.setattr("services.category_service.category_models", memory_store)
    return memory_store


@pytest.fixture
def database():
    return FakeDatabase()


@pytest.fixture
def service(store, database):
    return CategoryService(database)  # type: ignore[arg-type]


@pytest.fixture
def test_settings():
    return Settings(
        DB_CONNECTION_STRING="test:test@tcp(localhost:3306)/category_test",
        AUTH_KEY=AUTH_KEY,
        ERROR_LOG_FILE="",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def app(test_settings, service, database):
    """lifespan 없이 서비스를 직접 주입한 애플리케이션."""
    application = create_app(test_settings)
    application.state.database = database
    application.state.category_service = service
    return application


@pytest_asyncio.fixture
async def client(app):
    """올바른 X-API-Key 헤더가 설정된 Async Client"""
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"X-API-Key": AUTH_KEY},
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def anonymous_client(app):
    """X-API-Key 헤더가 없는 Async Client"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def fake():
    return Faker("ko_KR")


@pytest.fixture
def category_name(fake):
    return fake.lexify(text="category-??????")
