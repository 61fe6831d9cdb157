"""main: FastAPI 애플리케이션의 메인 진입점.

설정 로드, 미들웨어 구성, 라우터 등록, 전역 예외 핸들러를 설정합니다.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import Settings
from database.connection import Database
from middleware import ApiKeyMiddleware, LoggingMiddleware
from middleware.exception_handler import (
    configure_error_log,
    global_exception_handler,
    http_exception_handler,
    request_validation_exception_handler,
)
from routers.category_router import category_router
from schemas.common import STATUS_OK, create_response
from services.category_service import CategoryService


logger = logging.getLogger("api")


def create_app(settings: Settings) -> FastAPI:
    """설정 객체로 FastAPI 애플리케이션을 구성합니다.

    Args:
        settings: 애플리케이션 설정.

    Returns:
        구성된 FastAPI 애플리케이션.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """애플리케이션 생명주기 관리.

        시작 시 연결 풀을 열고 서비스를 구성하며,
        종료 시 연결 풀을 정리합니다.
        """
        database = Database(settings)
        await database.connect()
        if settings.DB_AUTO_CREATE_SCHEMA:
            await database.create_schema()

        app.state.database = database
        app.state.category_service = CategoryService(database)
        yield
        await database.close()

    app = FastAPI(
        title="Category API",
        description="카테고리 CRUD API 서버",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    configure_error_log(settings.ERROR_LOG_FILE)

    # 마지막에 추가된 미들웨어가 가장 바깥에서 실행됨 (로깅 -> 인증 -> 라우터)
    app.add_middleware(ApiKeyMiddleware, api_key=settings.AUTH_KEY)
    app.add_middleware(LoggingMiddleware)

    app.include_router(category_router)

    @app.get("/health", status_code=200)
    async def health_check(request: Request) -> dict:
        """서버 상태 및 DB 연결 확인."""
        database = getattr(request.app.state, "database", None)
        connected = database is not None and await database.ping()
        return create_response(
            200,
            STATUS_OK,
            {"database": "connected" if connected else "disconnected"},
        )

    app.add_exception_handler(Exception, global_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]

    return app


settings = Settings()  # type: ignore[call-arg]  # pydantic-settings는 .env에서 환경 변수를 불러옴.
app = create_app(settings)


if __name__ == "__main__":
    logger.info(f"Run on http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
