"""category_schemas: 카테고리 관련 Pydantic 모델 모듈.

API 경계에서만 사용하는 요청/응답 스키마를 정의합니다.
이름 검증은 서비스 계층에서 수행하므로 name은 선택 필드로 받습니다.
"""

from pydantic import BaseModel


class CategoryCreateRequest(BaseModel):
    """카테고리 생성 요청 모델.

    Attributes:
        name: 카테고리 이름.
    """

    name: str | None = None


class CategoryUpdateRequest(BaseModel):
    """카테고리 수정 요청 모델. 이름 전체를 교체합니다."""

    name: str | None = None


class CategoryResponse(BaseModel):
    """카테고리 응답 모델."""

    id: int
    name: str
