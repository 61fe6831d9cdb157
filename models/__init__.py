"""models: 데이터 클래스 및 데이터 접근 함수 패키지.

카테고리 데이터 모델과 MySQL 데이터베이스 접근 함수를 제공합니다.
"""

from .category_models import (
    Category,
    save,
    update,
    delete,
    find_by_id,
    find_all,
)

__all__ = [
    "Category",
    "save",
    "update",
    "delete",
    "find_by_id",
    "find_all",
]
