"""exceptions: 비즈니스 계층 예외 모듈.

서비스 계층이 발생시키고 컨트롤러가 HTTP 응답으로 변환하는 예외를 정의합니다.
"""


class CategoryError(Exception):
    """카테고리 비즈니스 로직 예외의 기반 클래스.

    Attributes:
        message: 응답 data 필드에 담길 메시지.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CategoryError):
    """입력값이 비즈니스 규칙을 통과하지 못한 경우 (400)."""


class NotFoundError(CategoryError):
    """요청한 ID의 카테고리가 존재하지 않는 경우 (404)."""

    def __init__(self, category_id: int) -> None:
        super().__init__(f"category {category_id} not found")
        self.category_id = category_id
