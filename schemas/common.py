"""common: 공통 응답 유틸리티 모듈.

모든 응답 본문을 감싸는 {code, status, data} 형식을 정의합니다.
"""

from typing import Any

from pydantic import BaseModel


STATUS_OK = "OK"
STATUS_BAD_REQUEST = "BAD REQUEST"
STATUS_UNAUTHORIZED = "UNAUTHORIZED"
STATUS_NOT_FOUND = "NOT FOUND"
STATUS_INTERNAL_SERVER_ERROR = "INTERNAL SERVER ERROR"


class WebResponse(BaseModel):
    """표준 API 응답 모델.

    Attributes:
        code: HTTP 상태 코드.
        status: 상태 문자열 (예: "OK", "NOT FOUND").
        data: 응답 데이터.
    """

    code: int
    status: str
    data: Any = None


def create_response(code: int, status: str, data: Any = None) -> dict[str, Any]:
    """표준 API 응답 딕셔너리를 생성합니다.

    Args:
        code: HTTP 상태 코드.
        status: 상태 문자열.
        data: 응답 데이터 (기본값: None).

    Returns:
        표준 형식의 응답 딕셔너리.
    """
    return WebResponse(code=code, status=status, data=data).model_dump(mode="json")
