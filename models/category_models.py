"""category_models: 카테고리 데이터 모델 및 데이터 접근 함수 모듈.

모든 함수는 호출자가 연 트랜잭션의 커서를 받아 실행되며,
커밋과 롤백은 호출자(서비스 계층)가 담당합니다.
"""

from dataclasses import dataclass

import aiomysql


@dataclass
class Category:
    """카테고리 데이터 클래스.

    Attributes:
        id: 카테고리 고유 식별자. 저장 전에는 None.
        name: 카테고리 이름.
    """

    id: int | None
    name: str


def _row_to_category(row: tuple) -> Category:
    """데이터베이스 행을 Category 객체로 변환합니다."""
    return Category(id=row[0], name=row[1])


async def save(cur: aiomysql.Cursor, category: Category) -> Category:
    """새 카테고리를 삽입하고 생성된 ID를 채워 반환합니다.

    Args:
        cur: 트랜잭션 커서.
        category: 저장할 카테고리 (id는 무시됨).

    Returns:
        ID가 채워진 카테고리 객체.
    """
    await cur.execute(
        "INSERT INTO category (name) VALUES (%s)",
        (category.name,),
    )
    category.id = cur.lastrowid
    return category


async def update(cur: aiomysql.Cursor, category: Category) -> Category:
    """카테고리 이름을 수정합니다.

    일치하는 행이 없어도 에러 없이 종료합니다. 존재 확인은 호출자의 책임입니다.
    """
    await cur.execute(
        "UPDATE category SET name = %s WHERE id = %s",
        (category.name, category.id),
    )
    return category


async def delete(cur: aiomysql.Cursor, category_id: int) -> None:
    """ID로 카테고리를 삭제합니다. 없는 ID여도 에러가 발생하지 않습니다."""
    await cur.execute("DELETE FROM category WHERE id = %s", (category_id,))


async def find_by_id(cur: aiomysql.Cursor, category_id: int) -> Category | None:
    """ID로 카테고리를 조회합니다.

    Returns:
        카테고리 객체, 없으면 None.
    """
    await cur.execute(
        "SELECT id, name FROM category WHERE id = %s",
        (category_id,),
    )
    row = await cur.fetchone()
    return _row_to_category(row) if row else None


async def find_all(cur: aiomysql.Cursor) -> list[Category]:
    """모든 카테고리를 생성 순서(ID 오름차순)로 조회합니다."""
    await cur.execute("SELECT id, name FROM category ORDER BY id ASC")
    rows = await cur.fetchall()
    return [_row_to_category(row) for row in rows]
