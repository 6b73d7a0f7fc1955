"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides the page-request parameters and a paginate helper shared by every
paginated list endpoint.
"""

from dataclasses import dataclass
from typing import Any, Sequence

from fastapi import Query
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.config import settings


@dataclass(frozen=True)
class PageRequest:
    """페이지 요청 정보 (Page request, 1-based page number)."""

    page: int = 1
    per_page: int = 20

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


def page_params(
    page: int = Query(1, ge=1),
    per_page: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=100),
) -> PageRequest:
    """쿼리 파라미터에서 페이지 요청을 만드는 FastAPI 의존성.

    FastAPI dependency building a PageRequest from ``page`` / ``per_page``.
    """
    return PageRequest(page=page, per_page=per_page)


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: PageRequest,
    scalars: bool = True,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated query, returning items and total count. Runs a COUNT
    over the query as a subquery, then the page itself with OFFSET/LIMIT.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query to paginate)
        page: 페이지 요청 (Page request)
        scalars: True면 첫 컬럼만 반환, False면 Row 반환
                 (Return first-column scalars when True, Row objects otherwise)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수) (Page items, total count)
    """
    # 전체 개수 조회 — 서브쿼리로 감싸서 COUNT 실행 (Count total via subquery)
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    result = await db.execute(query.offset(page.offset).limit(page.per_page))
    items: Sequence[Any] = result.scalars().all() if scalars else result.all()

    return items, total
