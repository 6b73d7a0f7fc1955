"""브랜드 레포지토리 — 브랜드 CRUD 및 이름 검색.

Brand Repository — CRUD and name lookups for brands.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.models.product import Brand
from shoestrade.repositories.base import BaseRepository


class BrandRepository(BaseRepository[Brand]):
    """브랜드 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the brands table.
    """

    def __init__(self) -> None:
        super().__init__(Brand)

    async def get_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> Brand | None:
        """동일한 이름을 가진 브랜드를 조회합니다.

        Retrieve the brand with exactly this name.
        """
        result = await db.execute(select(Brand).where(Brand.name == name))
        return result.scalar_one_or_none()

    async def search_by_name(
        self,
        db: AsyncSession,
        name: str | None,
    ) -> list[Brand]:
        """이름에 검색어가 포함된 브랜드 목록을 조회합니다.

        Retrieve brands whose name contains ``name`` (case-insensitive);
        every brand when ``name`` is empty.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 검색어 (Search term, optional)

        Returns:
            list[Brand]: 이름순 브랜드 목록 (Brands ordered by name)
        """
        query: Select = select(Brand)
        if name:
            query = query.where(Brand.name.icontains(name, autoescape=True))
        result = await db.execute(query.order_by(Brand.name))
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
brand_repository: BrandRepository = BrandRepository()
