"""상품 레포지토리 — 상품 CRUD, 이름 중복 조회, 검색 및 상세 조회.

Product Repository — CRUD, unique-name lookups, brand-filtered search and the
eager-loaded detail query for products.
"""

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from shoestrade.models.product import Product
from shoestrade.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """상품 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the products table.
    """

    def __init__(self) -> None:
        super().__init__(Product)

    async def get_by_kor_name(self, db: AsyncSession, kor_name: str) -> Product | None:
        result = await db.execute(select(Product).where(Product.kor_name == kor_name))
        return result.scalar_one_or_none()

    async def get_by_eng_name(self, db: AsyncSession, eng_name: str) -> Product | None:
        result = await db.execute(select(Product).where(Product.eng_name == eng_name))
        return result.scalar_one_or_none()

    def build_search_query(
        self,
        name: str | None,
        brand_ids: list[int] | None,
    ) -> Select:
        """상품 검색 쿼리를 생성합니다.

        Build the product search query. ``name`` matches either the Korean or
        the English name as a case-insensitive substring; a non-empty
        ``brand_ids`` restricts results to those brands. Brand and images are
        eager loaded for the summary projection.

        Args:
            name: 검색어 (Search term, optional)
            brand_ids: 브랜드 ID 목록 (Brand ids to restrict to, optional)

        Returns:
            Select: id 순으로 정렬된 검색 쿼리 (Search query ordered by id)
        """
        query: Select = select(Product).options(
            selectinload(Product.brand), selectinload(Product.images)
        )
        if name:
            query = query.where(
                or_(
                    Product.kor_name.icontains(name, autoescape=True),
                    Product.eng_name.icontains(name, autoescape=True),
                )
            )
        if brand_ids:
            query = query.where(Product.brand_id.in_(brand_ids))
        return query.order_by(Product.id).execution_options(populate_existing=True)

    async def get_detail(
        self,
        db: AsyncSession,
        product_id: int,
    ) -> Product | None:
        """상품 상세 정보를 브랜드/이미지/사이즈와 함께 조회합니다.

        Retrieve a product with brand, images and sizes eagerly loaded.
        """
        query: Select = (
            select(Product)
            .options(
                selectinload(Product.brand),
                selectinload(Product.images),
                selectinload(Product.sizes),
            )
            .where(Product.id == product_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
product_repository: ProductRepository = ProductRepository()
