"""상품 사이즈 레포지토리.

Product Size Repository — size bucket lookup by product and size.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.models.product import ProductSize
from shoestrade.repositories.base import BaseRepository


class ProductSizeRepository(BaseRepository[ProductSize]):
    """상품 사이즈 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(ProductSize)

    async def get_by_product_and_size(
        self,
        db: AsyncSession,
        product_id: int,
        size: int,
    ) -> ProductSize | None:
        query: Select = select(ProductSize).where(
            ProductSize.product_id == product_id, ProductSize.size == size
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
product_size_repository: ProductSizeRepository = ProductSizeRepository()
