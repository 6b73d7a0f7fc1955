"""상품 이미지 레포지토리.

Product Image Repository — per-product image listing and name collision lookup.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.models.product import ProductImage
from shoestrade.repositories.base import BaseRepository


class ProductImageRepository(BaseRepository[ProductImage]):
    """상품 이미지 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(ProductImage)

    async def get_by_product_id(
        self,
        db: AsyncSession,
        product_id: int,
    ) -> list[ProductImage]:
        query: Select = (
            select(ProductImage)
            .where(ProductImage.product_id == product_id)
            .order_by(ProductImage.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_by_product_id_and_names(
        self,
        db: AsyncSession,
        product_id: int,
        names: list[str],
    ) -> list[ProductImage]:
        """상품 내에서 주어진 이름을 가진 이미지를 조회합니다.

        Retrieve the product's images whose name is one of ``names``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            product_id: 상품 ID (Owning product)
            names: 검사할 이미지 이름 목록 (Candidate image names)

        Returns:
            list[ProductImage]: 이름이 겹치는 이미지 목록 (Colliding images, by id)
        """
        query: Select = (
            select(ProductImage)
            .where(ProductImage.product_id == product_id, ProductImage.name.in_(names))
            .order_by(ProductImage.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
product_image_repository: ProductImageRepository = ProductImageRepository()
