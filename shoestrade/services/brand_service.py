"""브랜드 서비스 — 브랜드 CRUD 비즈니스 로직.

Brand Service — Business logic for brand CRUD operations.
Brand names are unique; the check is performed before every write that
introduces a new name.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.models.product import Brand
from shoestrade.repositories.brand_repository import brand_repository
from shoestrade.schemas.brand import BrandResponse, BrandSaveRequest
from shoestrade.utils.exceptions import BrandDuplicationError, BrandNotFoundError


class BrandService:
    """브랜드 관련 비즈니스 로직을 처리하는 서비스.

    Service handling brand business logic.
    """

    def _to_response(self, brand: Brand) -> BrandResponse:
        return BrandResponse(id=brand.id, name=brand.name)

    async def _check_duplicate_name(self, db: AsyncSession, name: str) -> None:
        """브랜드 이름 중복 여부를 검사합니다.

        Raise BrandDuplicationError when a brand already uses ``name``.
        """
        if await brand_repository.get_by_name(db, name) is not None:
            raise BrandDuplicationError(name)

    async def save_brand(
        self,
        db: AsyncSession,
        data: BrandSaveRequest,
    ) -> BrandResponse:
        """새 브랜드를 등록합니다.

        Create a new brand.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 브랜드 등록 데이터 (Brand creation data)

        Returns:
            BrandResponse: 등록된 브랜드 (Created brand)

        Raises:
            BrandDuplicationError: 같은 이름의 브랜드가 이미 존재할 때
                                   (When a brand with the same name exists)
        """
        await self._check_duplicate_name(db, data.name)
        try:
            brand: Brand = await brand_repository.create(db, {"name": data.name})
        except IntegrityError as exc:
            # 동시 등록으로 UNIQUE 제약 위반 — Concurrent insert hit the unique constraint
            raise BrandDuplicationError(data.name) from exc
        return self._to_response(brand)

    async def find_brands(
        self,
        db: AsyncSession,
        name: str | None = None,
    ) -> list[BrandResponse]:
        """브랜드 목록을 조회합니다 (All brands, or those whose name contains ``name``)."""
        brands: list[Brand] = await brand_repository.search_by_name(db, name)
        return [self._to_response(b) for b in brands]

    async def find_brand(
        self,
        db: AsyncSession,
        brand_id: int,
    ) -> BrandResponse:
        brand: Brand | None = await brand_repository.get_by_id(db, brand_id)
        if brand is None:
            raise BrandNotFoundError(brand_id)
        return self._to_response(brand)

    async def update_brand_name(
        self,
        db: AsyncSession,
        brand_id: int,
        data: BrandSaveRequest,
    ) -> BrandResponse:
        """브랜드 이름을 변경합니다.

        Rename a brand. The duplicate check only runs when the name actually
        changes, so renaming a brand to its current name succeeds.

        Raises:
            BrandNotFoundError: 브랜드를 찾을 수 없을 때 (Brand not found)
            BrandDuplicationError: 다른 브랜드가 이미 그 이름을 사용할 때
                                   (Another brand already uses the name)
        """
        brand: Brand | None = await brand_repository.get_by_id(db, brand_id)
        if brand is None:
            raise BrandNotFoundError(brand_id)

        if brand.name != data.name:
            await self._check_duplicate_name(db, data.name)

        brand.name = data.name
        await db.flush()
        return self._to_response(brand)

    async def delete_brand(
        self,
        db: AsyncSession,
        brand_id: int,
    ) -> None:
        """브랜드를 삭제합니다 — 소속 상품도 함께 삭제됩니다.

        Delete a brand; its products (and their sizes, images and trades) go
        with it.

        Raises:
            BrandNotFoundError: 브랜드를 찾을 수 없을 때 (Brand not found)
        """
        deleted: bool = await brand_repository.delete(db, brand_id)
        if not deleted:
            raise BrandNotFoundError(brand_id)


# 싱글턴 인스턴스 — Singleton instance
brand_service: BrandService = BrandService()
