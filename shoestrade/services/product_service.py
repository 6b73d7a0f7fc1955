"""상품 서비스 — 상품/이미지 관리 비즈니스 로직.

Product Service — Business logic for product registration, search, update,
deletion and image management.

Name uniqueness (Korean name, English name, image name within a product) is
checked read-then-throw before any row is written, so a rejected request
leaves nothing behind. The check is not race-proof on its own; the unique
constraints on products.kor_name / products.eng_name back it at the storage
layer.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.models.product import SHOE_SIZES, Brand, Product, ProductImage, ProductSize
from shoestrade.repositories.brand_repository import brand_repository
from shoestrade.repositories.product_image_repository import product_image_repository
from shoestrade.repositories.product_repository import product_repository
from shoestrade.repositories.product_size_repository import product_size_repository
from shoestrade.repositories.trade_repository import trade_repository
from shoestrade.schemas.product import (
    ProductDetailResponse,
    ProductImageAddRequest,
    ProductImageResponse,
    ProductLoadResponse,
    ProductSaveRequest,
    ProductSizeResponse,
)
from shoestrade.utils.exceptions import (
    BrandNotFoundError,
    ProductDuplicationError,
    ProductImageDuplicationError,
    ProductImageNotFoundError,
    ProductNotFoundError,
    ProductSizeNotFoundError,
)
from shoestrade.utils.pagination import PageRequest, paginate


class ProductService:
    """상품 관련 비즈니스 로직을 처리하는 서비스.

    Service handling product business logic.
    """

    def _to_load_response(self, product: Product) -> ProductLoadResponse:
        """상품 모델을 요약 응답으로 변환합니다 (brand/images must be loaded)."""
        return ProductLoadResponse(
            id=product.id,
            kor_name=product.kor_name,
            eng_name=product.eng_name,
            code=product.code,
            color=product.color,
            release_price=product.release_price,
            brand_id=product.brand_id,
            brand_name=product.brand.name,
            image=product.images[0].name if product.images else None,
        )

    async def _check_duplicate_kor_name(self, db: AsyncSession, kor_name: str) -> None:
        if await product_repository.get_by_kor_name(db, kor_name) is not None:
            raise ProductDuplicationError(kor_name)

    async def _check_duplicate_eng_name(self, db: AsyncSession, eng_name: str) -> None:
        if await product_repository.get_by_eng_name(db, eng_name) is not None:
            raise ProductDuplicationError(eng_name)

    async def _get_brand(self, db: AsyncSession, brand_id: int) -> Brand:
        brand: Brand | None = await brand_repository.get_by_id(db, brand_id)
        if brand is None:
            raise BrandNotFoundError(brand_id)
        return brand

    async def _get_product(self, db: AsyncSession, product_id: int) -> Product:
        product: Product | None = await product_repository.get_by_id(db, product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def save_product(
        self,
        db: AsyncSession,
        data: ProductSaveRequest,
    ) -> ProductLoadResponse:
        """상품을 등록합니다.

        Register a product. After both names pass the duplicate check and the
        brand resolves, the product row is inserted, followed by two bulk
        inserts: the 17 size buckets (220..300 step 5) and the initial images.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 상품 등록 데이터 (Product registration data)

        Returns:
            ProductLoadResponse: 등록된 상품 요약 (Created product summary)

        Raises:
            ProductDuplicationError: 한글명 또는 영문명이 이미 존재할 때
                                     (Korean or English name already taken)
            BrandNotFoundError: 브랜드를 찾을 수 없을 때 (Brand not found)
        """
        await self._check_duplicate_kor_name(db, data.kor_name)
        await self._check_duplicate_eng_name(db, data.eng_name)
        brand: Brand = await self._get_brand(db, data.brand_id)

        try:
            product: Product = await product_repository.create(
                db,
                {
                    "kor_name": data.kor_name,
                    "eng_name": data.eng_name,
                    "code": data.code,
                    "color": data.color,
                    "release_price": data.release_price,
                    "brand_id": brand.id,
                },
            )
        except IntegrityError as exc:
            # 동시 등록으로 UNIQUE 제약 위반 — Concurrent insert hit a unique name constraint
            raise ProductDuplicationError(data.kor_name) from exc

        await product_size_repository.bulk_create(
            db, [{"size": size, "product_id": product.id} for size in SHOE_SIZES]
        )
        image_names: list[str] = list(dict.fromkeys(data.image_list))
        await product_image_repository.bulk_create(
            db, [{"name": name, "product_id": product.id} for name in image_names]
        )

        return ProductLoadResponse(
            id=product.id,
            kor_name=product.kor_name,
            eng_name=product.eng_name,
            code=product.code,
            color=product.color,
            release_price=product.release_price,
            brand_id=brand.id,
            brand_name=brand.name,
            image=image_names[0] if image_names else None,
        )

    async def delete_product(
        self,
        db: AsyncSession,
        product_id: int,
    ) -> None:
        """상품을 삭제합니다 — 사이즈, 이미지, 입찰 내역도 함께 삭제됩니다.

        Delete a product together with its sizes, images and trades.

        Raises:
            ProductNotFoundError: 상품이 없을 때 (No such product)
        """
        deleted: bool = await product_repository.delete(db, product_id)
        if not deleted:
            raise ProductNotFoundError(product_id)

    async def find_product_by_name_in_brand(
        self,
        db: AsyncSession,
        name: str | None,
        brand_ids: list[int] | None,
        page: PageRequest,
    ) -> tuple[list[ProductLoadResponse], int]:
        """선택된 브랜드 내에서 상품명으로 검색합니다.

        Paginated product search by optional name substring and optional
        brand id list.

        Returns:
            tuple[list[ProductLoadResponse], int]: (현재 페이지 상품, 전체 개수)
                                                   (Page items, total count)
        """
        query = product_repository.build_search_query(name, brand_ids)
        products, total = await paginate(db, query, page)
        return [self._to_load_response(p) for p in products], total

    async def update_product(
        self,
        db: AsyncSession,
        product_id: int,
        data: ProductSaveRequest,
    ) -> None:
        """상품 정보를 변경합니다.

        Update a product in place. Each name is re-checked for duplicates
        only when it differs from the stored value, so saving a product with
        its own names is accepted. The brand is re-resolved on every update.

        Raises:
            ProductNotFoundError: 상품이 없을 때 (No such product)
            ProductDuplicationError: 변경된 이름이 이미 존재할 때 (Changed name already taken)
            BrandNotFoundError: 브랜드를 찾을 수 없을 때 (Brand not found)
        """
        product: Product = await self._get_product(db, product_id)

        if product.kor_name != data.kor_name:
            await self._check_duplicate_kor_name(db, data.kor_name)
        if product.eng_name != data.eng_name:
            await self._check_duplicate_eng_name(db, data.eng_name)

        brand: Brand = await self._get_brand(db, data.brand_id)

        product.change_product(data.kor_name, data.eng_name, data.code, data.color, data.release_price)
        product.change_brand(brand)
        await db.flush()

    async def find_product_image_by_product_id(
        self,
        db: AsyncSession,
        product_id: int,
    ) -> list[ProductImageResponse]:
        await self._get_product(db, product_id)
        images: list[ProductImage] = await product_image_repository.get_by_product_id(db, product_id)
        return [ProductImageResponse(id=i.id, name=i.name) for i in images]

    async def add_product_image(
        self,
        db: AsyncSession,
        data: ProductImageAddRequest,
    ) -> None:
        """상품 이미지를 등록합니다.

        Add images to a product. Names repeated inside the request are
        collapsed; if any requested name already exists among the product's
        images, nothing is inserted and the error lists every colliding name,
        space-joined.

        Raises:
            ProductNotFoundError: 상품이 없을 때 (No such product)
            ProductImageDuplicationError: 이미지 이름이 겹칠 때 (Name collision)
        """
        product: Product = await self._get_product(db, data.product_id)
        names: list[str] = list(dict.fromkeys(data.image_name_list))

        duplicates: list[ProductImage] = await product_image_repository.get_by_product_id_and_names(
            db, product.id, names
        )
        if duplicates:
            raise ProductImageDuplicationError(" ".join(i.name for i in duplicates))

        await product_image_repository.bulk_create(
            db, [{"name": name, "product_id": product.id} for name in names]
        )

    async def delete_product_image(
        self,
        db: AsyncSession,
        product_image_id: int,
    ) -> None:
        deleted: bool = await product_image_repository.delete(db, product_image_id)
        if not deleted:
            raise ProductImageNotFoundError(product_image_id)

    async def find_product_detail_by_id(
        self,
        db: AsyncSession,
        product_id: int,
    ) -> ProductDetailResponse:
        """상품 상세 정보를 조회합니다.

        Return the product detail projection: brand, images, sizes, and the
        current lowest ask / highest bid / last settled price.

        Raises:
            ProductNotFoundError: 상품이 없을 때 (No such product)
        """
        product: Product | None = await product_repository.get_detail(db, product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        lowest_sell, highest_buy, last_done = await trade_repository.get_price_summary(db, product_id)

        return ProductDetailResponse(
            id=product.id,
            kor_name=product.kor_name,
            eng_name=product.eng_name,
            code=product.code,
            color=product.color,
            release_price=product.release_price,
            brand_id=product.brand_id,
            brand_name=product.brand.name,
            images=[ProductImageResponse(id=i.id, name=i.name) for i in product.images],
            sizes=[ProductSizeResponse(id=s.id, size=s.size) for s in product.sizes],
            lowest_sell_price=lowest_sell,
            highest_buy_price=highest_buy,
            last_done_price=last_done,
        )

    async def find_product_size(
        self,
        db: AsyncSession,
        product_id: int,
        size: int,
    ) -> ProductSize:
        """상품의 특정 사이즈를 조회합니다.

        Resolve one size bucket of a product.

        Raises:
            ProductNotFoundError: 상품이 없을 때 (No such product)
            ProductSizeNotFoundError: 해당 사이즈가 없을 때 (No such size bucket)
        """
        await self._get_product(db, product_id)
        product_size: ProductSize | None = await product_size_repository.get_by_product_and_size(
            db, product_id, size
        )
        if product_size is None:
            raise ProductSizeNotFoundError(size)
        return product_size


# 싱글턴 인스턴스 — Singleton instance
product_service: ProductService = ProductService()
