"""상품 카탈로그 SQLAlchemy ORM 모델 정의.

Catalog SQLAlchemy ORM model definitions.
Brand owns products; a product owns its images and its fixed size buckets.

Tables:
    - brands: 브랜드 (Shoe brands, unique name)
    - products: 상품 (Products, unique Korean/English names)
    - product_images: 상품 이미지 (Image names, unique within a product)
    - product_sizes: 상품 사이즈 (Size buckets 220..300 generated per product)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shoestrade.database import Base

# 상품 생성 시 만들어지는 신발 사이즈 — Size buckets materialized on product creation (mm)
MIN_SHOE_SIZE: int = 220
MAX_SHOE_SIZE: int = 300
SHOE_SIZE_STEP: int = 5
SHOE_SIZES: tuple[int, ...] = tuple(range(MIN_SHOE_SIZE, MAX_SHOE_SIZE + 1, SHOE_SIZE_STEP))


class Brand(Base):
    """브랜드 모델.

    Brand model. Deleting a brand deletes all of its products.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 브랜드 이름 (Brand name, unique across brands)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "brands"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 브랜드 이름 — 서비스 계층에서 중복 검사 후 저장 (Checked for duplicates before write)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # 관계 — 브랜드 삭제 시 상품 일괄 삭제 (Cascade delete to products)
    products = relationship("Product", back_populates="brand", cascade="all, delete-orphan")


class Product(Base):
    """상품 모델 — 하나의 브랜드에 속하는 신발 모델.

    Product model. Belongs to exactly one brand (non-owning reference) and owns
    its images and size buckets.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        kor_name: 한글 상품명 (Korean name, unique)
        eng_name: 영문 상품명 (English name, unique)
        code: 모델 번호 (Manufacturer model number, optional)
        color: 대표 색상 (Colorway, optional)
        release_price: 발매가 (Retail release price, optional)
        brand_id: 브랜드 FK (Brand foreign key)
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kor_name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    eng_name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    code: Mapped[str | None] = mapped_column(String(100), nullable=True)
    color: Mapped[str | None] = mapped_column(String(100), nullable=True)
    release_price: Mapped[int | None] = mapped_column(Integer, nullable=True)
    brand_id: Mapped[int] = mapped_column(Integer, ForeignKey("brands.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    brand = relationship("Brand", back_populates="products")
    images = relationship("ProductImage", back_populates="product", cascade="all, delete-orphan", order_by="ProductImage.id")
    sizes = relationship("ProductSize", back_populates="product", cascade="all, delete-orphan", order_by="ProductSize.size")

    def change_product(self, kor_name: str, eng_name: str, code: str | None, color: str | None, release_price: int | None) -> None:
        """상품 기본 정보를 변경합니다 (Replace the product's descriptive fields)."""
        self.kor_name = kor_name
        self.eng_name = eng_name
        self.code = code
        self.color = color
        self.release_price = release_price

    def change_brand(self, brand: Brand) -> None:
        self.brand_id = brand.id


class ProductImage(Base):
    """상품 이미지 모델.

    Product image model. Only the image name (storage key) is kept.
    """

    __tablename__ = "product_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)

    product = relationship("Product", back_populates="images")


class ProductSize(Base):
    """상품 사이즈 모델 — 입찰이 등록되는 단위.

    Product size bucket. Trades (bids/asks) are registered against a size, and
    deleting the size deletes its trades.
    """

    __tablename__ = "product_sizes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    size: Mapped[int] = mapped_column(Integer, nullable=False)
    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)

    product = relationship("Product", back_populates="sizes")
    trades = relationship("Trade", back_populates="product_size", cascade="all, delete-orphan")
