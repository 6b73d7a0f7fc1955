"""상품 관련 Pydantic 요청/응답 스키마 정의.

Product-related Pydantic request/response schema definitions.
Covers product registration/update, search results, image management and
the product detail projection.
"""

from typing import Annotated

from pydantic import BaseModel, Field

# 이미지 파일 이름 — product_images.name 컬럼 길이와 동일 (Image file name, bounded like its column)
ImageName = Annotated[str, Field(min_length=1, max_length=255)]


class ProductSaveRequest(BaseModel):
    """상품 등록/수정 요청 스키마.

    Product create/update request schema.

    Attributes:
        kor_name: 한글 상품명 (Korean name, unique)
        eng_name: 영문 상품명 (English name, unique)
        code: 모델 번호 (Model number, optional)
        color: 대표 색상 (Colorway, optional)
        release_price: 발매가 (Release price, optional)
        brand_id: 브랜드 ID (Brand identifier)
        image_list: 초기 이미지 이름 목록 — 등록 시에만 사용 (Initial image names, create only)
    """

    kor_name: str = Field(min_length=1, max_length=255)
    eng_name: str = Field(min_length=1, max_length=255)
    code: str | None = Field(default=None, max_length=100)
    color: str | None = Field(default=None, max_length=100)
    release_price: int | None = Field(default=None, ge=0)
    brand_id: int
    image_list: list[ImageName] = []


class ProductLoadResponse(BaseModel):
    """상품 검색 결과 요약 스키마 (Product summary used by search and create)."""

    id: int
    kor_name: str
    eng_name: str
    code: str | None = None
    color: str | None = None
    release_price: int | None = None
    brand_id: int
    brand_name: str = ""
    image: str | None = None  # 대표 이미지 — 첫 번째 이미지 (First image name, if any)


class ProductImageAddRequest(BaseModel):
    """상품 이미지 등록 요청 스키마 (Add images to an existing product)."""

    product_id: int
    image_name_list: list[ImageName] = Field(min_length=1)


class ProductImageResponse(BaseModel):
    """상품 이미지 응답 스키마 (Product image)."""

    id: int
    name: str


class ProductSizeResponse(BaseModel):
    """상품 사이즈 응답 스키마 (Product size bucket)."""

    id: int
    size: int


class ProductDetailResponse(BaseModel):
    """상품 상세 응답 스키마.

    Product detail projection.

    Attributes:
        lowest_sell_price: 최저 판매 입찰가 (Lowest open ask, None if no asks)
        highest_buy_price: 최고 구매 입찰가 (Highest open bid, None if no bids)
        last_done_price: 최근 체결가 (Most recent settled price, None if never traded)
    """

    id: int
    kor_name: str
    eng_name: str
    code: str | None = None
    color: str | None = None
    release_price: int | None = None
    brand_id: int
    brand_name: str
    images: list[ProductImageResponse] = []
    sizes: list[ProductSizeResponse] = []
    lowest_sell_price: int | None = None
    highest_buy_price: int | None = None
    last_done_price: int | None = None
