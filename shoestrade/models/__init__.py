"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the metadata, which
Alembic and relationship resolution rely on.

Modules:
    product: 브랜드, 상품, 이미지, 사이즈 (Brand, Product, ProductImage, ProductSize)
    trade: 입찰 내역 (Trade and TradeState)
    member: 회원 및 배송지 (Member and Address)
    token: 리프레시 토큰 (Refresh tokens)
"""

from shoestrade.models.product import Brand, Product, ProductImage, ProductSize
from shoestrade.models.trade import Trade, TradeState
from shoestrade.models.member import Address, Member, MemberRole
from shoestrade.models.token import RefreshToken

__all__ = [
    "Brand", "Product", "ProductImage", "ProductSize",
    "Trade", "TradeState",
    "Member", "MemberRole", "Address",
    "RefreshToken",
]
