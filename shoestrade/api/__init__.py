"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every router into a single router for
inclusion in the FastAPI application.

Included routers:
    - products: 상품/상품 이미지/상품별 입찰 조회 (Products, images, per-product trade queries)
    - brands: 브랜드 관리 (Brand management)
    - trades: 회원 입찰 관리 (Member bids/asks)
    - members: 인증/회원 정보/배송지 (Auth, profile, addresses)
"""

from fastapi import APIRouter

from shoestrade.api.brands import router as brands_router
from shoestrade.api.members import router as members_router
from shoestrade.api.products import router as products_router
from shoestrade.api.trades import router as trades_router

api_router: APIRouter = APIRouter()

api_router.include_router(products_router, prefix="/product", tags=["Products"])
api_router.include_router(brands_router, prefix="/brand", tags=["Brands"])
api_router.include_router(trades_router, prefix="/trade", tags=["Trades"])
api_router.include_router(members_router, prefix="/member", tags=["Members"])
