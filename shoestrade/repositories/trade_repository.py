"""입찰 레포지토리 — 체결 내역 및 입찰 집계 쿼리.

Trade Repository — Completed-trade listing, grouped open bid/ask aggregation,
per-member listing and price summaries for a product.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from shoestrade.models.product import ProductSize
from shoestrade.models.trade import Trade, TradeState
from shoestrade.repositories.base import BaseRepository


class TradeRepository(BaseRepository[Trade]):
    """입찰 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the trades table.
    """

    def __init__(self) -> None:
        super().__init__(Trade)

    def build_done_trade_query(self, product_id: int) -> Select:
        """상품 체결 내역 쿼리를 생성합니다.

        Build the completed-trade query for a product: only DONE trades,
        projected to (size, price, last_modified_at), most recently modified
        first. Ties on the timestamp fall back to the newest id.

        Args:
            product_id: 상품 ID (Product identifier)

        Returns:
            Select: (size, price, last_modified_at) 행을 반환하는 쿼리
                    (Query yielding (size, price, last_modified_at) rows)
        """
        return (
            select(ProductSize.size, Trade.price, Trade.last_modified_at)
            .join(ProductSize, Trade.product_size_id == ProductSize.id)
            .where(ProductSize.product_id == product_id, Trade.trade_state == TradeState.DONE)
            .order_by(Trade.last_modified_at.desc(), Trade.id.desc())
        )

    def build_transaction_trade_query(self, product_id: int, trade_state: TradeState) -> Select:
        """상품 입찰 집계 쿼리를 생성합니다.

        Build the open bid/ask aggregation for a product: trades in
        ``trade_state`` grouped by (price, size) with a count per group.
        Groups are ordered by price then size so pages are stable.

        Args:
            product_id: 상품 ID (Product identifier)
            trade_state: 입찰 상태 — BUY 또는 SELL (Open state to aggregate)

        Returns:
            Select: (size, price, count) 행을 반환하는 쿼리
                    (Query yielding (size, price, count) rows)
        """
        return (
            select(ProductSize.size, Trade.price, func.count(Trade.id).label("count"))
            .join(ProductSize, Trade.product_size_id == ProductSize.id)
            .where(ProductSize.product_id == product_id, Trade.trade_state == trade_state)
            .group_by(Trade.price, ProductSize.size)
            .order_by(Trade.price, ProductSize.size)
        )

    async def get_with_product(self, db: AsyncSession, trade_id: int) -> Trade | None:
        """입찰을 사이즈/상품과 함께 조회합니다 (Trade with size and product loaded)."""
        query: Select = (
            select(Trade)
            .options(selectinload(Trade.product_size).selectinload(ProductSize.product))
            .where(Trade.id == trade_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_by_member(
        self,
        db: AsyncSession,
        member_id: int,
        trade_state: TradeState | None = None,
    ) -> list[Trade]:
        """회원이 등록한 입찰 목록을 조회합니다.

        Retrieve trades registered by a member, newest first, optionally
        restricted to one state.
        """
        query: Select = (
            select(Trade)
            .options(selectinload(Trade.product_size).selectinload(ProductSize.product))
            .where(Trade.member_id == member_id)
        )
        if trade_state is not None:
            query = query.where(Trade.trade_state == trade_state)
        result = await db.execute(query.order_by(Trade.id.desc()))
        return list(result.scalars().all())

    async def get_price_summary(
        self,
        db: AsyncSession,
        product_id: int,
    ) -> tuple[int | None, int | None, int | None]:
        """상품의 최저 판매가, 최고 구매가, 최근 체결가를 조회합니다.

        Return (lowest open ask, highest open bid, last settled price) for a
        product. Each is None when no matching trade exists.
        """

        def of_state(column, trade_state: TradeState) -> Select:
            return (
                select(column)
                .join(ProductSize, Trade.product_size_id == ProductSize.id)
                .where(ProductSize.product_id == product_id, Trade.trade_state == trade_state)
            )

        lowest_sell = (await db.execute(of_state(func.min(Trade.price), TradeState.SELL))).scalar()
        highest_buy = (await db.execute(of_state(func.max(Trade.price), TradeState.BUY))).scalar()
        last_done = (
            await db.execute(
                of_state(Trade.price, TradeState.DONE)
                .order_by(Trade.last_modified_at.desc(), Trade.id.desc())
                .limit(1)
            )
        ).scalar()
        return lowest_sell, highest_buy, last_done


# 싱글턴 인스턴스 — Singleton instance
trade_repository: TradeRepository = TradeRepository()
