"""트랜잭션 경계 테스트 — get_db 롤백 동작.

Transaction boundary tests. These run through the real ``get_db`` dependency
(no override) with its session factory pointed at the test engine, so a
failure raised after rows were flushed must leave nothing behind.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

import shoestrade.database as database
from shoestrade.database import get_db
from shoestrade.main import app
from shoestrade.models.member import MemberRole
from shoestrade.models.product import Brand, Product, ProductSize
from shoestrade.repositories.product_image_repository import product_image_repository
from shoestrade.utils.exceptions import ProductImageDuplicationError
from tests.conftest import assert_failure, auth_header, create_member, make_token


class RecordingSession(AsyncSession):
    """rollback 호출 횟수를 기록하는 세션."""

    rollbacks: int = 0

    async def rollback(self) -> None:
        type(self).rollbacks += 1
        await super().rollback()


@pytest.fixture
def session_factory(engine: AsyncEngine, monkeypatch) -> async_sessionmaker[AsyncSession]:
    """get_db가 테스트 엔진에서 세션을 열도록 교체합니다."""
    RecordingSession.rollbacks = 0
    factory = async_sessionmaker(engine, class_=RecordingSession, expire_on_commit=False)
    monkeypatch.setattr(database, "async_session", factory)
    return factory


async def count_rows(factory: async_sessionmaker[AsyncSession], model) -> int:
    async with factory() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar()


class TestGetDbRollback:
    """get_db 롤백 테스트."""

    async def test_failure_after_flush_persists_nothing(self, session_factory, monkeypatch):
        """상품/사이즈 flush 후 이미지 단계에서 실패하면 전부 롤백됨."""
        async with session_factory() as setup:
            admin = await create_member(setup, "admin@test.com", "admin123!", MemberRole.ADMIN)
            brand = Brand(name="Nike")
            setup.add(brand)
            await setup.commit()
        token = make_token(admin)

        async def failing_bulk_create(db, rows):
            raise ProductImageDuplicationError("panda-1.png")

        monkeypatch.setattr(product_image_repository, "bulk_create", failing_bulk_create)

        assert get_db not in app.dependency_overrides
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            res = await ac.post(
                "/product",
                json={
                    "kor_name": "나이키 덩크 로우 범고래",
                    "eng_name": "Nike Dunk Low Panda",
                    "brand_id": brand.id,
                    "image_list": ["panda-1.png"],
                },
                headers=auth_header(token),
            )

        assert_failure(res, -1)
        assert RecordingSession.rollbacks >= 1
        assert await count_rows(session_factory, Product) == 0
        assert await count_rows(session_factory, ProductSize) == 0

    async def test_exception_rolls_back_session(self, session_factory):
        """의존성 본문에서 예외가 전파되면 flush된 행이 롤백됨."""
        gen = get_db()
        session = await gen.__anext__()
        session.add(Brand(name="Adidas"))
        await session.flush()

        with pytest.raises(RuntimeError):
            await gen.athrow(RuntimeError("boom"))

        assert RecordingSession.rollbacks == 1
        assert await count_rows(session_factory, Brand) == 0
