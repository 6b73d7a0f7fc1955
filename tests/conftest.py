"""테스트 인프라 — 임시 DB 엔진, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary database engine, session, and httpx client
fixtures. Each test gets a fresh schema created from the model metadata on
TEST_DATABASE_URL (in-memory SQLite by default; point it at a PostgreSQL
database to run against asyncpg).
"""

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from shoestrade.database import Base, get_db
from shoestrade.main import app
from shoestrade.models import *  # noqa: F401,F403 — register all models with metadata
from shoestrade.models.member import Member, MemberRole
from shoestrade.models.product import Brand
from shoestrade.schemas.product import ProductLoadResponse, ProductSaveRequest
from shoestrade.services.product_service import product_service
from shoestrade.utils.jwt import create_access_token
from shoestrade.utils.password import hash_password

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 생성/삭제합니다."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        # 인메모리 DB는 하나의 연결을 공유해야 유지됨 — In-memory DB lives on one shared connection
        eng = create_async_engine(
            TEST_DATABASE_URL,
            poolclass=StaticPool,
        )
    else:
        eng = create_async_engine(TEST_DATABASE_URL, pool_pre_ping=True)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def create_member(db: AsyncSession, email: str, password: str, role: MemberRole = MemberRole.USER) -> Member:
    member = Member(email=email, password_hash=hash_password(password), role=role)
    db.add(member)
    await db.flush()
    await db.refresh(member)
    return member


@pytest_asyncio.fixture
async def admin_member(db: AsyncSession) -> Member:
    """관리자 회원을 생성합니다."""
    return await create_member(db, "admin@test.com", "admin123!", MemberRole.ADMIN)


@pytest_asyncio.fixture
async def member(db: AsyncSession) -> Member:
    """일반 회원을 생성합니다."""
    return await create_member(db, "member@test.com", "member123!")


@pytest_asyncio.fixture
async def other_member(db: AsyncSession) -> Member:
    """두 번째 일반 회원을 생성합니다 (입찰 체결 상대방)."""
    return await create_member(db, "other@test.com", "other123!")


@pytest_asyncio.fixture
async def brand(db: AsyncSession) -> Brand:
    """테스트 브랜드를 생성합니다."""
    b = Brand(name="Nike")
    db.add(b)
    await db.flush()
    await db.refresh(b)
    return b


async def create_product(
    db: AsyncSession,
    brand: Brand,
    kor_name: str,
    eng_name: str,
    image_list: list[str] | None = None,
) -> ProductLoadResponse:
    return await product_service.save_product(
        db,
        ProductSaveRequest(
            kor_name=kor_name,
            eng_name=eng_name,
            code="DD1391-100",
            color="WHITE/BLACK",
            release_price=139000,
            brand_id=brand.id,
            image_list=image_list or [],
        ),
    )


@pytest_asyncio.fixture
async def product(db: AsyncSession, brand: Brand) -> ProductLoadResponse:
    """테스트 상품을 생성합니다 (17개 사이즈 포함)."""
    return await create_product(db, brand, "나이키 덩크 로우 범고래", "Nike Dunk Low Panda", ["panda-1.png"])


def make_token(member: Member) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({"sub": str(member.id), "role": member.role.value})


@pytest.fixture
def admin_token(admin_member) -> str:
    return make_token(admin_member)


@pytest.fixture
def member_token(member) -> str:
    return make_token(member)


@pytest.fixture
def other_token(other_member) -> str:
    return make_token(other_member)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def assert_success(res) -> dict:
    """성공 응답 봉투를 검사하고 본문을 반환합니다."""
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True, body
    assert body["code"] == 0
    assert body["message"] == "성공하였습니다."
    return body


def assert_failure(res, code: int) -> dict:
    """실패 응답 봉투(HTTP 200)를 검사하고 본문을 반환합니다."""
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is False, body
    assert body["code"] == code
    return body
