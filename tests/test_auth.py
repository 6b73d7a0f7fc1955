"""인증 API 테스트.

Authentication API tests — Join, login, token reissue, logout, and access
token validation codes.
"""

from datetime import datetime, timedelta, timezone

import jwt
from httpx import AsyncClient
from sqlalchemy import func, select

from shoestrade.config import settings
from shoestrade.models.member import Member
from shoestrade.models.token import RefreshToken
from shoestrade.utils.jwt import create_refresh_token
from tests.conftest import assert_failure, assert_success, auth_header

URL = "/member"


async def login(client: AsyncClient, email: str, password: str) -> dict:
    res = await client.post(f"{URL}/login", json={"email": email, "password": password})
    return assert_success(res)["data"]


class TestJoin:
    """회원가입 테스트."""

    async def test_join(self, client: AsyncClient):
        res = await client.post(f"{URL}/join", json={"email": "new@test.com", "password": "new123!"})
        data = assert_success(res)["data"]
        assert data["email"] == "new@test.com"
        assert data["role"] == "USER"

    async def test_join_duplicate_email(self, client: AsyncClient, member):
        res = await client.post(f"{URL}/join", json={"email": "member@test.com", "password": "x1234"})
        body = assert_failure(res, -100)
        assert body["message"] == "이미 회원가입된 이메일 입니다."

    async def test_join_invalid_email(self, client: AsyncClient):
        res = await client.post(f"{URL}/join", json={"email": "not-an-email", "password": "x1234"})
        assert_failure(res, -9999)

    async def test_join_password_over_bcrypt_limit(self, client: AsyncClient, db):
        """72바이트를 넘는 비밀번호(한글 40자 = 120바이트)는 -9999, 회원이 생성되지 않음."""
        res = await client.post(f"{URL}/join", json={"email": "long@test.com", "password": "비밀번호" * 10})
        assert_failure(res, -9999)

        count = (await db.execute(select(func.count()).select_from(Member))).scalar()
        assert count == 0


class TestLogin:
    """로그인 테스트."""

    async def test_login(self, client: AsyncClient, member):
        data = await login(client, "member@test.com", "member123!")
        assert data["token_type"] == "bearer"

        me = await client.get(f"{URL}/me", headers=auth_header(data["access_token"]))
        assert assert_success(me)["data"]["email"] == "member@test.com"

    async def test_login_wrong_email(self, client: AsyncClient, member):
        res = await client.post(f"{URL}/login", json={"email": "nobody@test.com", "password": "member123!"})
        assert_failure(res, -103)

    async def test_login_wrong_password(self, client: AsyncClient, member):
        res = await client.post(f"{URL}/login", json={"email": "member@test.com", "password": "wrong"})
        assert_failure(res, -104)

    async def test_login_password_over_bcrypt_limit(self, client: AsyncClient, member):
        """72바이트를 넘는 비밀번호는 불일치(-104)로 처리됨."""
        res = await client.post(f"{URL}/login", json={"email": "member@test.com", "password": "x" * 80})
        assert_failure(res, -104)


class TestReissue:
    """토큰 재발급 테스트."""

    async def test_reissue_rotates_refresh_token(self, client: AsyncClient, member, db):
        tokens = await login(client, "member@test.com", "member123!")

        res = await client.post(f"{URL}/reissue", json={"refresh_token": tokens["refresh_token"]})
        new_tokens = assert_success(res)["data"]
        assert new_tokens["refresh_token"] != tokens["refresh_token"]

        # 이전 리프레시 토큰은 더 이상 사용할 수 없음
        res = await client.post(f"{URL}/reissue", json={"refresh_token": tokens["refresh_token"]})
        assert_failure(res, -107)

        stored = (await db.execute(select(RefreshToken.token))).scalars().all()
        assert list(stored) == [new_tokens["refresh_token"]]

    async def test_reissue_unknown_token(self, client: AsyncClient, member):
        res = await client.post(f"{URL}/reissue", json={"refresh_token": "not-a-token"})
        body = assert_failure(res, -107)
        assert body["message"] == "refreshToken이 일치하지 않습니다."

    async def test_reissue_expired_token(self, client: AsyncClient, member, db):
        token = create_refresh_token({"sub": str(member.id), "role": member.role.value})
        db.add(
            RefreshToken(
                member_id=member.id,
                token=token,
                expires_at=datetime.now(timezone.utc) - timedelta(minutes=1),
            )
        )
        await db.flush()

        res = await client.post(f"{URL}/reissue", json={"refresh_token": token})
        assert_failure(res, -108)

    async def test_logout_revokes_refresh_token(self, client: AsyncClient, member):
        tokens = await login(client, "member@test.com", "member123!")

        assert_success(await client.post(f"{URL}/logout", json={"refresh_token": tokens["refresh_token"]}))
        res = await client.post(f"{URL}/reissue", json={"refresh_token": tokens["refresh_token"]})
        assert_failure(res, -107)


class TestAccessToken:
    """액세스 토큰 검증 코드 테스트."""

    async def test_missing_token(self, client: AsyncClient):
        assert_failure(await client.get(f"{URL}/me"), 1000)

    async def test_tampered_token(self, client: AsyncClient, member_token):
        res = await client.get(f"{URL}/me", headers=auth_header(member_token[:-2] + "xx"))
        body = assert_failure(res, 1001)
        assert body["message"] == "변조된 토큰입니다."

    async def test_malformed_token(self, client: AsyncClient):
        assert_failure(await client.get(f"{URL}/me", headers=auth_header("abc.def")), 1001)

    async def test_expired_token(self, client: AsyncClient, member):
        token = jwt.encode(
            {
                "sub": str(member.id),
                "type": "access",
                "exp": datetime.now(timezone.utc) - timedelta(seconds=10),
            },
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
        body = assert_failure(await client.get(f"{URL}/me", headers=auth_header(token)), 1002)
        assert body["message"] == "만료된 토큰입니다."

    async def test_refresh_token_as_access_token(self, client: AsyncClient, member):
        token = create_refresh_token({"sub": str(member.id), "role": member.role.value})
        assert_failure(await client.get(f"{URL}/me", headers=auth_header(token)), 1001)

    async def test_token_for_missing_member(self, client: AsyncClient, db):
        from shoestrade.utils.jwt import create_access_token

        token = create_access_token({"sub": "9999", "role": "USER"})
        assert_failure(await client.get(f"{URL}/me", headers=auth_header(token)), -102)
