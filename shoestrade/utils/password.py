"""비밀번호 해싱 및 검증 유틸리티 모듈.

Password hashing and verification utility module.
Uses bcrypt directly; passwords are never stored in plain text.
bcrypt only accepts up to 72 bytes of input, so longer passwords are
rejected at sign-up and never match at login.
"""

import bcrypt

# bcrypt 입력 최대 길이 (바이트) — bcrypt input limit in bytes
MAX_PASSWORD_BYTES: int = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    """평문 비밀번호를 bcrypt 해시로 변환합니다.

    Hash a plain text password using bcrypt with a random salt.
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호와 bcrypt 해시를 비교 검증합니다 (constant-time).

    A password longer than 72 bytes can never have been hashed, so it is
    reported as a mismatch.
    """
    if password_too_long(plain_password):
        return False
    return bcrypt.checkpw(
        plain_password.encode("utf-8"), hashed_password.encode("utf-8")
    )
