"""Axiom 로깅 미들웨어 헬퍼 테스트.

Unit tests for the logging middleware helpers: sensitive field masking and
failure envelope extraction.
"""

import json

from shoestrade.middleware.axiom_logging import _envelope_failure, _mask


class TestMask:
    """민감 필드 마스킹 테스트."""

    def test_masks_password_and_tokens(self):
        masked = _mask({"email": "a@test.com", "password": "pw", "refresh_token": "abc"})
        assert masked == {"email": "a@test.com", "password": "***", "refresh_token": "***"}

    def test_masks_nested_values(self):
        masked = _mask({"items": [{"access_token": "abc", "size": 265}]})
        assert masked == {"items": [{"access_token": "***", "size": 265}]}


class TestEnvelopeFailure:
    """실패 봉투 추출 테스트."""

    def test_failure_envelope(self):
        body = json.dumps({"success": False, "code": -1, "message": "1 : 해당 id의 상품을 찾을 수 없습니다."})
        assert _envelope_failure(body.encode("utf-8")) == {
            "code": -1,
            "message": "1 : 해당 id의 상품을 찾을 수 없습니다.",
        }

    def test_success_envelope(self):
        body = json.dumps({"success": True, "code": 0, "message": "성공하였습니다."})
        assert _envelope_failure(body.encode("utf-8")) is None

    def test_non_envelope_body(self):
        assert _envelope_failure(b'{"status": "ok"}') is None
        assert _envelope_failure(b"[1, 2]") is None
        assert _envelope_failure(b"not json") is None
