"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response data and ships one structured event per request
to Axiom. Domain failures are answered with HTTP 200 and a
``{success: false, code, message}`` envelope, so the envelope of every JSON
response is inspected and its failure code/message are logged.
Sensitive fields (password, token) are masked.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from shoestrade.config import settings

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies and query strings
_SENSITIVE_KEYS = re.compile(
    r"(password|secret|token|authorization|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


def _mask(data: Any, depth: int = 0) -> Any:
    """민감 필드 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {k: "***" if _SENSITIVE_KEYS.search(k) else _mask(v, depth + 1) for k, v in data.items()}
    if isinstance(data, list):
        return [_mask(item, depth + 1) for item in data[:20]]
    return data


async def _read_request_body(request: Request) -> Any:
    body_bytes: bytes = await request.body()
    if not body_bytes:
        return None
    try:
        return _mask(json.loads(body_bytes))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"


def _envelope_failure(body: bytes) -> dict[str, Any] | None:
    """응답 봉투에서 실패 정보를 추출합니다.

    Return ``{"code", "message"}`` for a failure envelope, None for a
    success envelope or a body that is not an envelope.
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict) or data.get("success", True):
        return None
    return {"code": data.get("code"), "message": str(data.get("message", ""))[:500]}


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs all API requests and responses to Axiom.
    Captures: method, path, query params, request body, status code,
    envelope failure code and message.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # Axiom 미설정 또는 제외 경로는 패스스루 — Pass through when not configured or skipped
        if self._client is None or request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.time()
        log_event: dict[str, Any] = {"method": request.method, "path": request.url.path}
        if request.query_params:
            log_event["query_params"] = _mask(dict(request.query_params))
        if request.method in ("POST", "PUT", "PATCH", "DELETE"):
            request_body = await _read_request_body(request)
            if request_body is not None:
                log_event["request_body"] = request_body

        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            if response.media_type == "application/json" or "json" in response.headers.get("content-type", ""):
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

                failure = _envelope_failure(resp_body)
                if failure is not None:
                    log_event["error_code"] = failure["code"]
                    log_event["error"] = failure["message"]

                # 소비한 body를 다시 응답으로 반환 — Re-wrap consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            log_event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            log_event["status_code"] = status_code
            log_event["duration_ms"] = round((time.time() - start_time) * 1000, 2)
            try:
                self._client.ingest_events(self._dataset, [log_event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break request on log failure

        return response
