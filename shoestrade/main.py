"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 예외 핸들러, 라우터 등록.

FastAPI application entry point — Middleware, exception handlers and router
registration. Domain errors and request validation errors are rendered as
failure envelopes with HTTP 200.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shoestrade.api import api_router
from shoestrade.config import settings
from shoestrade.middleware.axiom_logging import AxiomLoggingMiddleware
from shoestrade.utils.exceptions import ErrorCode, ShoesTradeError
from shoestrade.utils.response import failure_result

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ShoesTradeError)
async def shoestrade_error_handler(request: Request, exc: ShoesTradeError) -> JSONResponse:
    """도메인 예외를 실패 응답 봉투로 변환합니다.

    Translate a domain error into ``{success: false, code, message}``.
    """
    return JSONResponse(status_code=200, content=failure_result(exc.code, exc.message).model_dump())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # 요청 검증 실패도 동일한 봉투로 응답 — Validation failures use the same envelope
    error: ErrorCode = ErrorCode.REQUEST_VALIDATION
    return JSONResponse(status_code=200, content=failure_result(error.code, error.template).model_dump())


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


app.include_router(api_router)
