"""FastAPI application: suggestion proxy with security middleware."""

from __future__ import annotations

import datetime as dt
import logging
import time
import uuid

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from journey import __version__
from journey.api.schemas import ErrorResponse, GenerateSuggestionsRequest, HealthResponse, SuggestionsResponse
from journey.application.generate_suggestions import generate_suggestions
from journey.config.settings import get_settings
from journey.infrastructure.logging import get_logger
from journey.infrastructure.rate_limiter import get_rate_limiter
from journey.observability.suggestion_metrics import get_suggestion_metrics
from journey.security.redact import redact_sensitive
from journey.services.suggestion_presenter import to_response_data

_api_logger = logging.getLogger("journey-ai.api")

load_dotenv()

settings = get_settings()

app = FastAPI(
    title="journey-ai",
    version=__version__,
    docs_url="/docs" if settings.enable_docs else None,
    redoc_url=None,
)


# ── Middleware ────────────────────────────────────────


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject security response headers."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.time()
        response = await call_next(request)
        _api_logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.time() - started) * 1000,
        )
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-client limit on POST requests."""

    def __init__(self, app, limiter):
        super().__init__(app)
        self._limiter = limiter

    async def dispatch(self, request: Request, call_next):
        if request.method != "POST":
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        decision = self._limiter.check(client_ip)
        if not decision.allowed:
            return JSONResponse(
                status_code=429,
                content=ErrorResponse(error="Too many requests, please try again later").model_dump(
                    exclude_none=True
                ),
                headers=decision.headers(),
            )
        response = await call_next(request)
        response.headers.update(decision.headers())
        return response


rate_limiter = get_rate_limiter(settings.rate_limit_max, settings.rate_limit_window)

# last added runs first: security headers wrap the rate limiter
app.add_middleware(RateLimitMiddleware, limiter=rate_limiter)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# ── Error handling ────────────────────────────────────


def _safe_log_exception(context: str, exc: Exception) -> None:
    _api_logger.error("%s: %s", context, redact_sensitive(f"{type(exc).__name__}: {exc}"))


def _server_error(exc: Exception) -> JSONResponse:
    if get_settings().is_production:
        body = ErrorResponse(error="Internal server error")
    else:
        body = ErrorResponse(error="Internal server error", details=redact_sensitive(str(exc)))
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


@app.exception_handler(RequestValidationError)
async def _validation_error_handler(_request: Request, exc: RequestValidationError):
    details = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        details.append({"field": ".".join(loc) or "body", "message": err.get("msg", "invalid value")})
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="Validation failed", details=details).model_dump(),
    )


@app.exception_handler(Exception)
async def _unhandled_error_handler(_request: Request, exc: Exception):
    _safe_log_exception("unhandled error", exc)
    return _server_error(exc)


# ── Routes ────────────────────────────────────────────


@app.get("/")
def root():
    return {"message": "Hello from Journey AI Backend!"}


@app.get("/health", response_model=HealthResponse)
def health():
    current = get_settings()
    return HealthResponse(
        timestamp=dt.datetime.now(dt.timezone.utc).isoformat(),
        environment=current.environment,
        port=current.port,
    )


@app.get("/metrics")
def metrics():
    return get_suggestion_metrics().snapshot()


@app.post("/api/generate-suggestions", response_model=SuggestionsResponse)
def generate(req: GenerateSuggestionsRequest):
    """Suggestions from the model, or from the catalog when the model fails."""
    trace_id = str(uuid.uuid4())[:8]
    started = time.time()
    log = get_logger(trace_id)
    try:
        result = generate_suggestions(req.to_contract(), logger=log)
    except Exception as e:
        _safe_log_exception(f"generate-suggestions error [{trace_id}]", e)
        return _server_error(e)

    data = to_response_data(result)
    latency_ms = (time.time() - started) * 1000
    log.summary(
        source=data["source"],
        style=data["style"],
        suggestions=len(data["suggestions"]),
        latency_ms=round(latency_ms, 1),
    )
    get_suggestion_metrics().record(
        source=data["source"],
        style=data["style"],
        latency_ms=latency_ms,
        fallback_reason=data.get("fallbackReason", ""),
    )
    return SuggestionsResponse(data=data)
