"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from video_relay_common.logging import setup_logging

from dependencies import close_http_client, get_config
from exceptions import (
    InvalidVideoRequestError,
    WebhookForwardingError,
    WebhookNotConfiguredError,
)
from response_models import ErrorResponse
from routes import generate_router, service_router

logger = setup_logging()
patch_all()


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    logger.info(
        "Video generator relay started",
        extra={
            "environment": config.environment,
            "webhook_configured": config.webhook.is_configured,
        },
    )
    yield
    await close_http_client()


app = FastAPI(title="Video Generator Relay", lifespan=lifespan)
app.include_router(service_router)
app.include_router(generate_router)


def _error_response(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(by_alias=True, exclude_none=True),
    )


@app.exception_handler(InvalidVideoRequestError)
async def handle_invalid_request(request: Request, exc: InvalidVideoRequestError):
    logger.info("Rejected invalid video request", extra={"errors": exc.errors})
    return _error_response(400, ErrorResponse(error=str(exc), errors=exc.errors))


@app.exception_handler(RequestValidationError)
async def handle_malformed_body(request: Request, exc: RequestValidationError):
    errors = [
        f"{'.'.join(str(part) for part in error['loc'][1:]) or 'body'}: {error['msg']}"
        for error in exc.errors()
    ]
    logger.info("Rejected malformed request body", extra={"errors": errors})
    return _error_response(
        400, ErrorResponse(error="Invalid request body", errors=errors)
    )


@app.exception_handler(WebhookForwardingError)
async def handle_forwarding_error(request: Request, exc: WebhookForwardingError):
    return _error_response(
        500, ErrorResponse(error=str(exc), rate_limited=exc.rate_limited)
    )


@app.exception_handler(WebhookNotConfiguredError)
async def handle_not_configured(request: Request, exc: WebhookNotConfiguredError):
    logger.error("Rejected request, webhook URL is not configured")
    return _error_response(500, ErrorResponse(error=str(exc), rate_limited=False))


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return _error_response(
            404,
            ErrorResponse(error="Requested resource not found", path=request.url.path),
        )
    return _error_response(exc.status_code, ErrorResponse(error=str(exc.detail)))


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error", extra={"path": request.url.path})
    details = str(exc) if get_config().is_development else None
    return _error_response(
        500, ErrorResponse(error="Internal server error", details=details)
    )
