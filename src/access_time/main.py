# src/access_time/main.py
"""Main entry point for the Access Time application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from access_time.api.v1 import (
    contract_router,
    orders_router,
    packages_router,
    sessions_router,
    system_router,
)
from access_time.core.settings import settings
from access_time.services.errors import (
    AccessTimeError,
    AlreadyGrantedError,
    AlreadyInitializedError,
    InsufficientBalanceError,
    NotInitializedError,
    OrderNotFoundError,
    PackageNotFoundError,
    ReplayedRequestError,
    UnauthorizedError,
)
from access_time.services.token_ledger import TokenLedgerError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Most specific classes first.
_ERROR_STATUS: tuple[tuple[type[AccessTimeError], int], ...] = (
    (ReplayedRequestError, status.HTTP_429_TOO_MANY_REQUESTS),
    (UnauthorizedError, status.HTTP_403_FORBIDDEN),
    (AlreadyInitializedError, status.HTTP_409_CONFLICT),
    (NotInitializedError, status.HTTP_409_CONFLICT),
    (AlreadyGrantedError, status.HTTP_409_CONFLICT),
    (PackageNotFoundError, status.HTTP_404_NOT_FOUND),
    (OrderNotFoundError, status.HTTP_404_NOT_FOUND),
    (InsufficientBalanceError, status.HTTP_402_PAYMENT_REQUIRED),
)

# Initialize FastAPI app
app = FastAPI(
    title="Access Time API",
    description="Token-paid, pausable time-balance entitlements",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Include API routers
app.include_router(contract_router, prefix="/api/v1")
app.include_router(packages_router, prefix="/api/v1")
app.include_router(orders_router, prefix="/api/v1")
app.include_router(sessions_router, prefix="/api/v1")
app.include_router(system_router, prefix="/api/v1")


def status_for(err: AccessTimeError) -> int:
    """Return the HTTP status code for an Access Time error."""
    for error_type, code in _ERROR_STATUS:
        if isinstance(err, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


@app.exception_handler(AccessTimeError)
async def access_time_error_handler(request: Request, exc: AccessTimeError) -> JSONResponse:
    return JSONResponse(
        status_code=status_for(exc),
        content={"detail": exc.detail, "error": exc.kind, "code": exc.code},
    )


@app.exception_handler(TokenLedgerError)
async def token_ledger_error_handler(request: Request, exc: TokenLedgerError) -> JSONResponse:
    logger.info("Token transfer rejected on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_402_PAYMENT_REQUIRED,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("access_time.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
