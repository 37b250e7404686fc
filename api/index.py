"""
Storefront Relay - Main FastAPI Application

Single entry point for the storefront widget API.
"""
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load .env before modules that read os.environ at import time
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.cart import CartValidationError
from core.commerce import StorefrontError
from core.errors import ConfigurationError, ERROR_INTERNAL, ERROR_INVALID_REQUEST
from core.logging import get_logger
from core.routers import chatbot_router, widget_router
from core.routers.deps import shutdown_services
from core.session import SESSION_HEADER

logger = get_logger(__name__)


def _allowed_origins() -> list[str]:
    raw = os.environ.get("ALLOWED_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    yield
    # Shutdown
    await shutdown_services()


app = FastAPI(
    title="Storefront Relay",
    description="Search, cart and checkout relay between the storefront widget and the Shopify Storefront API",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS for the storefront widget
app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins(),
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", SESSION_HEADER],
)

app.include_router(widget_router)
app.include_router(chatbot_router)


# ==================== ERROR HANDLERS ====================

def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": True, "message": message})


@app.exception_handler(CartValidationError)
async def cart_validation_error_handler(request: Request, exc: CartValidationError):
    return _error_response(400, str(exc))


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return _error_response(400, f"{ERROR_INVALID_REQUEST}: {details}" if details else ERROR_INVALID_REQUEST)


@app.exception_handler(StorefrontError)
async def storefront_error_handler(request: Request, exc: StorefrontError):
    logger.error("%s %s failed (%s): %s", request.method, request.url.path, exc.kind, exc.message)
    return _error_response(500, exc.message)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    # Missing storefront / Redis settings surface here
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return _error_response(500, str(exc))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("%s %s crashed", request.method, request.url.path, exc_info=exc)
    return _error_response(500, ERROR_INTERNAL)


# ==================== HEALTH CHECK ====================

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "storefront-relay"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.index:app", host="0.0.0.0", port=int(os.environ.get("PORT", "3000")))
