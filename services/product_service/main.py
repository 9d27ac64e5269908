from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shared.config.database import AsyncSessionLocal, dispose_engine
from shared.observability import setup_observability
from .errors import InvalidField, MissingField, NotFound, StorageError
from .router import router, public_router
from .service import ProductService

logger = structlog.get_logger(__name__)


async def init_product_store() -> None:
    """Create the products table and seed it on first start."""
    async with AsyncSessionLocal() as db:
        await ProductService.initialize(db)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_product_store()
    yield
    await dispose_engine()


product_app = FastAPI(
    title="Product Service",
    version="1.0.0",
    lifespan=lifespan,
)

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(product_app, "product_service")

product_app.include_router(public_router)
product_app.include_router(router)


# --- DOMAIN ERROR -> HTTP MAPPING ---
@product_app.exception_handler(MissingField)
@product_app.exception_handler(InvalidField)
async def field_error_handler(request: Request, exc):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc), "field": exc.field},
    )


@product_app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Product not found"},
    )


@product_app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    # The cause is already logged by the repository; don't leak it to clients.
    logger.error("request_failed", path=request.url.path, error=type(exc.cause).__name__)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal storage error"},
    )
