from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.middleware_correlation import CorrelationIdMiddleware
from app.core.logging import get_logger, setup_logging
from app.core.errors import register_exception_handlers
from app.db.session import init_db


# Routers
from fastapi import APIRouter
from app.api.routes.authors import router as authors_router
from app.api.routes.books import router as books_router


setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    if settings.AUTO_CREATE_SCHEMA:
        get_logger(__name__).info("Creating missing tables")
        init_db()
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Authors Books API - manage authors and the books they wrote.",
    version="1.0.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)

# CORS middleware - allow docs UI to make API requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(CorrelationIdMiddleware)

# Root endpoint
@app.get("/")
async def root():
    """API root endpoint with basic information."""
    return {
        "message": "Welcome to Authors Books API",
        "version": "1.0.0",
        "docs_url": "/docs",
        "redoc_url": "/redoc",
        "api_v1_str": settings.API_V1_STR,
        "endpoints": {
            "authors": f"{settings.API_V1_STR}/authors",
            "books": f"{settings.API_V1_STR}/books",
        },
    }

register_exception_handlers(app)

# Mount routers
api = APIRouter(prefix=settings.API_V1_STR)
api.include_router(authors_router)
api.include_router(books_router)
app.include_router(api)
