"""
FastAPI application factory.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hostelmanix.api.v1.router import router as api_v1_router
from hostelmanix.config.logging import setup_logging
from hostelmanix.config.settings import settings
from hostelmanix.core.middleware import register_exception_handlers, register_middlewares
from hostelmanix.db.init_db import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Schema bootstrap for local runs; production databases are provisioned separately
    if settings.is_development():
        init_db()
    yield


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version, debug mode from Settings.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the API router under ``settings.API_PREFIX``.
    """
    logger = setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    allow_all = not settings.CORS_ORIGINS or settings.CORS_ORIGINS == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.CORS_ORIGINS,
        # Browsers reject credentials with a wildcard origin
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Room-Sync-Warning"],
    )

    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_v1_router, prefix=settings.API_PREFIX)

    logger.info(f"{settings.APP_NAME} {settings.API_VERSION} configured ({settings.ENVIRONMENT})")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("hostelmanix.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
