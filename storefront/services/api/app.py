from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.common.logging import get_logger
from storefront.common.settings import get_settings
from storefront.database.core.init_db import init_db
from storefront.services.api.errors import register_error_handlers
from storefront.services.api.routers import health, products

cfg = get_settings()
dev = cfg.app_env.lower() == "development"
logger = get_logger()


@asynccontextmanager
async def _lifespan(app: FastAPI):
    if cfg.db.create_all:
        init_db()
    logger.info("%s API ready (env=%s)", cfg.app_name, cfg.app_env)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
        lifespan=_lifespan,
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    register_error_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(products.router)
    return app


app = create_app()
