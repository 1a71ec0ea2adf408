"""
Production FastAPI Application

Loads and validates the catalog once at startup, then serves the booking engine.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.app.command.load_catalog_use_case import LoadCatalogUseCase


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Ticketer] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Ticketer] Dependency injection wired')

    report = LoadCatalogUseCase(
        cinema_store=container.cinema_store(), cinema_catalog=container.cinema_catalog()
    ).execute()
    Logger.base.info(f'✅ [Ticketer] Catalog ready ({report.summary()} by validation)')

    yield

    Logger.base.info('🛑 [Ticketer] Shutting down...')
    container.unwire()
    Logger.base.info('👋 [Ticketer] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
