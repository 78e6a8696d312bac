from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI

from .routes import router
from .. import __version__
from ..config import ServiceSettings
from ..core.catalog import load_catalog, load_default_catalog
from ..core.resolver import ThemeResolver

logger = logging.getLogger(__name__)


def create_app(settings: Optional[ServiceSettings] = None, resolver: Optional[ThemeResolver] = None) -> FastAPI:
    settings = settings or ServiceSettings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: load the catalog once; it is read-only afterwards
        if app.state.resolver is None:
            if settings.catalog_path:
                catalog = load_catalog(settings.catalog_path)
            else:
                catalog = load_default_catalog()
            app.state.resolver = ThemeResolver(catalog)
        logger.info("Serving %d themes", app.state.resolver.catalog.theme_count())
        yield

    app = FastAPI(
        title="themeday",
        description="Date-based theme resolution",
        version=__version__,
        lifespan=lifespan
    )
    app.state.resolver = resolver
    app.state.settings = settings

    app.include_router(router)

    return app


app = create_app()
