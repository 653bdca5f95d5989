"""Main domain controller connector module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

import uvicorn
from dishka import make_async_container
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI

from api import dns_router, groups_router, users_router
from config import Settings
from ioc import HTTPProvider, MainProvider


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    await app.state.dishka_container.close()


def _create_basic_app(settings: Settings) -> FastAPI:
    """Create basic FastAPI app."""
    app = FastAPI(
        name="DCConnector",
        title="Domain Controller Connector",
        debug=settings.DEBUG,
        root_path="/api",
        version=settings.VENDOR_VERSION,
        lifespan=_lifespan,
    )
    app.include_router(dns_router)
    app.include_router(groups_router)
    app.include_router(users_router)

    return app


def create_prod_app(
    factory: Callable[[Settings], FastAPI] = _create_basic_app,
    settings: Settings | None = None,
) -> FastAPI:
    """Create production app with container."""
    settings = settings or Settings.from_os()
    app = factory(settings)
    container = make_async_container(
        MainProvider(),
        HTTPProvider(),
        context={Settings: settings},
    )

    setup_dishka(container, app)
    return app


if __name__ == "__main__":
    settings = Settings.from_os()

    uvicorn.run(
        "__main__:create_prod_app",
        host=str(settings.HOST),
        port=settings.HTTP_PORT,
        loop="uvloop",
        factory=True,
    )
