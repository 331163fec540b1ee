"""
Literature reader server
Static reading interface, literature catalog API and run-code proxy on one listener
"""

import argparse
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import httpx
import uvicorn
from fastapi import FastAPI

from . import catalog, proxy
from .config import Settings
from .static import mount_static

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the application.

    ``transport`` replaces the network transport of the compile service client,
    tests pass an ``httpx.MockTransport`` here.
    """
    if settings is None:
        settings = Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with httpx.AsyncClient(
            timeout=settings.compile_timeout,
            transport=transport,
        ) as client:
            app.state.http_client = client
            yield

    app = FastAPI(
        title="Literature Reader",
        description="Reading interface, literature catalog and run-code proxy.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.include_router(catalog.router)
    app.include_router(proxy.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "literature-reader"}

    mount_static(app, settings.literature_dir, settings.static_dir)
    return app


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the literature reader")
    parser.add_argument("--host", help="interface to bind")
    parser.add_argument("--port", type=int, help="port to listen on")
    parser.add_argument("--literature-dir", help="folder with the books")
    parser.add_argument("--static-dir", help="folder with the reading interface")
    parser.add_argument("--compile-url", help="compile service endpoint")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    settings = Settings.from_env()
    overrides = {
        key: value for key, value in vars(args).items() if value is not None
    }
    if overrides:
        settings = settings.model_copy(update=overrides)

    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
    logger.info("Server running on http://localhost:%s", settings.port)
    logger.info("Open http://localhost:%s/index.html", settings.port)
    logger.info(
        "Serving %s and books from %s", settings.static_dir, settings.literature_dir
    )

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
