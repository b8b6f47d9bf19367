import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

import uvicorn
from fastapi import FastAPI

from cardsearch.api import cards_router, health_router
from cardsearch.config import settings
from cardsearch.services.search_engine import ScryfallSearchEngine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the shared search engine on startup and close it on shutdown."""
    async with ScryfallSearchEngine() as engine:
        logger.info("Search engine ready: %s", engine.search_url)
        app.state.search_engine = engine
        yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("cardsearch"),
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(cards_router)
app.include_router(health_router)


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
