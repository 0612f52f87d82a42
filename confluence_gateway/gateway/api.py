import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from confluence_gateway.container.simple_container import SimpleContainer
from confluence_gateway.gateway.api_container import get_container_async
from confluence_gateway.gateway.routers.tools_router import ToolsRouter
from confluence_gateway.gateway.utilities.confluence.confluence_client import (
    ConfluenceClient,
)
from confluence_gateway.gateway.utilities.confluence.confluence_config import (
    ConfluenceConfig,
)
from confluence_gateway.gateway.utilities.environment_variables import (
    EnvironmentVariables,
)

logger = logging.getLogger(__name__)

logging.basicConfig(
    level=getattr(logging, EnvironmentVariables().log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


@asynccontextmanager
async def lifespan(app1: FastAPI) -> AsyncGenerator[None, None]:
    worker_id = id(app1)
    try:
        logger.info(f"Starting application initialization for worker {worker_id}...")

        # fail startup on a bad configuration instead of on the first call
        container: SimpleContainer = await get_container_async()
        config: ConfluenceConfig = container.resolve(ConfluenceConfig)
        logger.info(f"Using Confluence API at {config.base_url}")
        confluence_client: ConfluenceClient = container.resolve(ConfluenceClient)

        logger.info(f"Application initialization completed for worker {worker_id}")
        yield

        await confluence_client.aclose()

    except Exception as e:
        logger.exception(e, stack_info=True)
        raise

    finally:
        logger.info(f"Application shutdown completed for worker {worker_id}")


def create_app() -> FastAPI:
    app1: FastAPI = FastAPI(title="Confluence Data Center tools API", lifespan=lifespan)
    app1.include_router(ToolsRouter().get_router())

    @app1.get("/health")
    async def health() -> str:
        return "OK"

    return app1


# Create the FastAPI app instance
app = create_app()
