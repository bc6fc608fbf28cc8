import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI

from browser_tools_bridge import __version__
from browser_tools_bridge.api.router import api_router
from browser_tools_bridge.api.v1.commands import get_dispatcher
from browser_tools_bridge.commands import CommandDispatcher
from browser_tools_bridge.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("browser_tools.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic"""
    logger.info("BrowserTools bridge starting up...")
    logger.info(f"Port: {settings.PORT}")
    logger.info(f"Agent: http://{settings.BROWSER_TOOLS_HOST}:{settings.BROWSER_TOOLS_PORT}")
    yield
    logger.info("BrowserTools bridge shutting down...")


app = FastAPI(
    title="BrowserTools Bridge",
    description="Slash commands for a local BrowserTools agent",
    version=__version__,
    lifespan=lifespan,
)

# Include API routes
app.include_router(api_router, prefix="/api/v1")


# Root health check
@app.get("/")
def root(dispatcher: CommandDispatcher = Depends(get_dispatcher)):
    return {
        "service": "BrowserTools Bridge",
        "version": __version__,
        "status": "running",
        "agent_url": dispatcher.config.base_url,
    }


def run():
    uvicorn.run(
        "browser_tools_bridge.main:app",
        host="127.0.0.1",
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
