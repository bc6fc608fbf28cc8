from fastapi import APIRouter, Depends

from browser_tools_bridge import __version__
from browser_tools_bridge.api.schemas import HealthResponse
from browser_tools_bridge.api.v1.commands import get_dispatcher
from browser_tools_bridge.commands import CommandDispatcher

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def health_check(dispatcher: CommandDispatcher = Depends(get_dispatcher)):
    return HealthResponse(
        status="healthy",
        version=__version__,
        agent_url=dispatcher.config.base_url,
    )
