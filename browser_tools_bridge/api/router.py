from fastapi import APIRouter
from browser_tools_bridge.api.v1 import commands, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(commands.router, prefix="/commands", tags=["commands"])
