"""
Slash command API
=================

Exposes the dispatcher to a host application:

- POST /context-server  -> launch command for the BrowserTools agent
- POST /complete        -> argument completions for a slash command
- POST /run             -> labeled output of a slash command
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException

from browser_tools_bridge.api.schemas import CommandRequest
from browser_tools_bridge.bridge.schemas import ArgumentCompletion, LaunchCommand, SlashCommandOutput
from browser_tools_bridge.commands import CommandDispatcher
from browser_tools_bridge.config import BrowserToolsSettings
from browser_tools_bridge.exceptions import (
    MissingArgument,
    TransportError,
    UnknownCommand,
    UnknownSlashCommand,
)

logger = logging.getLogger("browser_tools.api")

router = APIRouter()

# Global instance
dispatcher = CommandDispatcher(config=BrowserToolsSettings.from_environment())


def get_dispatcher() -> CommandDispatcher:
    return dispatcher


@router.post("/context-server", response_model=LaunchCommand)
def context_server_command(
    settings: Any = Body(None),
    dispatcher: CommandDispatcher = Depends(get_dispatcher),
):
    """
    Resolve the agent launch command and start a new session with these settings.
    """
    return dispatcher.resolve_command_spawn(settings)


@router.post("/complete", response_model=List[ArgumentCompletion])
def complete_command_argument(
    request: CommandRequest,
    dispatcher: CommandDispatcher = Depends(get_dispatcher),
):
    try:
        return dispatcher.complete_argument(request.command, request.args)
    except UnknownSlashCommand as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/run", response_model=SlashCommandOutput)
def run_slash_command(
    request: CommandRequest,
    dispatcher: CommandDispatcher = Depends(get_dispatcher),
):
    try:
        return dispatcher.run_command(request.command, request.args)
    except (MissingArgument, UnknownCommand) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TransportError as e:
        logger.error(f"Command {request.command} failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))
