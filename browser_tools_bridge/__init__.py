"""browser-tools-bridge: slash commands for a local BrowserTools agent."""

from browser_tools_bridge.commands import CommandDispatcher
from browser_tools_bridge.config import BrowserToolsSettings
from browser_tools_bridge.exceptions import (
    CommandError,
    MissingArgument,
    TransportError,
    UnknownCommand,
)

__version__ = "0.1.0"

__all__ = [
    "CommandDispatcher",
    "BrowserToolsSettings",
    "CommandError",
    "MissingArgument",
    "TransportError",
    "UnknownCommand",
]
