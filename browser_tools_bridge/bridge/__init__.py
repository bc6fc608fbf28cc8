"""
Bridge module for the BrowserTools agent.

Provides the HTTP transport and the wire schemas.
"""

from browser_tools_bridge.bridge.client import BrowserToolsClient
from browser_tools_bridge.bridge.schemas import (
    ApiResponse,
    ArgumentCompletion,
    LaunchCommand,
    SlashCommandOutput,
)

__all__ = [
    "BrowserToolsClient",
    "ApiResponse",
    "ArgumentCompletion",
    "LaunchCommand",
    "SlashCommandOutput",
]
