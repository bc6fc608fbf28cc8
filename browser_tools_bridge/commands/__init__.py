"""
Slash commands for the BrowserTools bridge.

Provides the command table, response formatting and the dispatcher.
"""

from browser_tools_bridge.commands.dispatcher import (
    CommandDispatcher,
    complete_argument,
    resolve_command_spawn,
    run_command,
)

__all__ = [
    "CommandDispatcher",
    "complete_argument",
    "resolve_command_spawn",
    "run_command",
]
