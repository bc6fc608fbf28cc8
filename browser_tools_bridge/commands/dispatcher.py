import logging
from typing import Any, List, Optional, Sequence

from browser_tools_bridge.bridge.client import BrowserToolsClient
from browser_tools_bridge.bridge.schemas import ArgumentCompletion, LaunchCommand, SlashCommandOutput
from browser_tools_bridge.commands import table
from browser_tools_bridge.commands.formatters import normalize
from browser_tools_bridge.config import BrowserToolsSettings
from browser_tools_bridge.exceptions import MissingArgument, TransportError

logger = logging.getLogger("browser_tools.commands")


def resolve_command_spawn(raw_settings: Any) -> LaunchCommand:
    """Launch command for the BrowserTools agent under the given host settings."""
    config = BrowserToolsSettings.from_host(raw_settings)
    return launch_command(config)


def launch_command(config: BrowserToolsSettings) -> LaunchCommand:
    return LaunchCommand(
        command="npx",
        args=[config.npx_command],
        env=[("PORT", str(config.port)), ("HOST", config.host)],
    )


def complete_argument(command: str, args: Sequence[str] = ()) -> List[ArgumentCompletion]:
    """Argument suggestions for a slash command; never touches the network."""
    return table.completions(command)


def run_command(
    command: str,
    args: Sequence[str],
    config: BrowserToolsSettings,
    client: BrowserToolsClient,
) -> SlashCommandOutput:
    """
    Run a slash command against the BrowserTools agent.

    Args:
        command: Slash command name (e.g. "browser-audit")
        args: Command arguments; only the first one is used
        config: Agent host/port to call
        client: Transport used for the single request

    Returns:
        Display text wrapped in a single labeled section

    Raises:
        MissingArgument: no argument, or an empty one, was given
        UnknownCommand: the (command, argument) pair does not exist
        TransportError: the request failed; the message carries a
            command-specific hint
    """
    argument = args[0] if args else ""
    if not argument:
        raise MissingArgument()

    endpoint, method, payload = table.resolve(command, argument)
    url = f"{config.base_url}/{endpoint.value}"

    try:
        body = client.call(url, method, payload)
    except TransportError as e:
        hint = table.error_hint(command, argument)
        logger.error(f"{command} {argument} failed: {e.cause}")
        raise TransportError(f"{hint} Error: {e.cause}") from e

    text = normalize(endpoint.value, body)
    return SlashCommandOutput.single_section(text, table.section_label(command, argument))


class CommandDispatcher:
    """
    Entry point used by the host.

    Holds the session configuration resolved by ``resolve_command_spawn``;
    each new session overwrites it.
    """

    def __init__(
        self,
        config: Optional[BrowserToolsSettings] = None,
        client: Optional[BrowserToolsClient] = None,
    ):
        self.config = config or BrowserToolsSettings()
        self.client = client or BrowserToolsClient()

    def resolve_command_spawn(self, raw_settings: Any = None) -> LaunchCommand:
        self.config = BrowserToolsSettings.from_host(raw_settings)
        logger.info(f"BrowserTools agent configured at {self.config.base_url}")
        return launch_command(self.config)

    def complete_argument(self, command: str, args: Sequence[str] = ()) -> List[ArgumentCompletion]:
        return complete_argument(command, args)

    def run_command(self, command: str, args: Sequence[str]) -> SlashCommandOutput:
        return run_command(command, args, self.config, self.client)
