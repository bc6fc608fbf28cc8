"""
Static command table for the BrowserTools slash commands.

Maps every (command, argument) pair to the agent endpoint, HTTP method and
request payload, plus the display strings used around a call.
"""

import threading
import time
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from browser_tools_bridge.bridge.schemas import ArgumentCompletion, HttpMethod
from browser_tools_bridge.exceptions import UnknownCommand, UnknownSlashCommand

PAYLOAD_SOURCE = "zed_extension"
DEFAULT_SECTION_LABEL = "Browser Tools"
AGENT_HINT = "Make sure BrowserTools extension is running in Chrome."


class SlashCommand(str, Enum):
    CAPTURE = "browser-capture"
    AUDIT = "browser-audit"
    DEBUG = "browser-debug"


class Endpoint(str, Enum):
    """Path segments served by the BrowserTools agent."""
    CAPTURE_SCREENSHOT = "capture-screenshot"
    CONSOLE_LOGS = "console-logs"
    CONSOLE_ERRORS = "console-errors"
    NETWORK_SUCCESS = "network-success"
    NETWORK_ERRORS = "network-errors"
    WIPE_LOGS = "wipelogs"
    SELECTED_ELEMENT = "selected-element"
    ACCESSIBILITY_AUDIT = "accessibility-audit"
    PERFORMANCE_AUDIT = "performance-audit"
    SEO_AUDIT = "seo-audit"
    BEST_PRACTICES_AUDIT = "best-practices-audit"
    NEXTJS_AUDIT = "nextjs-audit"
    AUDIT_ALL = "audit-all"
    DEBUG_MODE = "debug-mode"


class PayloadKind(str, Enum):
    EMPTY = "empty"          # {}
    CATEGORY = "category"    # {category, source, timestamp}
    SOURCE = "source"        # {source, timestamp}


class CommandSpec(BaseModel):
    """Endpoint descriptor and display strings for one (command, argument) pair."""

    model_config = ConfigDict(frozen=True)

    command: SlashCommand
    argument: str
    endpoint: Endpoint
    method: HttpMethod
    payload_kind: PayloadKind = PayloadKind.EMPTY
    label: str
    completion_label: str
    failure: Optional[str] = None


class _MillisClock:
    """Wall-clock milliseconds that never go backwards within the process."""

    def __init__(self):
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        now = time.time_ns() // 1_000_000
        with self._lock:
            self._last = max(self._last, now)
            return self._last


current_timestamp = _MillisClock()


def _spec(command, argument, endpoint, method, label, completion_label, payload_kind=PayloadKind.EMPTY, failure=None):
    return CommandSpec(
        command=command,
        argument=argument,
        endpoint=endpoint,
        method=method,
        payload_kind=payload_kind,
        label=label,
        completion_label=completion_label,
        failure=failure,
    )


_C, _A, _D = SlashCommand.CAPTURE, SlashCommand.AUDIT, SlashCommand.DEBUG
_GET, _POST = HttpMethod.GET, HttpMethod.POST

# Ordered: completions are offered in this order.
COMMAND_SPECS: Tuple[CommandSpec, ...] = (
    _spec(_C, "screenshot", Endpoint.CAPTURE_SCREENSHOT, _POST, "Browser Screenshot", "Screenshot",
          failure="Failed to capture screenshot."),
    _spec(_C, "logs", Endpoint.CONSOLE_LOGS, _GET, "Browser Console Logs", "Console Logs",
          failure="Failed to retrieve console logs."),
    _spec(_C, "errors", Endpoint.CONSOLE_ERRORS, _GET, "Browser Console Errors", "Console Errors",
          failure="Failed to retrieve console errors."),
    _spec(_C, "network", Endpoint.NETWORK_SUCCESS, _GET, "Browser Network Logs", "Network Logs",
          failure="Failed to retrieve network logs."),
    _spec(_C, "network-errors", Endpoint.NETWORK_ERRORS, _GET, "Browser Network Errors", "Network Errors",
          failure="Failed to retrieve network errors."),
    _spec(_C, "clear", Endpoint.WIPE_LOGS, _POST, "Clear Logs", "Clear Logs",
          failure="Failed to clear logs."),
    _spec(_C, "element", Endpoint.SELECTED_ELEMENT, _GET, "DOM Element", "DOM Element",
          failure="Failed to get DOM element."),
    _spec(_A, "accessibility", Endpoint.ACCESSIBILITY_AUDIT, _POST, "Accessibility Audit", "Accessibility",
          PayloadKind.CATEGORY),
    _spec(_A, "performance", Endpoint.PERFORMANCE_AUDIT, _POST, "Performance Audit", "Performance",
          PayloadKind.CATEGORY),
    _spec(_A, "seo", Endpoint.SEO_AUDIT, _POST, "SEO Audit", "SEO", PayloadKind.CATEGORY),
    _spec(_A, "best-practices", Endpoint.BEST_PRACTICES_AUDIT, _POST, "Best Practices Audit", "Best Practices",
          PayloadKind.CATEGORY),
    _spec(_A, "nextjs", Endpoint.NEXTJS_AUDIT, _POST, "NextJS Audit", "NextJS", PayloadKind.SOURCE),
    _spec(_A, "all", Endpoint.AUDIT_ALL, _POST, "All Audits", "Run All Audits", PayloadKind.SOURCE),
    _spec(_D, "start", Endpoint.DEBUG_MODE, _POST, "Debugger Mode", "Start Debugger Mode", PayloadKind.SOURCE),
)

_BY_PAIR: Dict[Tuple[str, str], CommandSpec] = {
    (spec.command.value, spec.argument): spec for spec in COMMAND_SPECS
}

# Failure messages shared by a whole command group.
_GROUP_FAILURES: Dict[SlashCommand, str] = {
    SlashCommand.AUDIT: "Failed to run audit.",
    SlashCommand.DEBUG: "Failed to start debugger.",
}


def lookup(command: str, argument: str) -> CommandSpec:
    spec = _BY_PAIR.get((command, argument))
    if spec is None:
        raise UnknownCommand(command, argument)
    return spec


def build_payload(spec: CommandSpec) -> Dict[str, Any]:
    """Request body for a spec; timestamps are taken fresh on every call."""
    if spec.payload_kind == PayloadKind.EMPTY:
        return {}

    payload: Dict[str, Any] = {}
    if spec.payload_kind == PayloadKind.CATEGORY:
        payload["category"] = spec.argument
    payload["source"] = PAYLOAD_SOURCE
    payload["timestamp"] = current_timestamp()
    return payload


def resolve(command: str, argument: str) -> Tuple[Endpoint, HttpMethod, Dict[str, Any]]:
    """
    Resolve a (command, argument) pair to its endpoint, method and payload.

    Raises:
        UnknownCommand: the pair is not in the table.
    """
    spec = lookup(command, argument)
    return spec.endpoint, spec.method, build_payload(spec)


def completions(command: str) -> List[ArgumentCompletion]:
    if command not in {c.value for c in SlashCommand}:
        raise UnknownSlashCommand(command)
    return [
        ArgumentCompletion(label=spec.completion_label, new_text=spec.argument)
        for spec in COMMAND_SPECS
        if spec.command.value == command
    ]


def section_label(command: str, argument: str) -> str:
    spec = _BY_PAIR.get((command, argument))
    return spec.label if spec else DEFAULT_SECTION_LABEL


def error_hint(command: str, argument: str) -> str:
    """Remediation message for a failed call, chosen by command group."""
    spec = _BY_PAIR.get((command, argument))
    if spec is not None and spec.failure:
        return f"{spec.failure} {AGENT_HINT}"

    try:
        group = SlashCommand(command)
    except ValueError:
        return "Unknown command"
    failure = _GROUP_FAILURES.get(group)
    if failure is None:
        return "Unknown command"
    return f"{failure} {AGENT_HINT}"
