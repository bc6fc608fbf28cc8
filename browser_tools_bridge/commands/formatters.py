"""
Response formatting for the BrowserTools agent.

Turns the agent's raw response body into display text. Formatting never
fails: a body that does not match the expected envelope is parsed as plain
JSON, and a body that is not JSON at all is returned verbatim with the
parse error.
"""

import json
import logging
import math
import re
from typing import Any, Callable, List, Optional, Tuple

from browser_tools_bridge.bridge.schemas import ApiResponse

logger = logging.getLogger("browser_tools.commands")

AGENT_NAME = "BrowserTools"

# Rendered scores saturate to the 32-bit signed range.
SCORE_MIN, SCORE_MAX = -2**31, 2**31 - 1

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")

AUDIT_TYPES = {
    "accessibility-audit": "Accessibility",
    "performance-audit": "Performance",
    "seo-audit": "SEO",
    "best-practices-audit": "Best Practices",
    "nextjs-audit": "NextJS",
}


def _reject_constant(name: str) -> float:
    raise ValueError(f"invalid number literal: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text}")
    return value


def _check_strings(value: Any) -> None:
    # Surrogate pairs decode to one code point, so any surrogate left is unpaired.
    stack = [value]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            if _LONE_SURROGATE.search(item):
                raise ValueError(f"lone surrogate in string: {item!r}")
        elif isinstance(item, dict):
            stack.extend(item.keys())
            stack.extend(item.values())
        elif isinstance(item, list):
            stack.extend(item)


def load_json(text: str) -> Any:
    """json.loads that only accepts finite numbers and well-formed strings."""
    value = json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    _check_strings(value)
    return value


def pretty(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _field(data: Any, key: str) -> Any:
    return data.get(key) if isinstance(data, dict) else None


def _str_field(data: Any, key: str) -> Optional[str]:
    value = _field(data, key)
    return value if isinstance(value, str) else None


def _number_field(data: Any, key: str) -> Optional[float]:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _percentage(score: float) -> int:
    """Whole percentage, rounded half away from zero and saturated."""
    value = score * 100
    if isinstance(value, float):
        if math.isinf(value):
            return SCORE_MAX if value > 0 else SCORE_MIN
        value = int(math.copysign(math.floor(abs(value) + 0.5), value))
    return max(SCORE_MIN, min(SCORE_MAX, value))


# ---------------------------------------------------------------------------
# Endpoint formatters
# ---------------------------------------------------------------------------

def format_screenshot(data: Any) -> str:
    if _str_field(data, "message") is not None:
        return "Successfully saved screenshot"
    return f"Screenshot captured: {pretty(data)}"


def format_console_logs(data: Any) -> str:
    if not isinstance(data, list):
        return f"Console logs: {pretty(data)}"
    if not data:
        return "No console logs found."

    lines = []
    for log in data:
        level = _str_field(log, "level")
        if level is None:
            level = "info"
        message = _str_field(log, "message") or ""
        lines.append(f"[{level.upper()}] {message}")
    return "Console Logs:\n\n" + "\n".join(lines)


def format_network_logs(data: Any) -> str:
    return f"Network logs:\n\n{pretty(data)}"


def format_wipe_logs(data: Any) -> str:
    message = _str_field(data, "message")
    return message if message is not None else "Browser logs cleared successfully."


def format_selected_element(data: Any) -> str:
    if not isinstance(data, dict) or "element" not in data:
        return "No DOM element selected. Click on an element in the browser to select it."

    element = data["element"]
    tag = _str_field(element, "tagName")
    if tag is None:
        tag = "unknown"
    info = f"Selected DOM Element:\n- Tag: {tag}"

    for label, key in (("ID", "id"), ("Classes", "className"), ("Text", "innerText")):
        value = _str_field(element, key)
        if value:
            info += f"\n- {label}: {value}"

    html = _str_field(element, "outerHTML")
    if html is not None:
        info += f"\n\nHTML:\n{html}"
    return info


def format_audit(endpoint: str, data: Any) -> str:
    audit_type = AUDIT_TYPES.get(endpoint, "Unknown")
    header = f"{audit_type} Audit Results:\n\n"

    score = _number_field(data, "score")
    score_text = f"Overall Score: {_percentage(score)}%\n" if score is not None else ""

    issues = _field(data, "issues")
    issues_text = ""
    if isinstance(issues, list):
        if not issues:
            issues_text = "\nNo issues found!"
        else:
            issues_text = "\nIssues Found:\n"
            for i, issue in enumerate(issues, start=1):
                title = _str_field(issue, "title")
                if title is None:
                    title = "Unknown issue"
                description = _str_field(issue, "description") or ""
                issues_text += f"\n{i}. {title}\n"
                if description:
                    issues_text += f"   {description}\n"

    if score_text or issues_text:
        return header + score_text + issues_text
    # Nothing structured to show
    return header + pretty(data)


def format_response(endpoint: str, data: Any) -> str:
    """Render ``data`` according to the endpoint that produced it."""
    if endpoint == "capture-screenshot":
        return format_screenshot(data)
    if endpoint in ("console-logs", "console-errors"):
        return format_console_logs(data)
    if endpoint in ("network-success", "network-errors"):
        return format_network_logs(data)
    if endpoint == "wipelogs":
        return format_wipe_logs(data)
    if endpoint == "selected-element":
        return format_selected_element(data)
    if endpoint in AUDIT_TYPES:
        return format_audit(endpoint, data)
    if endpoint == "audit-all":
        return f"Audit Mode Results:\n\n{pretty(data)}"
    if endpoint == "debug-mode":
        return f"Debugger Mode Results:\n\n{pretty(data)}"
    return pretty(data)


# ---------------------------------------------------------------------------
# Tiered parsing
# ---------------------------------------------------------------------------

ParseAttempt = Callable[[str, str], str]


def _from_envelope(endpoint: str, raw: str) -> str:
    envelope = ApiResponse.model_validate(load_json(raw))
    if envelope.is_success:
        return format_response(endpoint, envelope.data)
    return f"Error from {AGENT_NAME}: {envelope.message}"


def _from_bare_json(endpoint: str, raw: str) -> str:
    return format_response(endpoint, load_json(raw))


PARSE_TIERS: List[ParseAttempt] = [_from_envelope, _from_bare_json]


def _try(attempt: ParseAttempt, endpoint: str, raw: str) -> Tuple[Optional[str], Optional[Exception]]:
    try:
        return attempt(endpoint, raw), None
    except (ValueError, ArithmeticError, RecursionError) as e:
        return None, e


def normalize(endpoint: str, raw: str) -> str:
    """
    Render a raw agent response for display.

    Tries each parse tier in order; the first that succeeds wins. If none
    does, the raw text is returned with the first tier's parse error.
    """
    first_error: Optional[Exception] = None
    for attempt in PARSE_TIERS:
        text, error = _try(attempt, endpoint, raw)
        if error is None:
            return text
        logger.debug(f"{attempt.__name__} could not parse {endpoint} response: {error}")
        first_error = first_error or error

    return f"Raw response from {AGENT_NAME} (parse error: {first_error}): {raw}"
