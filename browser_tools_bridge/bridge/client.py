import json
import logging
from typing import Any, Optional

import httpx

from browser_tools_bridge.bridge.schemas import HttpMethod
from browser_tools_bridge.exceptions import TransportError

logger = logging.getLogger("browser_tools.bridge")

JSON_CONTENT_TYPE = "application/json"


class BrowserToolsClient:
    """Client for the BrowserTools agent HTTP API."""

    def __init__(self, transport: Optional[httpx.BaseTransport] = None):
        self.transport = transport

    def call(self, url: str, method: HttpMethod, payload: Any = None) -> str:
        """
        Perform a single request against the agent and return the body text.

        Raises:
            TransportError: serialization, request construction, network
                or UTF-8 decoding failure.
        """
        headers = {"Accept": JSON_CONTENT_TYPE}
        content = None

        if method == HttpMethod.POST:
            try:
                content = json.dumps(payload, separators=(",", ":"), allow_nan=False)
            except (TypeError, ValueError) as e:
                raise TransportError(f"JSON serialization error: {e}") from e
            headers["Content-Type"] = JSON_CONTENT_TYPE

        # A fresh client per call: exactly one round trip, nothing pooled.
        with httpx.Client(transport=self.transport) as client:
            try:
                request = client.build_request(method.value, url, headers=headers, content=content)
            except (httpx.InvalidURL, ValueError) as e:
                raise TransportError(f"Failed to build request: {e}") from e

            try:
                logger.info(f"Calling BrowserTools: {method.value} {url}")
                response = client.send(request)
            except httpx.HTTPError as e:
                logger.error(f"BrowserTools Request Error: {e}")
                raise TransportError(f"HTTP request failed: {e}") from e

        if response.is_error:
            logger.warning(f"BrowserTools HTTP {response.status_code} from {url}")

        try:
            return response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TransportError(f"Failed to convert response body to UTF-8: {e}") from e
