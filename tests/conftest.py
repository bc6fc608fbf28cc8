"""
Shared test fixtures for browser-tools-bridge tests.
HTTP is served by httpx.MockTransport; nothing reaches the network.
"""

import json
import os
import sys

import httpx
import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from browser_tools_bridge.bridge.client import BrowserToolsClient


class RecordingAgent:
    """Fake BrowserTools agent: records requests and replies with a canned body."""

    def __init__(self, body="", status_code=200, error=None):
        self.body = body
        self.status_code = status_code
        self.error = error
        self.requests = []

    def reply(self, body, status_code=200):
        self.body = body
        self.status_code = status_code

    def reply_json(self, data, status_code=200):
        self.reply(json.dumps(data), status_code)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error("connection refused", request=request)
        content = self.body.encode("utf-8") if isinstance(self.body, str) else self.body
        return httpx.Response(self.status_code, content=content)

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)


@pytest.fixture
def agent():
    return RecordingAgent()


@pytest.fixture
def client(agent):
    return BrowserToolsClient(transport=agent.transport)
