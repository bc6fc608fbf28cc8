"""Tests for bridge/client.py: request construction and transport errors."""

import json

import httpx
import pytest

from browser_tools_bridge.bridge.client import BrowserToolsClient
from browser_tools_bridge.bridge.schemas import HttpMethod
from browser_tools_bridge.exceptions import TransportError

URL = "http://127.0.0.1:3025/console-logs"


class TestRequests:
    def test_get_has_no_body(self, agent, client):
        agent.reply('{"status":"success","data":[]}')
        body = client.call(URL, HttpMethod.GET, {"ignored": True})
        assert body == '{"status":"success","data":[]}'

        request = agent.requests[0]
        assert request.method == "GET"
        assert str(request.url) == URL
        assert request.headers["Accept"] == "application/json"
        assert "Content-Type" not in request.headers
        assert request.content == b""

    def test_post_sends_json(self, agent, client):
        agent.reply("{}")
        client.call("http://127.0.0.1:3025/seo-audit", HttpMethod.POST, {"category": "seo", "timestamp": 1})

        request = agent.requests[0]
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Accept"] == "application/json"
        assert json.loads(request.content) == {"category": "seo", "timestamp": 1}

    def test_post_empty_payload(self, agent, client):
        client.call("http://127.0.0.1:3025/wipelogs", HttpMethod.POST, {})
        assert agent.requests[0].content == b"{}"

    def test_exactly_one_request(self, agent, client):
        client.call(URL, HttpMethod.GET)
        assert len(agent.requests) == 1

    def test_error_status_returns_body(self, agent, client):
        agent.reply('{"status":"error","message":"no tab"}', status_code=500)
        assert client.call(URL, HttpMethod.GET) == '{"status":"error","message":"no tab"}'

    def test_utf8_body(self, agent, client):
        agent.reply("café ✓")
        assert client.call(URL, HttpMethod.GET) == "café ✓"


class TestTransportErrors:
    def test_network_failure(self, agent, client):
        agent.error = httpx.ConnectError
        with pytest.raises(TransportError) as exc_info:
            client.call(URL, HttpMethod.GET)
        assert exc_info.value.cause.startswith("HTTP request failed: ")
        assert "connection refused" in exc_info.value.cause

    def test_timeout_is_network_failure(self, agent, client):
        agent.error = httpx.ReadTimeout
        with pytest.raises(TransportError, match="^HTTP request failed"):
            client.call(URL, HttpMethod.GET)

    def test_unserializable_payload(self, agent, client):
        with pytest.raises(TransportError, match="^JSON serialization error"):
            client.call(URL, HttpMethod.POST, {"value": object()})
        assert agent.requests == []

    def test_nan_payload_is_not_serialized(self, agent, client):
        with pytest.raises(TransportError, match="^JSON serialization error"):
            client.call(URL, HttpMethod.POST, {"value": float("nan")})

    def test_invalid_utf8(self, agent, client):
        agent.reply(b"\xff\xfe\xfa")
        with pytest.raises(TransportError) as exc_info:
            client.call(URL, HttpMethod.GET)
        assert exc_info.value.cause.startswith("Failed to convert response body to UTF-8: ")
