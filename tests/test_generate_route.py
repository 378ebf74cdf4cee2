"""Tests for the generate-api HTTP endpoints."""

from __future__ import annotations

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from config import AppConfig, ValidationConfig
from dependencies import get_config, get_forwarder
from domain import ForwardResult, VideoRequest
from infrastructure import HttpxWebhookForwarder
from infrastructure.interfaces import WebhookForwarder
from main import app
from video_relay_common import WebhookConfig

VALID_BODY = {"topic": "Sunset timelapse", "style": "cinematic", "duration": 30}


class FakeForwarder(WebhookForwarder):
    """Returns a fixed result and records what it was asked to send."""

    def __init__(self, result: ForwardResult | None = None, error: Exception | None = None):
        self.result = result or ForwardResult.ok({"ok": True}, 200)
        self.error = error
        self.calls: list[tuple[VideoRequest, str | None]] = []

    async def forward(
        self, payload: VideoRequest, request_id: str | None = None
    ) -> ForwardResult:
        self.calls.append((payload, request_id))
        if self.error:
            raise self.error
        return self.result


def _config(url: str = "https://hook.example.test/webhook", min_topic_length: int = 2) -> AppConfig:
    return AppConfig(
        environment="development",
        version="1.0.0",
        webhook=WebhookConfig(url=url),
        validation=ValidationConfig(min_topic_length=min_topic_length),
    )


@pytest.fixture
def client():
    app.dependency_overrides[get_config] = _config
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


def _use_forwarder(forwarder: WebhookForwarder) -> None:
    app.dependency_overrides[get_forwarder] = lambda: forwarder


class TestGenerate:
    """POST /generate."""

    def test_relays_valid_request(self, client: TestClient) -> None:
        forwarder = FakeForwarder(ForwardResult.ok({"accepted": True}, 200))
        _use_forwarder(forwarder)

        response = client.post("/generate", json={**VALID_BODY, "topic": "  Sunset timelapse "})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Video generation request sent successfully"
        assert body["data"]["requestId"].startswith("req_")
        assert body["data"]["webhookResponse"] == {"accepted": True}
        assert body["data"]["videoData"]["topic"] == "Sunset timelapse"
        assert body["data"]["videoData"]["source"] == "video-generator-app"

        payload, request_id = forwarder.calls[0]
        assert payload.topic == "Sunset timelapse"
        assert request_id == body["data"]["requestId"]

    def test_relays_through_echoing_upstream(self, client: TestClient) -> None:
        upstream = httpx.AsyncClient(
            transport=httpx.MockTransport(
                lambda request: httpx.Response(200, json=json.loads(request.content))
            )
        )
        _use_forwarder(
            HttpxWebhookForwarder(upstream, "https://hook.example.test/x", "video-generator-app")
        )

        response = client.post("/generate", json=VALID_BODY)

        assert response.status_code == 200
        echoed = response.json()["data"]["webhookResponse"]
        assert echoed["topic"] == "Sunset timelapse"
        assert echoed["requestId"] == response.json()["data"]["requestId"]

    def test_accepts_duration_label(self, client: TestClient) -> None:
        _use_forwarder(FakeForwarder())

        response = client.post("/generate", json={**VALID_BODY, "duration": "30秒"})

        assert response.status_code == 200
        assert response.json()["data"]["videoData"]["duration"] == "30秒"

    def test_validation_errors_return_400(self, client: TestClient) -> None:
        forwarder = FakeForwarder()
        _use_forwarder(forwarder)

        response = client.post("/generate", json={"topic": "a", "duration": 0})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["errors"] == [
            "Video topic must be at least 2 characters",
            "Please select a video style",
            "Video duration must be a positive number",
        ]
        assert body["error"] == ", ".join(body["errors"])
        assert forwarder.calls == []

    def test_min_topic_length_comes_from_config(self, client: TestClient) -> None:
        app.dependency_overrides[get_config] = lambda: _config(min_topic_length=5)
        _use_forwarder(FakeForwarder())

        response = client.post("/generate", json={**VALID_BODY, "topic": "cats"})

        assert response.status_code == 400
        assert response.json()["errors"] == ["Video topic must be at least 5 characters"]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"content": "not json", "headers": {"Content-Type": "application/json"}},
            {"json": ["topic", "style"]},
            {"json": {**VALID_BODY, "topic": 123}},
            {"json": {**VALID_BODY, "duration": True}},
        ],
    )
    def test_malformed_body_returns_400(self, client: TestClient, kwargs: dict) -> None:
        _use_forwarder(FakeForwarder())

        response = client.post("/generate", **kwargs)

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_rate_limit_returns_500_with_flag(self, client: TestClient) -> None:
        _use_forwarder(
            FakeForwarder(ForwardResult.failed("Too many requests", 429, rate_limited=True))
        )

        response = client.post("/generate", json=VALID_BODY)

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Too many requests",
            "rateLimited": True,
        }

    def test_upstream_error_returns_500(self, client: TestClient) -> None:
        _use_forwarder(FakeForwarder(ForwardResult.failed("HTTP Error: 500", 500)))

        response = client.post("/generate", json=VALID_BODY)

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "HTTP Error: 500",
            "rateLimited": False,
        }

    def test_unconfigured_webhook_returns_500(self, client: TestClient) -> None:
        app.dependency_overrides[get_config] = lambda: _config(url="")

        response = client.post("/generate", json=VALID_BODY)

        assert response.status_code == 500
        assert response.json()["error"] == "Webhook URL is not configured"

    def test_unconfigured_webhook_still_reports_field_errors(
        self, client: TestClient
    ) -> None:
        app.dependency_overrides[get_config] = lambda: _config(url="")

        response = client.post("/generate", json={"topic": "a"})

        assert response.status_code == 400
        assert response.json()["errors"] == [
            "Video topic must be at least 2 characters",
            "Please select a video style",
            "Please select video duration",
        ]

    @pytest.mark.parametrize("literal", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_duration_returns_400(self, client: TestClient, literal: str) -> None:
        forwarder = FakeForwarder()
        _use_forwarder(forwarder)

        response = client.post(
            "/generate",
            content='{"topic": "Sunset", "style": "cinematic", "duration": ' + literal + "}",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["errors"] == ["Video duration must be a positive number"]
        assert forwarder.calls == []

    def test_undecodable_upstream_body_returns_500(self, client: TestClient) -> None:
        upstream = httpx.AsyncClient(
            transport=httpx.MockTransport(
                lambda request: httpx.Response(
                    200, content=b"not gzip", headers={"Content-Encoding": "gzip"}
                )
            )
        )
        _use_forwarder(HttpxWebhookForwarder(upstream, "https://hook.example.test/x"))

        response = client.post("/generate", json=VALID_BODY)

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["rateLimited"] is False
        assert body["error"] != "Internal server error"

    def test_unexpected_error_returns_500_with_details(self, client: TestClient) -> None:
        _use_forwarder(FakeForwarder(error=RuntimeError("boom")))

        response = client.post("/generate", json=VALID_BODY)

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Internal server error",
            "details": "boom",
        }


class TestServiceEndpoints:
    """GET /, GET /health and unknown routes."""

    def test_health_reports_webhook_configuration(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "development"
        assert body["webhookConfigured"] is True
        assert body["timestamp"].endswith("Z")

    def test_health_without_webhook(self, client: TestClient) -> None:
        app.dependency_overrides[get_config] = lambda: _config(url="  ")

        assert client.get("/health").json()["webhookConfigured"] is False

    def test_index_lists_endpoints(self, client: TestClient) -> None:
        body = client.get("/").json()

        assert body["message"] == "Video Generator API Server"
        assert body["version"] == "1.0.0"
        assert body["endpoints"] == {
            "generate": "POST /generate",
            "health": "GET /health",
        }

    def test_unknown_route_returns_404_envelope(self, client: TestClient) -> None:
        response = client.get("/videos/123")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Requested resource not found",
            "path": "/videos/123",
        }
