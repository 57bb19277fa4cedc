import json

import httpx
import pytest

from slack_mcp.config import Settings
from slack_mcp.core.notifier import WebhookNotifier
from slack_mcp.output.slack import SlackWebhookClient

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


class FakeWebhook:
    """Records requests and answers with a canned response."""

    def __init__(self, status_code: int = 200, body: str = "ok"):
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


def make_settings(**overrides) -> Settings:
    values = {"SLACK_WEBHOOK_URL": WEBHOOK_URL, "SLACK_ERROR_BODY_LIMIT": 500}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def webhook():
    return FakeWebhook()


@pytest.fixture
def make_notifier(webhook):
    def _make(**settings_overrides) -> WebhookNotifier:
        cfg = make_settings(**settings_overrides)
        client = SlackWebhookClient(
            timeout=cfg.SLACK_TIMEOUT_SECONDS,
            error_body_limit=cfg.SLACK_ERROR_BODY_LIMIT,
            transport=httpx.MockTransport(webhook),
        )
        return WebhookNotifier(settings_factory=lambda: cfg, client=client)

    return _make
