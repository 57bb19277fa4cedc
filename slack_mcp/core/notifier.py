"""
send_message handler: validate parameters, build the Slack payload, deliver it.

Every failure is reported through InvocationResult.error(); handle() does not
raise for configuration, validation, or delivery problems.
"""

from collections.abc import Callable, Mapping
from typing import Any

import pydantic
import structlog

from slack_mcp.config import Settings
from slack_mcp.errors import ConfigurationError, NotifierError, ValidationError
from slack_mcp.output.slack import SlackWebhookClient
from slack_mcp.schemas.message import OutboundMessage
from slack_mcp.schemas.result import InvocationResult

logger = structlog.get_logger()

SUCCESS_MESSAGE = "Message sent successfully to Slack"
OPTIONAL_STRING_PARAMS = ("channel", "username", "icon_emoji", "icon_url")


def resolve_endpoint(cfg: Settings) -> str:
    url = cfg.SLACK_WEBHOOK_URL.strip()
    if not url:
        raise ConfigurationError("SLACK_WEBHOOK_URL environment variable is required")
    return url


def build_message(parameters: Mapping[str, Any]) -> OutboundMessage:
    """Turn raw tool arguments into an OutboundMessage.

    Missing optional strings default to "" and are treated as unset;
    markdown defaults to True.
    """
    text = parameters.get("text")
    if not isinstance(text, str) or not text:
        raise ValidationError("text is required")

    optional = {}
    for name in OPTIONAL_STRING_PARAMS:
        value = parameters.get(name)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ValidationError(f"{name} must be a string")
        if value:
            optional[name] = value

    markdown = parameters.get("markdown")
    if markdown is None:
        markdown = True
    if not isinstance(markdown, bool):
        raise ValidationError("markdown must be a boolean")

    return OutboundMessage(text=text, markdown=markdown, **optional)


class WebhookNotifier:
    """Handler behind the send_message tool.

    Settings are re-read on every call so a changed SLACK_WEBHOOK_URL applies
    without a restart. Tests pass a settings_factory returning fixed values
    and a client wired to httpx.MockTransport.
    """

    def __init__(
        self,
        settings_factory: Callable[[], Settings] = Settings,
        client: SlackWebhookClient | None = None,
    ):
        self._settings_factory = settings_factory
        self._client = client

    async def handle(self, parameters: Mapping[str, Any]) -> InvocationResult:
        try:
            cfg = self._load_settings()
            url = resolve_endpoint(cfg)
            message = build_message(parameters)
        except (ConfigurationError, ValidationError) as e:
            logger.info("notifier.rejected", error_type=type(e).__name__, reason=str(e))
            return InvocationResult.error(str(e))

        client = self._client or SlackWebhookClient(
            timeout=cfg.SLACK_TIMEOUT_SECONDS,
            error_body_limit=cfg.SLACK_ERROR_BODY_LIMIT,
        )
        try:
            await client.post(url, message.to_payload())
        except NotifierError as e:
            logger.warning("slack.failed", error_type=type(e).__name__, reason=str(e))
            return InvocationResult.error(f"Failed to send message: {e}")

        return InvocationResult.ok(SUCCESS_MESSAGE)

    def _load_settings(self) -> Settings:
        try:
            return self._settings_factory()
        except pydantic.ValidationError as e:
            raise ConfigurationError(f"invalid configuration: {e}") from e
