"""
Slack incoming-webhook delivery.

One short-lived httpx client per send, no retries. Failures are raised as
NotifierError subclasses; the caller decides how to report them.
"""

import codecs
import json
from urllib.parse import urlsplit

import httpx
import structlog

from slack_mcp.errors import RemoteError, SerializationError, TransportError

logger = structlog.get_logger()

TRUNCATION_MARKER = "...(truncated)"


class SlackWebhookClient:
    def __init__(
        self,
        timeout: float = 10.0,
        error_body_limit: int = 500,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._timeout = timeout
        self._error_body_limit = error_body_limit
        self._transport = transport  # tests inject httpx.MockTransport here

    async def post(self, url: str, payload: dict) -> None:
        """POST a JSON payload to the webhook.

        Raises:
            SerializationError: payload is not JSON-encodable.
            TransportError: connection, timeout, or malformed URL.
            RemoteError: any status outside 2xx.
        """
        try:
            body = json.dumps(payload)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"failed to marshal message: {e}") from e

        host = "?"
        try:
            # urlsplit raises ValueError on e.g. an unterminated IPv6 host
            host = urlsplit(url).hostname or "?"
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                async with client.stream(
                    "POST",
                    url,
                    content=body.encode("utf-8"),
                    headers={"Content-Type": "application/json"},
                ) as response:
                    if response.is_success:
                        logger.info("slack.sent", host=host, status=response.status_code)
                        return
                    error_body = await self._read_error_body(response)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning("slack.unreachable", host=host, error=str(e))
            raise TransportError(f"failed to send request: {e}") from e

        logger.warning("slack.rejected", host=host, status=response.status_code)
        raise RemoteError(response.status_code, error_body)

    async def _read_error_body(self, response: httpx.Response) -> str:
        """Read at most error_body_limit bytes of a failed response.

        The cut backs off to a UTF-8 character boundary.
        """
        limit = self._error_body_limit
        buf = bytearray()
        async for chunk in response.aiter_bytes():
            buf.extend(chunk)
            if len(buf) > limit:
                break

        # final=False holds back a trailing partial sequence instead of emitting U+FFFD
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        text = decoder.decode(bytes(buf[:limit]), final=len(buf) <= limit)
        if len(buf) > limit:
            text += TRUNCATION_MARKER
        return text
