"""MCP server exposing the Slack webhook as the send_message tool."""

from typing import Annotated

import structlog
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from slack_mcp.core.notifier import WebhookNotifier
from slack_mcp.log import configure_logging
from slack_mcp.tools import (
    PARAM_DESCRIPTIONS,
    SEND_MESSAGE_DESCRIPTION,
    SEND_MESSAGE_TOOL,
    SERVER_NAME,
)

logger = structlog.get_logger()

mcp = FastMCP(SERVER_NAME)
notifier = WebhookNotifier()


@mcp.tool(name=SEND_MESSAGE_TOOL, description=SEND_MESSAGE_DESCRIPTION)
async def send_message(
    text: Annotated[str, Field(description=PARAM_DESCRIPTIONS["text"])],
    channel: Annotated[str, Field(description=PARAM_DESCRIPTIONS["channel"])] = "",
    username: Annotated[str, Field(description=PARAM_DESCRIPTIONS["username"])] = "",
    icon_emoji: Annotated[str, Field(description=PARAM_DESCRIPTIONS["icon_emoji"])] = "",
    icon_url: Annotated[str, Field(description=PARAM_DESCRIPTIONS["icon_url"])] = "",
    markdown: Annotated[bool, Field(description=PARAM_DESCRIPTIONS["markdown"])] = True,
) -> str:
    parameters = {
        "text": text,
        "channel": channel,
        "username": username,
        "icon_emoji": icon_emoji,
        "icon_url": icon_url,
        "markdown": markdown,
    }
    result = await notifier.handle(parameters)
    if not result.success:
        raise ToolError(result.message)
    return result.message


def main():
    configure_logging()
    logger.info("server.startup", server=SERVER_NAME, transport="stdio")
    mcp.run()


if __name__ == "__main__":
    main()
