"""Metadata for the send_message tool as advertised to MCP clients."""

SERVER_NAME = "slack-webhook-server"

SEND_MESSAGE_TOOL = "send_message"
SEND_MESSAGE_DESCRIPTION = (
    "Send a message to Slack via webhook "
    "(webhook URL configured via SLACK_WEBHOOK_URL environment variable)"
)

PARAM_DESCRIPTIONS = {
    "text": "The message text to send",
    "channel": "Optional: The channel to send the message to (if not specified in webhook)",
    "username": "Optional: Username to display as the sender",
    "icon_emoji": "Optional: Emoji to use as the icon (e.g., ':robot_face:')",
    "icon_url": "Optional: URL to an image to use as the icon",
    "markdown": "Optional: Whether to enable markdown formatting (default: true)",
}
