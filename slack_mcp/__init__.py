"""MCP server that posts messages to a Slack incoming webhook."""

__version__ = "1.0.0"
