from pydantic import BaseModel, Field


class OutboundMessage(BaseModel):
    """Payload for a Slack incoming webhook.

    Optional fields left as None are dropped from the payload; Slack treats an
    explicit empty override differently from an absent one.
    """
    text: str = Field(min_length=1)
    channel: str | None = None
    username: str | None = None  # sender display name
    icon_emoji: str | None = None  # e.g. ":robot_face:"
    icon_url: str | None = None
    markdown: bool = Field(default=True, serialization_alias="mrkdwn")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
