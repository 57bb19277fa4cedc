from pydantic_settings import BaseSettings


class LoggingSettings(BaseSettings):
    """Settings needed at startup. Plain strings, so they never fail validation."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"


class Settings(LoggingSettings):
    """Full settings, built per invocation by WebhookNotifier.

    Not instantiated at import time: a bad SLACK_* value must surface as a
    tool error on the next call, not stop the server from starting.
    """

    # Slack incoming webhook
    SLACK_WEBHOOK_URL: str = ""
    SLACK_TIMEOUT_SECONDS: float = 10.0
    SLACK_ERROR_BODY_LIMIT: int = 500  # bytes of response body kept in error messages
