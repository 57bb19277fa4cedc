"""
Failure taxonomy for the notifier.

Every error here is recoverable: WebhookNotifier turns it into an error
InvocationResult instead of letting it escape to the dispatcher.
"""


class NotifierError(Exception):
    """Base class for all send_message failures."""


class ConfigurationError(NotifierError):
    """The webhook endpoint is not configured."""


class ValidationError(NotifierError):
    """Tool parameters are missing or have the wrong type."""


class SerializationError(NotifierError):
    """The message payload could not be encoded as JSON."""


class TransportError(NotifierError):
    """The webhook could not be reached."""


class RemoteError(NotifierError):
    """The webhook answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Slack API returned status {status_code}: {body}")
