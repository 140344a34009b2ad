class ProgressError(Exception):
    """Base class for every error raised while updating a progress bar."""


class InvalidPosition(ProgressError, ValueError):
    def __init__(self, position=None):
        super().__init__('Invalid position')
        self.position = position


class MaxPositionExceeded(ProgressError, ValueError):
    def __init__(self, position=None, total_units=None):
        super().__init__('Maximum position exceeded')
        self.position = position
        self.total_units = total_units


class TemplateError(ProgressError):
    """The message template is malformed or references an unknown field."""


class TransportError(ProgressError):
    """
    The chat platform rejected or failed to deliver a message.

    `code` holds the platform's error code when there is one (e.g. Slack's
    `channel_not_found` or Discord's HTTP status).
    """

    def __init__(self, message, code=None):
        super().__init__(message)
        self.code = code
