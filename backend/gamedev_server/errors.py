"""Exceptions raised by the record stores and the resource services.

HTTP handlers turn these into ``{"msg": ...}`` JSON responses; nothing here
knows about Flask.
"""


class GameDevError(Exception):
    """Base class for every error the server reports to clients."""


class ValidationError(GameDevError):
    """A required request field was missing or malformed."""

    def __init__(self, message, fields=None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields or [])


class StoreError(GameDevError):
    """The external record store rejected or failed a request."""

    def __init__(self, code, message, client_message=None):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message
        # Fixed text sent to clients in place of the store payload
        self.client_message = client_message

    def to_dict(self):
        return {'code': self.code, 'message': self.message}


class ConditionFailedError(StoreError):
    """A conditional put/delete found the row in an unexpected state."""

    def __init__(self, message='The conditional request failed'):
        super().__init__('ConditionalCheckFailedException', message)
