"""
Exception hierarchy for the Yodlee client.

Every failure an operation can report is a YodleeError. Each instance carries
``errors``: the ordered list of discrete failure messages behind it, so a
caller can inspect several simultaneous causes (e.g. an HTTP failure and the
error envelope that came with it).
"""

from typing import Any


class YodleeError(Exception):
    """Base exception for Yodlee client errors."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.message = message
        self.errors = list(errors) if errors else [message]
        super().__init__(message)


class NoSessionTokenError(YodleeError):
    """A session-scoped operation was called before authenticate()."""

    def __init__(self, message: str = "no session token"):
        super().__init__(message)


class YodleeConnectionError(YodleeError):
    """Failed to connect to Yodlee."""

    pass


class YodleeHTTPError(YodleeError):
    """Non-2xx response that carried no error envelope."""

    def __init__(self, status_code: int, message: str, response_body: str | None = None):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(f"Yodlee HTTP error {status_code}: {message}")


class YodleeAPIError(YodleeError):
    """The response body was one of the Yodlee error envelopes."""

    def __init__(
        self,
        message: str,
        envelope: Any = None,
        status_code: int | None = None,
        errors: list[str] | None = None,
    ):
        self.envelope = envelope
        self.status_code = status_code
        super().__init__(message, errors=errors)


class YodleeDecodeError(YodleeError):
    """Response body could not be decoded into the expected shape."""

    def __init__(self, message: str, body: str | None = None):
        self.body = body
        super().__init__(message)
