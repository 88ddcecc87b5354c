"""Custom exception classes for the Nanonets SDK."""

from __future__ import annotations


class NanonetsError(Exception):
    """Base exception for all Nanonets errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class APIError(NanonetsError):
    """
    Raised when the API answers with a status outside 2xx.

    `body` is the response decoded as text; `content` is the raw bytes.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        content: bytes = b"",
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.content = content


class TransportError(NanonetsError):
    """Raised when the request never got a response (DNS, connection, timeout)."""

    pass


class DecodeError(NanonetsError):
    """Raised when a successful response can't be decoded into the expected type."""

    def __init__(self, message: str, body: bytes = b""):
        super().__init__(message)
        self.body = body


class ValidationError(NanonetsError):
    """Raised for client-side validation errors."""

    pass
