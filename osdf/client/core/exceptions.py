"""Custom exception hierarchy."""

from __future__ import annotations


class OSDFError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(OSDFError):
    """The request never produced a response.

    Raised for connection failures, DNS errors and timeouts. The underlying
    aiohttp/asyncio exception is chained as ``__cause__``.
    """

    pass


class RequestError(OSDFError):
    """The server answered with a status the operation does not accept.

    The message is taken from the ``X-OSDF-Error`` header when the server
    supplies one, otherwise from the HTTP reason phrase, otherwise it is the
    numeric status code.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthenticationError(RequestError):
    """Credentials were missing or rejected (401/403)."""

    pass


class NotFoundError(RequestError):
    """Node, namespace or schema does not exist (404)."""

    pass


class ResponseError(RequestError):
    """The server answered with an accepted status but an unreadable body.

    Raised when a response is not valid JSON or does not match the expected
    model. The decoding error is chained as ``__cause__``.
    """

    pass
