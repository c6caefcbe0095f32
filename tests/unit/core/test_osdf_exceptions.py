"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from osdf.client.core import (
    AuthenticationError,
    NotFoundError,
    OSDFError,
    RequestError,
    ResponseError,
    TransportError,
)


def test_request_error_with_status_code():
    """Test RequestError carries the status code."""
    error = RequestError("Node not valid", status_code=422)
    assert str(error) == "Node not valid"
    assert error.message == "Node not valid"
    assert error.status_code == 422
    assert isinstance(error, OSDFError)


def test_status_specific_errors_are_request_errors():
    assert isinstance(NotFoundError("missing", status_code=404), RequestError)
    assert isinstance(AuthenticationError("denied", status_code=401), RequestError)
    assert isinstance(ResponseError("bad body", status_code=200), RequestError)


def test_transport_error_is_not_a_request_error():
    error = TransportError("connection refused")
    assert isinstance(error, OSDFError)
    assert not isinstance(error, RequestError)
