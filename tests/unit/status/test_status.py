import pytest

from await_ready.status import (
    PUBLIC_STATUS_CODES,
    RETRYABLE_STATUS_CODES,
    Status,
    StatusCode,
    status,
    to_public,
)

from tests.mocks import MockConnection


class TestStatusCode:
    """Test the public/internal partition of StatusCode."""

    def test_public_codes(self):
        """Only caller-facing outcomes are public."""
        assert PUBLIC_STATUS_CODES == {
            StatusCode.CONNECTED,
            StatusCode.TIMEOUT,
            StatusCode.HOST_NOT_FOUND,
            StatusCode.UNKNOWN,
            StatusCode.PROTOCOL_NOT_SUPPORTED,
            StatusCode.INVALID_PROTOCOL,
        }

    def test_internal_codes_are_not_public(self):
        """Retry-loop codes never count as public."""
        internal = set(StatusCode) - PUBLIC_STATUS_CODES

        assert StatusCode.SOCKET_CONNECTED in internal
        assert StatusCode.SHOULD_USE_IP_V4 in internal
        assert all(code.is_public is False for code in internal)

    def test_retryable_codes(self):
        """Transient transport and probe failures are retryable."""
        assert RETRYABLE_STATUS_CODES == {
            StatusCode.ECONNREFUSED,
            StatusCode.EACCES,
            StatusCode.ECONNRESET,
            StatusCode.ENOTFOUND,
            StatusCode.NO_DATA_RECEIVED,
            StatusCode.UNKNOWN_PING_ERROR,
        }

    @pytest.mark.parametrize(
        "code",
        [
            StatusCode.UNKNOWN,
            StatusCode.INVALID_PROTOCOL,
            StatusCode.PROTOCOL_NOT_SUPPORTED,
            StatusCode.TIMEOUT,
        ],
    )
    def test_terminal_codes_are_not_retryable(self, code: StatusCode):
        """Protocol mismatches and unknown errors end the poll."""
        assert code.is_retryable is False


class TestStatus:
    """Test Status construction rules."""

    def test_socket_connected_requires_connection(self):
        """SOCKET_CONNECTED without a connection is rejected."""
        with pytest.raises(ValueError):
            status(StatusCode.SOCKET_CONNECTED, "Connected")

    def test_other_codes_reject_connection(self):
        """Only SOCKET_CONNECTED may carry a connection."""
        with pytest.raises(ValueError):
            status(
                StatusCode.CONNECTED,
                "Connected",
                connection=MockConnection(),
            )

    def test_socket_connected_carries_connection(self):
        connection = MockConnection()
        result = status(
            StatusCode.SOCKET_CONNECTED,
            "Connected",
            connection=connection,
        )

        assert result.connection is connection
        assert result.succeeded is False

    def test_status_is_immutable(self):
        """Statuses are values and cannot be changed after creation."""
        result = status(StatusCode.TIMEOUT, "Timed out")

        with pytest.raises(AttributeError):
            result.code = StatusCode.CONNECTED

    def test_cause_is_kept(self):
        err = ConnectionRefusedError()
        result = status(StatusCode.ECONNREFUSED, "Refused", cause=err)

        assert result.cause is err
        assert isinstance(result, Status)


class TestToPublic:
    """Test narrowing statuses to public codes."""

    def test_public_status_is_unchanged(self):
        result = status(StatusCode.INVALID_PROTOCOL, "Bad framing")

        assert to_public(result) is result

    def test_internal_status_becomes_unknown(self):
        """Internal codes surface as UNKNOWN, keeping the internal code in the message."""
        result = to_public(status(StatusCode.SHOULD_USE_IP_V4, "Switch family"))

        assert result.code == StatusCode.UNKNOWN
        assert "SHOULD_USE_IP_V4" in result.message

    def test_escaping_connection_is_closed(self):
        """A stray SOCKET_CONNECTED never leaks its socket."""
        connection = MockConnection()

        result = to_public(
            status(
                StatusCode.SOCKET_CONNECTED,
                "Connected",
                connection=connection,
            )
        )

        assert result.code == StatusCode.UNKNOWN
        assert result.connection is None
        assert connection.closed is True
