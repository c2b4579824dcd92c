import struct

import pytest

from await_ready.protocols import (
    SSL_REQUEST,
    build_http_request,
    parse_http_response,
    parse_mysql_handshake,
    parse_postgresql_response,
    parse_redis_response,
)
from await_ready.status import StatusCode


class TestHTTPResponse:
    """Test HTTP status line validation."""

    @pytest.mark.parametrize(
        "response",
        [
            b"HTTP/1.1 200 OK\r\nContent-Length: 0\r\n\r\n",
            b"HTTP/1.1 500 Internal Server Error\r\n\r\n",
            b"HTTP/1.0 404 Not Found\r\n\r\n",
            b"HTTP/2 204\r\n\r\n",
        ],
    )
    def test_any_status_code_is_connected(self, response: bytes):
        """Reachability matters, the numeric status does not."""
        assert parse_http_response(response).code == StatusCode.CONNECTED

    def test_status_code_in_message(self):
        result = parse_http_response(b"HTTP/1.1 503 Service Unavailable\r\n\r\n")

        assert result.message == "HTTP 503"

    def test_empty_response_is_invalid(self):
        assert parse_http_response(b"").code == StatusCode.INVALID_PROTOCOL

    def test_single_token_is_invalid(self):
        assert parse_http_response(b"HTTP/1.1\r\n\r\n").code == StatusCode.INVALID_PROTOCOL

    def test_non_http_prefix_is_invalid(self):
        assert parse_http_response(b"SSH-2.0-OpenSSH_9.6\r\n").code == StatusCode.INVALID_PROTOCOL


class TestHTTPRequest:
    """Test the probe request bytes."""

    def test_default_path(self):
        assert build_http_request(None, "127.0.0.1") == (
            b"GET / HTTP/1.1\r\nHost: 127.0.0.1\r\n\r\n"
        )

    def test_custom_path(self):
        assert build_http_request("/healthcheck", "10.0.0.5") == (
            b"GET /healthcheck HTTP/1.1\r\nHost: 10.0.0.5\r\n\r\n"
        )

    def test_ipv6_host_is_bracketed(self):
        assert build_http_request("/", "::1") == (
            b"GET / HTTP/1.1\r\nHost: [::1]\r\n\r\n"
        )


class TestPostgreSQLResponse:
    """Test the SSLRequest exchange."""

    def test_ssl_request_bytes(self):
        """Length 8 followed by the SSLRequest code, both big-endian."""
        assert SSL_REQUEST == b"\x00\x00\x00\x08\x04\xd2\x16\x2f"
        assert struct.unpack("!ii", SSL_REQUEST) == (8, 80877103)

    @pytest.mark.parametrize("response", [b"S", b"N"])
    def test_single_byte_answer_is_connected(self, response: bytes):
        assert parse_postgresql_response(response).code == StatusCode.CONNECTED

    @pytest.mark.parametrize("response", [b"", b"E", b"SN", b"HTTP/1.1 400"])
    def test_anything_else_is_invalid(self, response: bytes):
        assert parse_postgresql_response(response).code == StatusCode.INVALID_PROTOCOL


class TestMySQLHandshake:
    """Test handshake header inspection."""

    def test_protocol_v10_handshake_is_connected(self):
        packet = b"\x4a\x00\x00\x00\x0a8.0.36\x00"

        assert parse_mysql_handshake(packet).code == StatusCode.CONNECTED

    def test_error_packet_is_connected(self):
        """A server refusing the client is still a live MySQL server."""
        packet = b"\x17\x00\x00\x00\xff\x10\x04Too many connections"

        result = parse_mysql_handshake(packet)

        assert result.code == StatusCode.CONNECTED
        assert "error packet" in result.message

    def test_short_packet_is_invalid(self):
        assert parse_mysql_handshake(b"\x4a\x00\x00\x00").code == StatusCode.INVALID_PROTOCOL

    def test_nonzero_sequence_id_is_invalid(self):
        assert parse_mysql_handshake(b"\x4a\x00\x00\x01\x0a").code == StatusCode.INVALID_PROTOCOL

    def test_unknown_protocol_version_is_invalid(self):
        assert parse_mysql_handshake(b"\x4a\x00\x00\x00\x09").code == StatusCode.INVALID_PROTOCOL


class TestRedisResponse:
    """Test PING reply framing."""

    def test_pong_is_connected(self):
        assert parse_redis_response(b"+PONG\r\n").code == StatusCode.CONNECTED

    @pytest.mark.parametrize(
        "response",
        [
            b"-NOAUTH Authentication required.\r\n",
            b"-LOADING Redis is loading the dataset in memory\r\n",
        ],
    )
    def test_error_reply_is_connected(self, response: bytes):
        """Errors still come from a live Redis server."""
        assert parse_redis_response(response).code == StatusCode.CONNECTED

    @pytest.mark.parametrize("response", [b"", b"\r\n", b":1\r\n", b"HTTP/1.1 400 Bad Request\r\n"])
    def test_other_framing_is_invalid(self, response: bytes):
        assert parse_redis_response(response).code == StatusCode.INVALID_PROTOCOL
