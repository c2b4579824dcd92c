import pytest

from await_ready.protocols import Protocol, protocol_names


class TestProtocol:
    """Test protocol name parsing."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("none", Protocol.NONE),
            ("http", Protocol.HTTP),
            ("https", Protocol.HTTPS),
            ("postgresql", Protocol.POSTGRESQL),
            ("mysql", Protocol.MYSQL),
            ("redis", Protocol.REDIS),
            ("HTTP", Protocol.HTTP),
        ],
    )
    def test_parse_names(self, name: str, expected: Protocol):
        assert Protocol.parse(name) == expected

    def test_pg_alias(self):
        """``pg`` is shorthand for PostgreSQL."""
        assert Protocol.parse("pg") == Protocol.POSTGRESQL

    def test_parse_passes_protocol_through(self):
        assert Protocol.parse(Protocol.REDIS) is Protocol.REDIS

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="ftp"):
            Protocol.parse("ftp")

    def test_names_include_alias(self):
        names = protocol_names()

        assert "pg" in names
        assert "postgresql" in names
        assert "none" in names
