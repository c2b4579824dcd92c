from .http import (
    build_http_request as build_http_request,
    parse_http_response as parse_http_response,
    ping_http as ping_http,
)
from .mysql import (
    parse_mysql_handshake as parse_mysql_handshake,
    ping_mysql as ping_mysql,
)
from .ping import (
    DEFAULT_PING_TIMEOUT as DEFAULT_PING_TIMEOUT,
    ping as ping,
)
from .postgresql import (
    SSL_REQUEST as SSL_REQUEST,
    parse_postgresql_response as parse_postgresql_response,
    ping_postgresql as ping_postgresql,
)
from .protocol import (
    Protocol as Protocol,
    protocol_names as protocol_names,
)
from .redis import (
    PING_COMMAND as PING_COMMAND,
    parse_redis_response as parse_redis_response,
    ping_redis as ping_redis,
)
