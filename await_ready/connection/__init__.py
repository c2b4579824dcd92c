from .connection import Connection as Connection
from .connection_factory import (
    ConnectionFactory as ConnectionFactory,
    IPVersion as IPVersion,
    create_connection as create_connection,
)
from .errors import classify_connect_error as classify_connect_error
