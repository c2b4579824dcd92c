from .parse_target import (
    DEFAULT_PORTS as DEFAULT_PORTS,
    ParsedTarget as ParsedTarget,
    parse_target as parse_target,
)
