# Catalog
from .catalog import ConfStrEntry, ConfStrLibrary

# Handles
from .handles import (
    ConfStrHandle,
    HandleReleasedError,
    PairIterator,
    advance,
    begin_iteration,
    get,
    parse,
    release,
    service,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    ConfStr,
    ConfStrParser,
    ErrorKind,
    Pair,
    ParseError,
    ParserConfig,
    create_parser,
    parse_conf_str,
)

__all__ = [
    # Catalog
    "ConfStrEntry",
    "ConfStrLibrary",
    # Handles
    "ConfStrHandle",
    "HandleReleasedError",
    "PairIterator",
    "advance",
    "begin_iteration",
    "get",
    "parse",
    "release",
    "service",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "ConfStr",
    "ConfStrParser",
    "ErrorKind",
    "Pair",
    "ParseError",
    "ParserConfig",
    "create_parser",
    "parse_conf_str",
]
