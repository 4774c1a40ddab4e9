from .config import ParserConfig
from .errors import ErrorKind, ParseError
from .models import ConfStr, Pair
from .parser import ConfStrParser, create_parser, parse_conf_str

__all__ = [
    # Factory
    "create_parser",
    "parse_conf_str",
    # Parser
    "ConfStrParser",
    # Config
    "ParserConfig",
    # Types
    "ConfStr",
    "Pair",
    # Errors
    "ErrorKind",
    "ParseError",
]
