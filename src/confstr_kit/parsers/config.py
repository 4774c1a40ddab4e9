# src/confstr_kit/parsers/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for the configuration-string parser.

    Immutable. Explicit. No magic defaults from environment.
    """

    # Restrict service and key names to ASCII alphanumerics and '_', and
    # reject control characters inside values.
    strict: bool = False
