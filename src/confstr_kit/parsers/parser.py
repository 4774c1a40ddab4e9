# parsers/parser.py

import logging
from time import monotonic

from confstr_kit.observability import names
from confstr_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import ParserConfig
from .errors import ParseError
from .models import ConfStr, Pair
from .scanner import Scanner

logger = logging.getLogger(__name__)

_SERVICE_STOP = frozenset(":;")
_KEY_STOP = frozenset("=;")
_VALUE_STOP = frozenset(";")


def _is_ident_char(char: str) -> bool:
    return char == "_" or (char.isascii() and char.isalnum())


def _is_control(char: str) -> bool:
    code = ord(char)
    return code <= 0x1F or 0x7F <= code <= 0x9F


def _decode(source: str | bytes) -> str:
    if isinstance(source, (bytes, bytearray, memoryview)):
        try:
            return bytes(source).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError.invalid_utf8(exc.start) from None
    return source


class ConfStrParser:
    """
    Single-pass parser for ``service[::key=value;key=value;...]``.

    - No backtracking, stops at the first violation
    - Error positions are UTF-8 byte offsets
    - Never returns a partial result
    """

    def __init__(
        self,
        *,
        strict: bool = False,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.strict = strict
        self.metrics_hook = metrics_hook

    def parse(self, source: str | bytes) -> ConfStr:
        start = monotonic()
        try:
            conf_str = self._parse(source)
        except ParseError as err:
            self.metrics_hook.increment(
                names.CONFSTR_PARSE_ERRORS_TOTAL, labels={"kind": err.kind.value}
            )
            logger.debug(
                "Rejected configuration string: kind=%s, position=%d",
                err.kind.value,
                err.position,
            )
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.CONFSTR_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.CONFSTR_PARSES_TOTAL)
        self.metrics_hook.increment(names.CONFSTR_PAIRS_PARSED, len(conf_str))
        logger.debug(
            "Parsed configuration string: service=%s, pairs=%d",
            conf_str.service,
            len(conf_str),
        )
        return conf_str

    def _parse(self, source: str | bytes) -> ConfStr:
        scanner = Scanner(_decode(source))
        service = self._scan_identifier(scanner, _SERVICE_STOP)
        if scanner.at_end():
            return ConfStr(service=service)

        self._expect_double_colon(scanner)
        return ConfStr(service=service, pairs=self._scan_pairs(scanner))

    def _scan_identifier(self, scanner: Scanner, stop: frozenset[str]) -> str:
        start = scanner.position
        if not self.strict:
            token = scanner.take_until(stop)
            if not token:
                raise ParseError.expected_identifier(scanner.peek(), start)
            return token

        token = scanner.take_while(_is_ident_char)
        if not token:
            char = scanner.peek()
            if char is None:
                raise ParseError.expected_identifier_not_empty(start)
            raise ParseError.expected_identifier_start(char, start)

        # Punctuation ends the identifier and is left to the separator
        # checks; whitespace, control and non-ASCII characters do not.
        char = scanner.peek()
        if char is not None and (not char.isascii() or char <= " "):
            raise ParseError.must_be_alphanumeric(char, scanner.position)
        return token

    def _expect_double_colon(self, scanner: Scanner) -> None:
        for _ in range(2):
            char = scanner.peek()
            if char != ":":
                raise ParseError.bad_separator(":", char, scanner.position)
            scanner.advance()

    def _scan_pairs(self, scanner: Scanner) -> tuple[Pair, ...]:
        pairs: list[Pair] = []
        seen: set[str] = set()

        while not scanner.at_end():
            key_start = scanner.position
            key = self._scan_identifier(scanner, _KEY_STOP)
            if key in seen:
                raise ParseError.duplicate_key(key, key_start)

            char = scanner.peek()
            if char != "=":
                raise ParseError.bad_separator("=", char, scanner.position)
            scanner.advance()

            value = self._scan_value(scanner)
            if scanner.at_end():
                raise ParseError.bad_separator(";", None, scanner.position)
            scanner.advance()

            pairs.append(
                Pair(
                    key=key,
                    value=value,
                    offset_start=key_start,
                    offset_end=scanner.position,
                )
            )
            seen.add(key)

        return tuple(pairs)

    def _scan_value(self, scanner: Scanner) -> str:
        if not self.strict:
            return scanner.take_until(_VALUE_STOP)

        chars: list[str] = []
        while True:
            char = scanner.peek()
            if char is None or char in _VALUE_STOP:
                break
            if _is_control(char):
                raise ParseError.invalid_char_in_value(char, scanner.position)
            chars.append(char)
            scanner.advance()
        return "".join(chars)


def parse_conf_str(
    source: str | bytes,
    *,
    strict: bool = False,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ConfStr:
    """Parse a configuration string.

    Args:
        source: Text, or UTF-8 encoded bytes.
        strict: Restrict identifiers to ASCII alphanumerics and '_'.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        The parsed, immutable configuration.

    Raises:
        ParseError: On the first grammar violation.

    Example:
        >>> conf = parse_conf_str("http::host=localhost;port=9000;")
        >>> conf.service
        'http'
        >>> conf.get("port")
        '9000'
    """
    return ConfStrParser(strict=strict, metrics_hook=metrics_hook).parse(source)


def create_parser(
    config: ParserConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ConfStrParser:
    """Create a parser from config."""
    return ConfStrParser(strict=config.strict, metrics_hook=metrics_hook)
