# parsers/errors.py

from enum import Enum

END_OF_INPUT = "end of input"


class ErrorKind(str, Enum):
    EXPECTED_IDENTIFIER = "expected_identifier"
    MUST_BE_ALPHANUMERIC = "must_be_alphanumeric"
    BAD_SEPARATOR = "bad_separator"
    DUPLICATE_KEY = "duplicate_key"
    INVALID_CHAR_IN_VALUE = "invalid_char_in_value"
    INVALID_UTF8 = "invalid_utf8"


def describe_found(char: str | None) -> str:
    """Render the character actually found, or the end-of-input marker."""
    if char is None:
        return END_OF_INPUT
    return repr(char)


class ParseError(ValueError):
    """
    A configuration string could not be parsed.

    - ``position`` is a zero-based byte offset into the UTF-8 input
    - ``message`` is a complete sentence ending in ``at position <P>``
    - parameter values never appear in the message
    """

    def __init__(self, kind: ErrorKind, description: str, position: int) -> None:
        self.kind = kind
        self.description = description
        self.position = position
        self.message = f"{description} at position {position}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __reduce__(self) -> tuple:
        return (type(self), (self.kind, self.description, self.position))

    def __repr__(self) -> str:
        return (
            f"ParseError(kind={self.kind.value!r}, message={self.message!r}, "
            f"position={self.position})"
        )

    @classmethod
    def expected_identifier(cls, found: str | None, position: int) -> "ParseError":
        return cls(
            ErrorKind.EXPECTED_IDENTIFIER,
            f"expected identifier, got {describe_found(found)}",
            position,
        )

    @classmethod
    def expected_identifier_start(cls, found: str, position: int) -> "ParseError":
        return cls(
            ErrorKind.EXPECTED_IDENTIFIER,
            f"expected identifier to start with ascii letter, not {found!r}",
            position,
        )

    @classmethod
    def expected_identifier_not_empty(cls, position: int) -> "ParseError":
        return cls(
            ErrorKind.EXPECTED_IDENTIFIER,
            "expected identifier, not an empty string",
            position,
        )

    @classmethod
    def must_be_alphanumeric(cls, found: str, position: int) -> "ParseError":
        return cls(
            ErrorKind.MUST_BE_ALPHANUMERIC,
            f"must be alphanumeric, not {found!r}",
            position,
        )

    @classmethod
    def bad_separator(
        cls, expected: str, found: str | None, position: int
    ) -> "ParseError":
        return cls(
            ErrorKind.BAD_SEPARATOR,
            f"bad separator, expected {expected!r} got {describe_found(found)}",
            position,
        )

    @classmethod
    def duplicate_key(cls, key: str, position: int) -> "ParseError":
        return cls(ErrorKind.DUPLICATE_KEY, f"duplicate key {key!r}", position)

    @classmethod
    def invalid_char_in_value(cls, found: str, position: int) -> "ParseError":
        return cls(
            ErrorKind.INVALID_CHAR_IN_VALUE,
            f"invalid char {found!r} in value",
            position,
        )

    @classmethod
    def invalid_utf8(cls, position: int) -> "ParseError":
        return cls(ErrorKind.INVALID_UTF8, "invalid UTF-8 sequence", position)
