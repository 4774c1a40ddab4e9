# parsers/scanner.py

from collections.abc import Callable


def utf8_width(char: str) -> int:
    """Number of bytes ``char`` occupies once encoded as UTF-8."""
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


class Scanner:
    """
    Forward-only cursor over a decoded string.

    Tracks the byte offset of the current character in the UTF-8 encoding
    of the text, so that error positions match what byte-oriented callers see.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._index = 0
        self.position = 0

    def peek(self) -> str | None:
        if self._index < len(self._text):
            return self._text[self._index]
        return None

    def advance(self) -> str | None:
        char = self.peek()
        if char is not None:
            self._index += 1
            self.position += utf8_width(char)
        return char

    def at_end(self) -> bool:
        return self._index >= len(self._text)

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume characters while ``predicate`` holds; return them."""
        start = self._index
        while not self.at_end() and predicate(self._text[self._index]):
            self.advance()
        return self._text[start : self._index]

    def take_until(self, stop: frozenset[str]) -> str:
        return self.take_while(lambda c: c not in stop)
