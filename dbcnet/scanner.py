"""Low-level tokenizer for DBC text.

The scanner walks over the input with a single cursor. Whitespace, ``//`` line
comments and (nestable) ``/* */`` block comments are skipped between tokens;
``end_of_line`` is the one place where only blanks are skipped, for the
line-oriented parts of the format.
"""

from __future__ import annotations

import re

__all__ = ["DBCParseError", "Scanner"]

_UINT64_MAX = 2**64 - 1
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_SPACE = " \t\n\r\v\f"
_BLANK = " \t"

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")
_NUMBER = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|inf(?:inity)?)",
    re.IGNORECASE,
)


def _is_ident_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


class DBCParseError(ValueError):
    """Raised when the input does not follow the DBC grammar."""

    def __init__(self, expected: str, line: int, column: int) -> None:
        super().__init__(f"line {line}, column {column}: expecting {expected}")
        self.expected = expected
        self.line = line
        self.column = column


class Scanner:
    """Cursor over DBC text that reads one token at a time.

    ``text`` is the whole input and ``pos`` the offset of the next unread
    character; both may be inspected by callers.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def line(self) -> int:
        """One-based line number of the cursor."""
        return self.text.count("\n", 0, self.pos) + 1

    @property
    def column(self) -> int:
        """One-based column number of the cursor."""
        return self.pos - (self.text.rfind("\n", 0, self.pos) + 1) + 1

    def _error(self, expected: str, pos: int | None = None) -> DBCParseError:
        if pos is not None:
            saved, self.pos = self.pos, pos
            try:
                return DBCParseError(expected, self.line, self.column)
            finally:
                self.pos = saved
        return DBCParseError(expected, self.line, self.column)

    def _block_comment(self) -> None:
        start = self.pos
        text = self.text
        self.pos += 2
        depth = 1
        while depth:
            if self.pos >= len(text):
                raise self._error("'*/'", start)
            if text.startswith("/*", self.pos):
                depth += 1
                self.pos += 2
            elif text.startswith("*/", self.pos):
                depth -= 1
                self.pos += 2
            else:
                self.pos += 1

    def skip(self) -> None:
        """Move past whitespace and comments."""
        text = self.text
        length = len(text)
        while self.pos < length:
            if text[self.pos] in _SPACE:
                self.pos += 1
            elif text.startswith("//", self.pos):
                newline = text.find("\n", self.pos)
                self.pos = length if newline < 0 else newline + 1
            elif text.startswith("/*", self.pos):
                self._block_comment()
            else:
                break

    def at_end(self) -> bool:
        """Tell whether only whitespace and comments remain."""
        self.skip()
        return self.pos >= len(self.text)

    def _matches(self, literal: str) -> bool:
        if not self.text.startswith(literal, self.pos):
            return False
        if literal and _is_ident_char(literal[-1]):
            after = self.pos + len(literal)
            if after < len(self.text) and _is_ident_char(self.text[after]):
                return False
        return True

    def at_keyword(self, word: str) -> bool:
        """Tell whether the next token is ``word``, without consuming it.

        A keyword only matches as a whole word, so ``BO_`` does not match
        the start of ``BO_TX_BU_``.
        """
        self.skip()
        return self._matches(word)

    def accept(self, literal: str) -> bool:
        """Consume ``literal`` if it comes next and report whether it did."""
        self.skip()
        if self._matches(literal):
            self.pos += len(literal)
            return True
        return False

    def expect(self, literal: str) -> None:
        """Consume ``literal`` or raise :class:`DBCParseError`."""
        if not self.accept(literal):
            raise self._error(repr(literal))

    def quoted_string(self) -> str:
        """Read a double-quoted string; ``\\\\`` and ``\\"`` are unescaped."""
        self.skip()
        text = self.text
        if not text.startswith('"', self.pos):
            raise self._error("quoted string")
        start = self.pos
        pos = self.pos + 1
        chars: list[str] = []
        while True:
            if pos >= len(text):
                raise self._error("closing '\"'", start)
            char = text[pos]
            if char == '"':
                break
            if char == "\\" and pos + 1 < len(text) and text[pos + 1] in '\\"':
                chars.append(text[pos + 1])
                pos += 2
            else:
                chars.append(char)
                pos += 1
        self.pos = pos + 1
        return "".join(chars)

    def _read(self, pattern: re.Pattern[str], expected: str) -> str:
        self.skip()
        match = pattern.match(self.text, self.pos)
        if match is None:
            raise self._error(expected)
        self.pos = match.end()
        return match.group()

    def identifier(self) -> str:
        """Read a C identifier."""
        return self._read(_IDENTIFIER, "identifier")

    def unsigned(self) -> int:
        """Read an unsigned 64-bit integer."""
        start = self.pos
        value = int(self._read(_UNSIGNED, "unsigned integer"))
        if value > _UINT64_MAX:
            self.pos = start
            self.skip()
            raise self._error("unsigned 64-bit integer")
        return value

    def signed(self) -> int:
        """Read a signed 64-bit integer."""
        start = self.pos
        value = int(self._read(_SIGNED, "signed integer"))
        if not _INT64_MIN <= value <= _INT64_MAX:
            self.pos = start
            self.skip()
            raise self._error("signed 64-bit integer")
        return value

    def number(self) -> float:
        """Read a floating-point number."""
        return float(self._read(_NUMBER, "number"))

    def end_of_line(self) -> None:
        """Skip blanks, then consume a line break or accept the end of input."""
        text = self.text
        while self.pos < len(text) and text[self.pos] in _BLANK:
            self.pos += 1
        if self.pos >= len(text):
            return
        if text.startswith("\r\n", self.pos):
            self.pos += 2
        elif text[self.pos] in "\r\n":
            self.pos += 1
        else:
            raise self._error("end of line")