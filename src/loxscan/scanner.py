"""Lexical analysis: turns source text into tokens one pull at a time."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Union

from .errors import LexicalError, LexicalErrorKind
from .logger import get_logger
from .token import EQUAL_SUFFIX_KINDS, SINGLE_CHAR_KINDS, Token, TokenKind

logger = get_logger(__name__)

ScanResult = Union[Token, LexicalError]

#characters dropped between tokens; newline is handled separately for line counting
_BLANKS = " \r\t"


#pulls tokens from a single source unit; errors are returned, not raised
@dataclass(slots=True)
class Scanner:
    """Scanner over one source unit (a file or a line of interactive input).

    Each call to :meth:`scan_next` yields either the next :class:`Token` or a
    :class:`LexicalError`. Once the end of the source is reached every further
    call returns the EOF token again.
    """

    source: str
    _length: int = field(init=False)
    _start: int = field(init=False, default=0)
    _current: int = field(init=False, default=0)
    _line: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self._length = len(self.source)
        self._start = 0
        self._current = 0
        self._line = 0

    # the cursor and cached length are only valid for the text given at construction
    def __setattr__(self, name: str, value: object) -> None:
        if name == "source" and hasattr(self, "source"):
            raise AttributeError("Scanner.source is read-only")
        object.__setattr__(self, name, value)

    @property
    def start(self) -> int:
        return self._start

    @property
    def current(self) -> int:
        return self._current

    @property
    def line(self) -> int:
        return self._line

    def is_at_end(self) -> bool:
        return self._current >= self._length

    def scan_next(self) -> ScanResult:
        while True:
            self._start = self._current

            if self.is_at_end():
                return self._make_token(TokenKind.EOF)

            char = self._advance()

            kind = SINGLE_CHAR_KINDS.get(char)
            if kind is not None:
                return self._make_token(kind)

            pair = EQUAL_SUFFIX_KINDS.get(char)
            if pair is not None:
                single, double = pair
                return self._make_token(double if self._match("=") else single)

            match char:
                case "/":
                    if not self._match("/"):
                        return self._make_token(TokenKind.SLASH)
                    self._line_comment()
                case "\n":
                    self._line += 1
                case _ if char in _BLANKS:
                    pass
                case _:
                    logger.debug("unexpected character %r at line %d", char, self._line)
                    return LexicalError(
                        LexicalErrorKind.UNEXPECTED_CHARACTER, self._line, char
                    )

    def scan_all(self) -> List[ScanResult]:
        """Pull until EOF; the EOF token is always the last element."""

        return list(self)

    def __iter__(self) -> Iterator[ScanResult]:
        while True:
            result = self.scan_next()
            yield result
            if isinstance(result, Token) and result.is_eof:
                return

    # Internal helpers -------------------------------------------------

    def _advance(self) -> str:
        char = self.source[self._current]
        self._current += 1
        return char

    def _peek(self) -> str:
        if self.is_at_end():
            return "\0"
        return self.source[self._current]

    def _match(self, expected: str) -> bool:
        if self.is_at_end():
            return False
        if self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _line_comment(self) -> None:
        while not self.is_at_end() and self._peek() != "\n":
            self._current += 1

    def _make_token(self, kind: TokenKind) -> Token:
        if kind is TokenKind.EOF:
            return Token(kind, "", self._line)
        return Token(kind, self.source[self._start : self._current], self._line)


#scans a whole source unit in one call
def scan(source: str) -> List[ScanResult]:
    return Scanner(source).scan_all()
