"""Token definitions for the loxscan scanner."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Final, Optional


#enumerates every lexical category produced by the scanner
class TokenKind(Enum):
    # Single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    SEMICOLON = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # One or two character tokens
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()

    EOF = auto()


#characters that always form a token on their own
SINGLE_CHAR_KINDS: Final[dict[str, TokenKind]] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

#one-char kind and the kind it becomes when followed by "="
EQUAL_SUFFIX_KINDS: Final[dict[str, tuple[TokenKind, TokenKind]]] = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}


#encapsulates the lexeme string, token kind, literal value, and line
@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    lexeme: str
    line: int
    # reserved for literal kinds; always None for punctuation and operators
    literal: Optional[object] = None

    @property
    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF

    def __str__(self) -> str:
        return f"{self.kind.name} {self.lexeme!r} line={self.line}"

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.lexeme!r}, line={self.line})"
