"""Lexical error values and package exceptions."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


#closed set of reasons a single scan can fail
class LexicalErrorKind(Enum):
    UNEXPECTED_CHARACTER = auto()


#returned by the scanner in place of a token; the scanner stays usable
@dataclass(frozen=True, slots=True)
class LexicalError:
    """A per-character scanning failure tied to the line it occurred on."""

    kind: LexicalErrorKind
    line: int
    character: str = ""

    @property
    def message(self) -> str:
        match self.kind:
            case LexicalErrorKind.UNEXPECTED_CHARACTER:
                if self.character:
                    return f"unexpected character {self.character!r} at line {self.line}"
                return f"unexpected character at line {self.line}"
            case _:
                return f"{self.kind.name.lower()} at line {self.line}"

    def __str__(self) -> str:
        return self.message


#normalizes the base exception for everything the package raises
class LoxscanError(Exception):
    """Base class for loxscan-related errors."""


#the driver raises this when a script cannot be loaded
class SourceReadError(LoxscanError):
    """Raised when a source file cannot be read or decoded."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path
        self.message = message
