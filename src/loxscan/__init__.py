"""loxscan: the scanning stage of a Lox-style language front end."""

#makes package exports explicit for downstream imports
from . import errors, scanner, token
from .errors import LexicalError, LexicalErrorKind, LoxscanError, SourceReadError
from .scanner import ScanResult, Scanner, scan
from .token import Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    "LexicalError",
    "LexicalErrorKind",
    "LoxscanError",
    "ScanResult",
    "Scanner",
    "SourceReadError",
    "Token",
    "TokenKind",
    "errors",
    "scan",
    "scanner",
    "token",
]
