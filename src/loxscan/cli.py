"""Command-line entry point for loxscan."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from .errors import LexicalError, SourceReadError
from .logger import get_logger
from .scanner import ScanResult, Scanner

# named explicitly so `python -m loxscan.cli` logs under the same name
logger = get_logger("loxscan.cli")

# sysexits.h codes
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


#argparse exits with 2 on bad usage; the driver reports EX_USAGE instead
class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


#reads a whole script, turning OS and decoding failures into SourceReadError
def load_source(path: Path) -> str:
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"cannot read {path}: {exc}", str(path)) from exc
    logger.info("loaded %s (%d characters)", path, len(source))
    return source


#prints tokens to stdout and errors to stderr, returning the error count
def report(results: Iterable[ScanResult], out: TextIO, err: TextIO) -> int:
    errors = 0
    for result in results:
        if isinstance(result, LexicalError):
            errors += 1
            print(f"error: {result.message}", file=err)
            continue
        logger.debug("token %r", result)
        print(result, file=out)
    return errors


#scans one source unit end to end; returns how many lexical errors it hit
def run(source: str, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    scanner = Scanner(source)
    results = scanner.scan_all()
    errors = report(results, out or sys.stdout, err or sys.stderr)
    logger.info("scanned %d tokens, %d errors", len(results) - errors, errors)
    return errors


#handles `loxscan path/to/script`
def run_file(path: Path) -> int:
    try:
        source = load_source(path)
    except SourceReadError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return EX_NOINPUT
    if run(source):
        return EX_DATAERR
    return EX_OK


#reads a line at a time until end of input; errors never end the session
def run_prompt(stream: TextIO, prompt: str = "> ") -> int:
    while True:
        print(prompt, end="", flush=True)
        line = stream.readline()
        if line == "":
            print()
            return EX_OK
        run(line)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


#configures the CLI surface
def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="loxscan", description="Scan source text into tokens")
    parser.add_argument("script", nargs="?", help="path to source file; omit for a prompt")
    parser.add_argument("--prompt", default="> ", help="prompt shown in interactive mode")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


#entry point used by both console script and module execution
def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    if args.script is not None:
        return run_file(Path(args.script))
    return run_prompt(sys.stdin, args.prompt)


if __name__ == "__main__":
    raise SystemExit(main())
