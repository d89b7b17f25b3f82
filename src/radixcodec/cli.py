"""Command line interface for the radixcodec toolkit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .codec import (
    PRESETS,
    Alphabet,
    AlphabetError,
    DecodeError,
    decode,
    encode_bytes,
    resolve_alphabet,
    transcode,
)
from .config import Settings, load_settings
from .exceptions import ConfigurationError, RadixCodecError
from .utils import configure_logging

logger = logging.getLogger(__name__)

console = Console()
error_console = Console(stderr=True)

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def _read_bytes(path: str | None) -> bytes:
    if not path or path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _write_bytes(path: str | None, data: bytes) -> None:
    if not path or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    Path(path).write_bytes(data)


def _read_symbols(path: str | None, alphabet: Alphabet) -> bytes:
    # trailing whitespace from shells and editors is dropped unless it is a symbol
    data = _read_bytes(path)
    end = len(data)
    while end and data[end - 1 : end].isspace() and data[end - 1] not in alphabet:
        end -= 1
    return data[:end]


def _report_error(exc: RadixCodecError) -> int:
    if isinstance(exc, AlphabetError):
        kind = "Invalid alphabet"
    elif isinstance(exc, DecodeError):
        kind = "Decode failed"
    else:
        kind = "Error"
    error_console.print(f"[red]{kind}:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
    return 1


def _logging_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Set the log level for the CLI session",
    )
    return common


def _io_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False, parents=[_logging_parser()])
    common.add_argument("-i", "--in", dest="input_path", default="-", help="Input file (default: stdin)")
    common.add_argument("-o", "--out", dest="output_path", default="-", help="Output file (default: stdout)")
    return common


def _setup(args: argparse.Namespace, settings: Settings) -> None:
    configure_logging(args.log_level or settings.log_level)


def _handle_encode(argv: Sequence[str], settings: Settings) -> int:
    parser = argparse.ArgumentParser(
        prog="radixcodec encode",
        description="Encode raw bytes into a symbol string.",
        parents=[_io_parser()],
    )
    parser.add_argument(
        "-a",
        "--alphabet",
        default=settings.alphabet,
        help=f"Preset name or custom(<symbols>) (default: {settings.alphabet})",
    )
    args = parser.parse_args(list(argv))
    _setup(args, settings)

    try:
        alphabet = resolve_alphabet(args.alphabet)
        payload = _read_bytes(args.input_path)
        logger.debug("encoding %d bytes with %r", len(payload), alphabet)
        encoded = encode_bytes(alphabet, payload)
    except RadixCodecError as exc:
        return _report_error(exc)

    _write_bytes(args.output_path, encoded)
    return 0


def _handle_decode(argv: Sequence[str], settings: Settings) -> int:
    parser = argparse.ArgumentParser(
        prog="radixcodec decode",
        description="Decode a symbol string back into raw bytes.",
        parents=[_io_parser()],
    )
    parser.add_argument(
        "-a",
        "--alphabet",
        default=settings.alphabet,
        help=f"Preset name or custom(<symbols>) (default: {settings.alphabet})",
    )
    args = parser.parse_args(list(argv))
    _setup(args, settings)

    try:
        alphabet = resolve_alphabet(args.alphabet)
        symbols = _read_symbols(args.input_path, alphabet)
        logger.debug("decoding %d symbols with %r", len(symbols), alphabet)
        decoded = decode(alphabet, symbols)
    except RadixCodecError as exc:
        return _report_error(exc)

    _write_bytes(args.output_path, decoded)
    return 0


def _handle_transcode(argv: Sequence[str], settings: Settings) -> int:
    parser = argparse.ArgumentParser(
        prog="radixcodec transcode",
        description="Rewrite a symbol string from one alphabet into another.",
        parents=[_io_parser()],
    )
    parser.add_argument(
        "--from",
        dest="source",
        default=settings.alphabet,
        help=f"Alphabet of the input symbols (default: {settings.alphabet})",
    )
    parser.add_argument("--to", dest="target", required=True, help="Alphabet of the output symbols")
    args = parser.parse_args(list(argv))
    _setup(args, settings)

    try:
        source = resolve_alphabet(args.source)
        target = resolve_alphabet(args.target)
        symbols = _read_symbols(args.input_path, source)
        logger.debug("transcoding %d symbols from %r to %r", len(symbols), source, target)
        output = transcode(symbols, source, target)
    except RadixCodecError as exc:
        return _report_error(exc)

    _write_bytes(args.output_path, output.encode("latin-1"))
    return 0


def _handle_alphabets(argv: Sequence[str], settings: Settings) -> int:
    parser = argparse.ArgumentParser(
        prog="radixcodec alphabets",
        description="List the preset alphabets.",
        parents=[_logging_parser()],
    )
    args = parser.parse_args(list(argv))
    _setup(args, settings)

    table = Table(title="Preset alphabets")
    table.add_column("Name", style="bold")
    table.add_column("Base", justify="right")
    table.add_column("Symbols")
    for name, symbols in PRESETS.items():
        marker = " (default)" if name == settings.alphabet.lower() else ""
        table.add_row(f"{name}{marker}", str(Alphabet(symbols).base), symbols)
    console.print(table)
    return 0


_COMMANDS = {
    "encode": _handle_encode,
    "decode": _handle_decode,
    "transcode": _handle_transcode,
    "alphabets": _handle_alphabets,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radixcodec",
        description="Encode and decode binary data using arbitrary-base alphabets.",
    )
    subparsers = parser.add_subparsers(dest="command")
    for command in _COMMANDS:
        subparsers.add_parser(command)
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    if not args or args[0] in {"-h", "--help"}:
        build_parser().print_help()
        return 0

    command, rest = args[0], args[1:]
    handler = _COMMANDS.get(command)
    if handler is None:
        _report_error(ConfigurationError(f"unknown command '{command}'"))
        build_parser().print_help()
        return 1

    return handler(rest, load_settings())


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
