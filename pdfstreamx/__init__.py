"""Minimal PDF tokenizer that extracts and inflates raw stream blocks."""

from __future__ import annotations

__version__ = "0.1.0"

from .exceptions import (
    DecompressionError,
    MalformedNumberError,
    PDFReadError,
    PDFStreamXError,
    TokenizeError,
    UnrecognizedTokenError,
)
from .lexer import ByteCursor, iter_streams, tokenize
from .streams import DumpOptions, StreamReport, describe_stream, inflate_stream, preview_stream, scan_buffer, scan_file
from .tokens import Dictionary, Number, Stream, Symbol, Token

__all__ = [
    "__version__",
    "ByteCursor",
    "tokenize",
    "iter_streams",
    "Number",
    "Symbol",
    "Dictionary",
    "Stream",
    "Token",
    "DumpOptions",
    "StreamReport",
    "inflate_stream",
    "preview_stream",
    "describe_stream",
    "scan_buffer",
    "scan_file",
    "PDFStreamXError",
    "TokenizeError",
    "MalformedNumberError",
    "UnrecognizedTokenError",
    "DecompressionError",
    "PDFReadError",
]
