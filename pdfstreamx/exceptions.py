"""Custom exceptions raised by :mod:`pdfstreamx`."""

from __future__ import annotations


class PDFStreamXError(Exception):
    """Base exception for all errors raised by :mod:`pdfstreamx`."""


class TokenizeError(PDFStreamXError):
    """Raised when the tokenizer cannot continue past *offset*."""

    def __init__(self, message: str, offset: int) -> None:
        self.offset = offset
        super().__init__(f"{message} at offset {offset}")


class MalformedNumberError(TokenizeError):
    """Raised when a digit run does not fit a signed 32-bit integer."""

    def __init__(self, digits: bytes, offset: int) -> None:
        self.digits = bytes(digits)
        preview = self.digits[:24].decode("ascii")
        if len(self.digits) > 24:
            preview += "..."
        super().__init__(f"Number {preview} does not fit a 32-bit integer", offset)


class UnrecognizedTokenError(TokenizeError):
    """Raised when the next significant byte does not start a known token."""

    def __init__(self, byte: int, offset: int) -> None:
        self.byte = byte
        super().__init__(f"Unrecognized token starting with {bytes([byte])!r}", offset)


class DecompressionError(PDFStreamXError):
    """Raised when a stream cannot be inflated or decoded as text."""


class PDFReadError(PDFStreamXError):
    """Raised when an input file cannot be read."""
