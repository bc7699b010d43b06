"""Cursor based tokenizer for raw PDF bytes.

:class:`ByteCursor` walks a byte buffer and recognizes a deliberately small
grammar: decimal integers, bare symbols, ``<< ... >>`` dictionary blocks and
``stream ... endstream`` blocks.  Whitespace and ``%`` comments between tokens
are skipped.  The cursor never copies the buffer; ``Stream`` tokens hold
:class:`memoryview` slices of it.

Closing markers are matched with a plain forward search, so the first ``>>``
ends a dictionary even when it belongs to a nested one, and a payload that
contains ``\\nendstream`` is cut short.  Callers relying on these tokens should
treat that as a known limitation of the grammar.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from .exceptions import MalformedNumberError, UnrecognizedTokenError
from .tokens import Dictionary, Number, Stream, Symbol, Token

__all__ = ["ByteCursor", "tokenize", "iter_streams"]

_LOGGER = logging.getLogger("pdfstreamx")

# Space, tab, line feed, form feed and carriage return.
_WHITESPACE = re.compile(rb"[ \t\n\x0c\r]*")
_DIGITS = re.compile(rb"[0-9]+")
_SYMBOL = re.compile(rb"[A-Za-z][A-Za-z0-9]*")

_COMMENT = ord("%")
_DICT_OPEN = b"<<"
_DICT_CLOSE = b">>"
_STREAM_OPEN = b"stream\n"
_STREAM_CLOSE = b"\nendstream"

_INT32_MAX = 2**31 - 1


class ByteCursor:
    """Forward-only tokenizer over an immutable byte buffer.

    The cursor is its own iterator: ``for token in cursor`` drains it, and a
    drained cursor stays empty.  Build a new one to scan the buffer again.
    """

    def __init__(self, buffer: bytes | bytearray | memoryview) -> None:
        if isinstance(buffer, memoryview):
            buffer = buffer.tobytes()
        self._buffer = buffer
        self._view = memoryview(buffer)
        self._position = 0

    @classmethod
    def from_bytes(cls, buffer: bytes | bytearray | memoryview) -> "ByteCursor":
        return cls(buffer)

    @property
    def buffer(self) -> bytes | bytearray:
        return self._buffer

    @property
    def position(self) -> int:
        """Offset of the first unread byte."""

        return self._position

    @property
    def remaining(self) -> memoryview:
        """Unread suffix of the buffer."""

        return self._view[self._position :]

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._buffer)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self._position}, size={len(self._buffer)})"

    def next_token(self) -> Token | None:
        """Return the next token, or ``None`` once the buffer is exhausted.

        Raises
        ------
        MalformedNumberError
            If a digit run does not fit a signed 32-bit integer.
        UnrecognizedTokenError
            If the next significant byte does not start any known token.

        Neither error advances the cursor.
        """

        self._skip_whitespace_and_comments()
        buffer = self._buffer
        start = self._position
        if start >= len(buffer):
            return None

        lead = buffer[start]
        token: Token

        if 0x30 <= lead <= 0x39:
            digits = _DIGITS.match(buffer, start).group()
            significant = digits.lstrip(b"0") or b"0"
            if len(significant) > 10 or int(significant) > _INT32_MAX:
                raise MalformedNumberError(digits, start)
            self._position = start + len(digits)
            token = Number(int(significant), offset=start)
        elif buffer.startswith(_DICT_OPEN, start):
            content_start, content_end = self._chop(_DICT_OPEN, _DICT_CLOSE)
            token = Dictionary(content_end - content_start, offset=start)
        elif buffer.startswith(_STREAM_OPEN, start):
            content_start, content_end = self._chop(_STREAM_OPEN, _STREAM_CLOSE)
            token = Stream(self._view[content_start:content_end], offset=start)
        else:
            match = _SYMBOL.match(buffer, start)
            if match is None:
                raise UnrecognizedTokenError(lead, start)
            self._position = match.end()
            token = Symbol(match.group().decode("ascii"), offset=start)

        _LOGGER.debug("Token %r at offset %d", token, start)
        return token

    def _skip_whitespace_and_comments(self) -> None:
        buffer = self._buffer
        size = len(buffer)
        position = self._position
        while True:
            position = _WHITESPACE.match(buffer, position).end()
            if position < size and buffer[position] == _COMMENT:
                newline = buffer.find(b"\n", position)
                position = size if newline == -1 else newline + 1
                continue
            break
        self._position = position

    def _chop(self, opener: bytes, closer: bytes) -> tuple[int, int]:
        """Consume ``opener ... closer`` and return the content bounds.

        Without a closer the content runs to the end of the buffer and the
        cursor is left exhausted.
        """

        content_start = self._position + len(opener)
        content_end = self._buffer.find(closer, content_start)
        if content_end == -1:
            content_end = len(self._buffer)
            self._position = content_end
        else:
            self._position = content_end + len(closer)
        return content_start, content_end


def tokenize(buffer: bytes | bytearray | memoryview) -> Iterator[Token]:
    """Yield every token of *buffer* in order."""

    yield from ByteCursor.from_bytes(buffer)


def iter_streams(buffer: bytes | bytearray | memoryview) -> Iterator[Stream]:
    """Yield only the ``Stream`` tokens of *buffer*."""

    for token in tokenize(buffer):
        if isinstance(token, Stream):
            yield token
