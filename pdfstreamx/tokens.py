"""Token types produced by :class:`pdfstreamx.lexer.ByteCursor`.

Every token records the ``offset`` of its first byte in the scanned buffer.
Offsets are informational and do not take part in equality, so
``Number(123) == Number(123, offset=40)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

__all__ = ["Number", "Symbol", "Dictionary", "Stream", "Token"]


@dataclass(frozen=True, slots=True)
class Number:
    """Decimal integer within the signed 32-bit range."""

    value: int
    offset: int = field(default=0, compare=False)


@dataclass(frozen=True, slots=True)
class Symbol:
    """Bare keyword such as ``obj`` or ``endobj``."""

    text: str
    offset: int = field(default=0, compare=False)


@dataclass(frozen=True, slots=True)
class Dictionary:
    """Opaque ``<< ... >>`` block; only the content length is kept."""

    length: int
    offset: int = field(default=0, compare=False)


@dataclass(frozen=True, slots=True)
class Stream:
    """Raw bytes between ``stream\\n`` and ``\\nendstream``.

    ``data`` is a view into the scanned buffer rather than a copy, and stays
    valid only while that buffer is left untouched.
    """

    data: memoryview | bytes
    offset: int = field(default=0, compare=False)

    @property
    def raw(self) -> bytes:
        return bytes(self.data)

    def __hash__(self) -> int:
        # Views of writable buffers are unhashable; hash the content instead.
        return hash(self.raw)


Token = Union[Number, Symbol, Dictionary, Stream]
