"""Inflate and summarize the streams found by :mod:`pdfstreamx.lexer`."""

from __future__ import annotations

import dataclasses
import logging
import os
import zlib
from typing import Iterator

from .exceptions import DecompressionError
from .lexer import iter_streams
from .tokens import Stream
from .utils import read_pdf_bytes

__all__ = [
    "DumpOptions",
    "StreamReport",
    "inflate_stream",
    "preview_stream",
    "describe_stream",
    "scan_buffer",
    "scan_file",
]

_LOGGER = logging.getLogger("pdfstreamx")

DEFAULT_SEPARATOR = "-" * 30
DEFAULT_PREVIEW_BYTES = 8


@dataclasses.dataclass(slots=True)
class DumpOptions:
    """Settings shared by :func:`scan_file` and the command line tool."""

    separator: str = DEFAULT_SEPARATOR
    preview_bytes: int = DEFAULT_PREVIEW_BYTES
    show_tokens: bool = False

    def __post_init__(self) -> None:
        if self.preview_bytes < 0:
            raise ValueError(f"preview_bytes must not be negative: {self.preview_bytes}")


@dataclasses.dataclass(slots=True)
class StreamReport:
    """Outcome of decoding one stream."""

    index: int
    offset: int
    raw_size: int
    text: str | None = None
    error: str | None = None
    preview: str | None = None
    preview_error: str | None = None

    @property
    def decoded(self) -> bool:
        return self.text is not None


def inflate_stream(data: bytes | memoryview) -> str:
    """Inflate zlib-compressed *data* and decode it as UTF-8.

    Anything following the end of the compressed stream is ignored.
    """

    decompressor = zlib.decompressobj()
    try:
        inflated = decompressor.decompress(data) + decompressor.flush()
    except zlib.error as exc:
        raise DecompressionError(f"corrupt deflate stream: {exc}") from exc
    if not decompressor.eof:
        raise DecompressionError("corrupt deflate stream: unexpected end of data")
    try:
        return inflated.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecompressionError(f"stream did not contain valid UTF-8: {exc}") from exc


def preview_stream(data: bytes | memoryview, size: int = DEFAULT_PREVIEW_BYTES) -> str:
    """Decode the first *size* bytes of *data* as UTF-8."""

    head = bytes(data[:size])
    try:
        return head.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecompressionError(f"stream preview is not valid UTF-8: {exc}") from exc


def describe_stream(stream: Stream, index: int, options: DumpOptions | None = None) -> StreamReport:
    options = options or DumpOptions()
    report = StreamReport(index=index, offset=stream.offset, raw_size=len(stream.data))
    try:
        report.text = inflate_stream(stream.data)
    except DecompressionError as exc:
        _LOGGER.debug("Stream %d at offset %d could not be inflated: %s", index, stream.offset, exc)
        report.error = str(exc)
        try:
            report.preview = preview_stream(stream.data, options.preview_bytes)
        except DecompressionError as preview_exc:
            report.preview_error = str(preview_exc)
    return report


def scan_buffer(
    buffer: bytes | bytearray | memoryview,
    options: DumpOptions | None = None,
) -> Iterator[StreamReport]:
    """Yield a :class:`StreamReport` for each stream of *buffer*.

    Tokenizer errors propagate once the reports before the failure have been
    yielded.
    """

    options = options or DumpOptions()
    for index, stream in enumerate(iter_streams(buffer)):
        yield describe_stream(stream, index, options)


def scan_file(path: str | os.PathLike[str], options: DumpOptions | None = None) -> list[StreamReport]:
    """Read *path* and return the reports of all of its streams."""

    data = read_pdf_bytes(path)
    reports = list(scan_buffer(data, options))
    _LOGGER.debug("Decoded %d of %d streams from %s", sum(r.decoded for r in reports), len(reports), path)
    return reports
