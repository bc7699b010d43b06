"""Utility helpers for :mod:`pdfstreamx`."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from .exceptions import PDFReadError

_LOGGER = logging.getLogger("pdfstreamx")

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Return logger *name* writing to the current ``sys.stderr``.

    The first call attaches a stream handler; later calls point that handler
    at whatever ``sys.stderr`` is at the time, so the CLI keeps logging to
    the right stream when it is invoked repeatedly in one process.
    """

    logger = logging.getLogger(name)
    handlers = [handler for handler in logger.handlers if type(handler) is logging.StreamHandler]
    if not handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    for handler in handlers:
        handler.setStream(sys.stderr)
    if level is not None:
        logger.setLevel(level)
    return logger


def resolve_path(path: os.PathLike[str] | str) -> Path:
    """Resolve *path* into an absolute :class:`~pathlib.Path`."""

    if path is None:
        raise ValueError("Path must not be None")
    resolved = Path(path).expanduser().resolve()
    _LOGGER.debug("Resolved path '%s' to '%s'", path, resolved)
    return resolved


def read_pdf_bytes(path: os.PathLike[str] | str) -> bytes:
    """Load the whole of *path* into memory.

    The returned buffer backs every token produced from it, so callers keep it
    alive for as long as they hold on to ``Stream`` tokens.
    """

    source = resolve_path(path)
    try:
        data = source.read_bytes()
    except OSError as exc:
        raise PDFReadError(f"could not read file {path}: {exc.strerror or exc}") from exc
    _LOGGER.debug("Read %d bytes from %s", len(data), source)
    return data
