from __future__ import annotations

import io
import logging

import pytest

from pdfstreamx.utils import get_logger, resolve_path


@pytest.fixture()
def scratch_logger():
    name = "pdfstreamx.tests.scratch"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def test_get_logger_attaches_single_handler(scratch_logger: str) -> None:
    logger = get_logger(scratch_logger, logging.INFO)
    assert get_logger(scratch_logger) is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert not logger.propagate


def test_get_logger_follows_current_stderr(scratch_logger: str, monkeypatch: pytest.MonkeyPatch) -> None:
    first = io.StringIO()
    monkeypatch.setattr("sys.stderr", first)
    get_logger(scratch_logger, logging.INFO).info("one")

    second = io.StringIO()
    monkeypatch.setattr("sys.stderr", second)
    get_logger(scratch_logger).info("two")

    assert "one" in first.getvalue()
    assert "two" not in first.getvalue()
    assert "two" in second.getvalue()


def test_resolve_path_rejects_none() -> None:
    with pytest.raises(ValueError):
        resolve_path(None)
