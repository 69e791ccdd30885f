"""Unit tests for the colored SearchLogger."""

import logging

import pytest

from docsearch.infrastructure.logging.colored_logger import SearchLogger, SearchStage


def test_timed_step_logs_details_on_start_and_completion(caplog):
    slog = SearchLogger("test.search")

    with caplog.at_level(logging.INFO, logger="test.search"):
        with slog.timed_step(SearchStage.RANK, "Ranking", candidates=3):
            pass

    assert len(caplog.records) == 2
    start, complete = (r.getMessage() for r in caplog.records)
    assert "[RANK]" in start and "candidates=3" in start
    assert "✓ Ranking" in complete and "candidates=3" in complete


def test_timed_step_logs_error_and_reraises(caplog):
    slog = SearchLogger("test.search")

    with caplog.at_level(logging.INFO, logger="test.search"):
        with pytest.raises(RuntimeError):
            with slog.timed_step(SearchStage.EMBED, "Embedding query"):
                raise RuntimeError("boom")

    error = caplog.records[-1]
    assert error.levelno == logging.ERROR
    assert "RuntimeError: boom" in error.getMessage()
