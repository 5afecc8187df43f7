# tests/test_logger_utils.py

import logging

import pytest

from intelligent_spellchecker.utils.logger_utils import ROOT_LOGGER, Log


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    Log.setup("WARNING")


def test_setup_writes_log_file(tmp_path):
    path = tmp_path / "logs" / "spellchecker.log"
    Log.setup("INFO", str(path))
    logging.getLogger(f"{ROOT_LOGGER}.tests").info("hello from the test")
    text = path.read_text(encoding="utf-8")
    assert "INFO" in text
    assert "hello from the test" in text


def test_setup_replaces_previous_handlers(tmp_path):
    Log.setup("INFO", str(tmp_path / "a.log"))
    Log.setup("INFO")
    assert len(logging.getLogger(ROOT_LOGGER).handlers) == 1


def test_time_block_measures_and_reports(caplog):
    with caplog.at_level("INFO", logger=ROOT_LOGGER):
        with Log.time_block("unit of work") as t:
            sum(range(1000))
    assert t.elapsed >= 0
    assert any("unit of work done" in r.getMessage() for r in caplog.records)


def test_metric(caplog):
    with caplog.at_level("INFO", logger=ROOT_LOGGER):
        Log.metric("words loaded", 42)
    assert any(r.getMessage() == "words loaded: 42" for r in caplog.records)
