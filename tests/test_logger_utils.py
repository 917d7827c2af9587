# tests/test_logger_utils.py
import logging

import pytest

from emoji_predictor.utils.logger_utils import Log, setup_logging


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers = handlers
    root.setLevel(level)


def test_time_block_logs_duration(caplog):
    with caplog.at_level(logging.INFO, logger="emoji_predictor"):
        with Log.time_block("word query") as t:
            sum(range(1000))
    assert t.elapsed >= 0.0
    assert "word query done" in caplog.text


def test_setup_logging_writes_file(tmp_path, restore_root_logging):
    log_path = tmp_path / "logs" / "emoji.log"
    setup_logging("info", str(log_path))
    logging.getLogger("emoji_predictor.test").info("hello from test")
    assert "hello from test" in log_path.read_text(encoding="utf-8")
    assert logging.getLogger().level == logging.INFO


def test_setup_logging_unknown_level_falls_back(restore_root_logging):
    setup_logging("chatty")
    assert logging.getLogger().level == logging.WARNING
