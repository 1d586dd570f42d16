import logging

import pytest

from general_search import search
from utils import reset_logging, setup_logger


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    reset_logging()


def _read_log(log_dir, prefix):
    for handler in logging.getLogger().handlers:
        handler.flush()
    log_files = list(log_dir.glob(f"{prefix}_*.log"))
    assert len(log_files) == 1
    return log_files[0].read_text()


def test_setup_logger_writes_file(tmp_path):
    logger = setup_logger("test_run", log_dir=tmp_path / "logs")
    logger.info("hello")

    assert "INFO - hello" in _read_log(tmp_path / "logs", "test_run")


def test_setup_logger_without_file():
    logger = setup_logger("test_console", log_dir=None, level=logging.DEBUG)

    assert logger.getEffectiveLevel() == logging.DEBUG
    assert not any(isinstance(handler, logging.FileHandler)
                   for handler in logging.getLogger().handlers)


def test_engine_debug_lines_reach_the_log_file(tmp_path):
    setup_logger("test_engine", log_dir=tmp_path, level=logging.DEBUG)
    graph = {"s": [("g", 4)]}

    assert search("s", lambda s: s == "g", lambda s: graph.get(s, [])) == 4

    contents = _read_log(tmp_path, "test_engine")
    assert "DEBUG - Starting search from 's'" in contents
    assert "DEBUG - Goal reached with cost 4" in contents


def test_setup_logger_twice_keeps_one_set_of_handlers(tmp_path):
    before = len(logging.getLogger().handlers)
    setup_logger("first", log_dir=tmp_path)
    setup_logger("second", log_dir=tmp_path)

    assert len(logging.getLogger().handlers) == before + 2
