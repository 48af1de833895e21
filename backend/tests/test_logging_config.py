import logging

import pytest

from jacks.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_ui_without_log_file_discards_records(restore_root_logger):
    setup_logging("debug", console=False)
    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert [type(h) for h in root.handlers] == [logging.NullHandler]


def test_log_file_receives_records(restore_root_logger, tmp_path):
    log_file = tmp_path / "jacks.log"
    setup_logging("INFO", log_file, console=False)
    logging.getLogger("jacks.test").info("Loaded %d strategies", 3)
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert "jacks.test: Loaded 3 strategies" in log_file.read_text(encoding="utf-8")


def test_unknown_level_is_rejected():
    with pytest.raises(ValueError, match="Unknown log level: loud"):
        setup_logging("loud")
