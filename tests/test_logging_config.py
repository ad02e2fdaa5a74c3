import logging

import pytest

from fuego_admin.logging_config import setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("fuego_admin")
    saved = list(logger.handlers)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved


def test_writes_to_rotating_file(tmp_path, clean_logger):
    log_file = tmp_path / "logs" / "admin.log"

    logger = setup_logging(str(log_file))
    logging.getLogger("fuego_admin.store").info("fetch_reservations ok")
    for handler in logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "fuego_admin.store - INFO - fetch_reservations ok" in content


def test_is_idempotent(tmp_path, clean_logger):
    setup_logging(str(tmp_path / "a.log"))
    setup_logging(str(tmp_path / "b.log"))

    assert len(clean_logger.handlers) == 1


def test_debug_lowers_file_level(tmp_path, clean_logger):
    setup_logging(str(tmp_path / "a.log"), debug=True)

    assert clean_logger.handlers[0].level == logging.DEBUG
