import logging

import pytest

from homatrix import BoundsError, Matrix
from homatrix.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, get_log_level
from homatrix.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("homatrix")
    saved_level = logger.level
    saved_handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


@pytest.mark.parametrize(
    "raw, level",
    [("", DEFAULT_LOG_LEVEL), ("debug", logging.DEBUG), ("INFO", logging.INFO), ("15", 15), ("nonsense", DEFAULT_LOG_LEVEL)],
)
def test_get_log_level(monkeypatch, raw, level):
    monkeypatch.setenv(LOG_LEVEL_ENV, raw)
    assert get_log_level() == level


def test_setup_logging_does_not_duplicate_handlers(package_logger):
    setup_logging(level=logging.DEBUG)
    setup_logging(level=logging.DEBUG)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_setup_logging_returns_package_logger(package_logger):
    assert setup_logging(level=logging.WARNING) is package_logger


def test_setup_logging_uses_environment(monkeypatch, package_logger):
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
    setup_logging()
    assert package_logger.level == logging.ERROR


def test_setup_logging_writes_file(tmp_path, package_logger):
    log_file = tmp_path / "homatrix.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))
    assert len(package_logger.handlers) == 2
    for handler in package_logger.handlers:
        handler.flush()
    assert "Logging initialized." in log_file.read_text(encoding="utf-8")


def test_bounds_errors_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="homatrix"):
        with pytest.raises(BoundsError):
            Matrix.origin().col(1)
    assert "out of range" in caplog.text
