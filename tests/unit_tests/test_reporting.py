import logging

from bezierscore.reporting import reporting
from bezierscore.reporting.logging import print_environment, print_logo


def test_init_logging():
    reporting.init_logging(log_level=logging.WARNING)

    python_logger = logging.getLogger()

    assert python_logger.level == logging.WARNING
    assert len(python_logger.handlers) == 1
    assert isinstance(python_logger.handlers[0].formatter, reporting.DefaultFormatter)
    assert not python_logger.isEnabledFor(logging.PROGRESS)

    python_logger.handlers = []
    python_logger.setLevel(logging.INFO)


def test_default_formatter():
    record = logging.LogRecord("test", logging.PROGRESS, "", 0, "message", None, None)

    with_ansi = reporting.DefaultFormatter(use_ansi=True).format(record)
    without_ansi = reporting.DefaultFormatter(use_ansi=False).format(record)

    assert "PROGRESS: message" in with_ansi
    assert "\x1b[32;20m" in with_ansi
    assert without_ansi.endswith("PROGRESS: message")
    assert "\x1b[" not in without_ansi


def test_default_formatter_info_is_not_colored():
    record = logging.LogRecord("test", logging.INFO, "", 0, "message", None, None)

    formatted = reporting.DefaultFormatter(use_ansi=True).format(record)

    assert formatted.endswith("INFO: message")
    assert "\x1b[" not in formatted


def test_print_logo_and_environment(caplog):
    with caplog.at_level(logging.INFO):
        print_logo()
        print_environment()

    assert "version:" in caplog.text
    assert "numba" in caplog.text
    assert "numpy" in caplog.text
