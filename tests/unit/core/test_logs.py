"""Tests for loguru sink configuration."""

from loguru import logger

from mdpick.core.logs import configure_logging


def test_warning_level_hides_debug(capsys):
    configure_logging("WARNING")

    logger.debug("hidden message")
    logger.warning("shown message")

    err = capsys.readouterr().err
    assert "hidden message" not in err
    assert "shown message" in err


def test_verbose_enables_debug(capsys):
    configure_logging("WARNING", verbose=True)

    logger.debug("debug message")

    assert "debug message" in capsys.readouterr().err
