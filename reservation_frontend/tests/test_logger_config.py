import sys

from loguru import logger

from reservation_frontend.app.core.logger_config import configure_logging


def test_configure_logging_filters_by_level(capsys):
    try:
        configure_logging("warning")
        logger.info("hidden")
        logger.warning("Failed to fetch reservations: {}", "HTTP error! status: 500")
    finally:
        logger.remove()
        logger.add(sys.stderr)

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "WARNING" in out
    assert "Failed to fetch reservations: HTTP error! status: 500" in out
