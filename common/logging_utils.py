# common/logging_utils.py

"""Logging helpers shared by the dashboard, the dataset service and the charts."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Send log records to stdout at `level`; unknown level names mean INFO."""
    # Streamlit re-executes main_app.py on every interaction, so only the
    # first call installs a handler.
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given name (typically __name__)."""
    return logging.getLogger(name)
