"""
Logging configuration for the application.

Everything, SQL statements included, goes through one root handler
with a single format. Never logs request bodies, email addresses or secrets.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error")
SQL_LOGGER = "sqlalchemy.engine"


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """Configure the root handler and third-party logger levels.

    Engines are built without SQLAlchemy's own ``echo`` flag, which would
    attach a second handler and print every statement twice; statement
    logging is switched on here instead.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        sql_echo: Log each SQL statement at INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger(SQL_LOGGER).setLevel(logging.INFO if sql_echo else logging.WARNING)
