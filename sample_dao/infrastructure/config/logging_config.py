"""Standard library logging setup."""

import logging
import sys

from sample_dao.infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings.

    Called once at startup. SQL statement echo stays under the
    db_echo setting; the sqlalchemy.engine logger is left alone.
    """
    logging.basicConfig(
        format=LOG_FORMAT,
        stream=sys.stdout,
        level=getattr(logging, settings.log_level, logging.INFO),
    )
