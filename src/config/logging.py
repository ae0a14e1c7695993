import logging
import sys
from logging import StreamHandler

from src.config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Provider clients log every request at INFO, including recipient details
NOISY_LOGGERS = ("httpx", "twilio.http_client")


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[StreamHandler(sys.stdout)],
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if not settings.LOG_DB:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
