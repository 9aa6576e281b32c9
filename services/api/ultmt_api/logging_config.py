import logging
import os
from logging.handlers import TimedRotatingFileHandler

from ultmt_api.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_dir:
        os.makedirs(settings.log_dir, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            os.path.join(settings.log_dir, "ultmt.log"),
            when="midnight",
            backupCount=settings.log_retention_days,
            encoding="utf-8",
            utc=True,
        )
        file_handler.suffix = "%Y-%m-%d"
        handlers.append(file_handler)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
