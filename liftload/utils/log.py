import logging
import sys

from liftload.settings import settings

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# boto3 logs every request at DEBUG
QUIET_LOGGERS = ("botocore", "boto3", "urllib3", "s3transfer")


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Route everything to stdout and return the project logger.
    Safe to call again, e.g. from scripts that want a different level.
    """
    level = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=level, format=FORMAT, stream=sys.stdout, force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)

    project_logger = logging.getLogger(settings.PROJECT_NAME)
    project_logger.setLevel(level)
    project_logger.propagate = True
    return project_logger


logger = configure_logging()

logger.debug(f"Logger initialised level={logging.getLevelName(logger.level)}")
