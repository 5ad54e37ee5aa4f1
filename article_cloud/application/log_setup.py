# article_cloud/application/log_setup.py
import sys
from loguru import logger
from article_cloud.application.settings import get_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(debug: bool | None = None) -> None:
    """Configure Loguru once; failures go to stderr, everything else to stdout."""
    if debug is None:
        debug = get_settings().debug

    error_no = logger.level("ERROR").no

    logger.remove()  # remove default handler(s) to avoid duplicates on reload
    logger.add(
        sys.stdout,
        level="DEBUG" if debug else "INFO",
        format=LOG_FORMAT,
        filter=lambda record: record["level"].no < error_no,
        backtrace=False,
        diagnose=False,
    )
    logger.add(
        sys.stderr,
        level="ERROR",
        format=LOG_FORMAT,
        backtrace=debug,
        diagnose=False,
    )
