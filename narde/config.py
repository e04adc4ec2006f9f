import logging
import sys

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the terminal game."""
    log_level = logging.DEBUG if debug else logging.WARNING
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logger.debug("Logging configured (debug=%s)", debug)
