import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(*, level: Optional[str] = None) -> None:
    """Configure root logging once; later calls only adjust the level."""

    if level is None:
        level = os.getenv("TICTACTOE_LOG_LEVEL", "INFO")
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root_logger.setLevel(level)
