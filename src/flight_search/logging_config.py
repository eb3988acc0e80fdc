"""
Logging setup shared by the API and the command line entry point.
"""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure console logging on the root logger.

    Does nothing if the root logger already has handlers (e.g. when running
    under uvicorn or pytest), so it is safe to call more than once.

    Args:
        level: Logging level as an int or a name such as "DEBUG".
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
    )
