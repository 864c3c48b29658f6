# --- src/dcsim_core/log_config.py ---
import logging
import sys
from typing import TextIO, Union

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"


def parse_log_level(level: Union[int, str]) -> int:
    """Maps a level name such as 'debug' or 'INFO' onto its logging constant."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO, stream: TextIO = None):
    """ Routes every DCSim Core logger through a single console handler. """
    numeric_level = parse_log_level(level)
    root_logger = logging.getLogger()

    # Replace whatever handlers an earlier call (or the host application) installed.
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.setLevel(numeric_level)
    root_logger.addHandler(console_handler)
    logging.getLogger(__name__).debug("Logging configured at level %s.", logging.getLevelName(numeric_level))
