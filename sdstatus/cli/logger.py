import logging
import sys
from typing import List, Optional

LOG_FORMAT = '[%(name)s] %(levelname)s - %(message)s'
FILE_LOG_FORMAT = '%(asctime)s [%(name)s] %(levelname)s - %(message)s'

_installed: List[logging.Handler] = []


def configure_logging(loglevel: str = 'WARNING', logfile: Optional[str] = None) -> None:
    """
    Send logs to stderr (stdout carries the scan results)
    and optionally to a file. Safe to call more than once.
    """
    level = getattr(logging, loglevel.upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(level)
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    _installed.append(console)

    if logfile:
        file_handler = logging.FileHandler(logfile)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        _installed.append(file_handler)

    for handler in _installed:
        root.addHandler(handler)

    # connection-level chatter from requests
    logging.getLogger('urllib3').setLevel(logging.WARNING)
