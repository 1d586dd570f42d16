import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

_installed_handlers: List[logging.Handler] = []


def setup_logger(name: str, log_dir: Optional[Union[str, Path]] = "logs",
                 level: int = logging.INFO) -> logging.Logger:
    """
    Set up logging to stdout and, if log_dir is given, to a timestamped file in it.

    The handlers go on the root logger so that module loggers (the search engine,
    the benchmarks) reach the same outputs as the returned logger.

    Args:
        name (str): Logger name, also used as the log file prefix.
        log_dir (Optional[Union[str, Path]]): Directory for the log file, None to skip the file.
        level (int): Logging level.

    Returns:
        logging.Logger: The logger for the given name.
    """
    reset_logging()
    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    _install(root, stream_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime('%d.%m.%Y_%H-%M-%S')
        file_handler = logging.FileHandler(log_dir / f"{name}_{timestamp}.log")
        file_handler.setFormatter(formatter)
        _install(root, file_handler)

    return logging.getLogger(name)


def _install(root: logging.Logger, handler: logging.Handler):
    root.addHandler(handler)
    _installed_handlers.append(handler)


def reset_logging():
    """ Remove and close the handlers added by setup_logger. """
    root = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.WARNING)
