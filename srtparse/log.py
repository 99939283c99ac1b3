"""Logging setup for srtparse — stdlib only."""

import logging
import os

LOG_FORMAT = '%(asctime)s %(levelname)-8s %(name)s - %(message)s'


def setup_logging(level='INFO', log_file=None, stream=None):
    """Configure the 'srtparse' logger.

    A console handler is attached once; later calls only adjust the level
    and add a file handler for ``log_file`` if none writes there yet.
    ``level`` may be a name ('debug', 'INFO') or a logging constant.
    """
    logger = logging.getLogger('srtparse')
    fmt = logging.Formatter(LOG_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        ch = logging.StreamHandler(stream)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    if log_file:
        log_path = os.path.abspath(log_file)
        if log_path not in {getattr(h, 'baseFilename', None) for h in logger.handlers}:
            fh = logging.FileHandler(log_path, encoding='utf-8')
            fh.setFormatter(fmt)
            logger.addHandler(fh)

    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


def get_logger(name):
    """Return a logger under the 'srtparse' namespace."""
    if name == 'srtparse' or name.startswith('srtparse.'):
        return logging.getLogger(name)
    return logging.getLogger(f'srtparse.{name}')
