"""
Loggers for the awsimaging services and Lambda handlers.

Every logger lives under the ``awsimaging`` namespace and writes one line
per record to stdout, which Lambda forwards to CloudWatch Logs. Image
payloads and credentials are never passed to these loggers.
"""
import logging
import os
import sys

ROOT_LOGGER_NAME = 'awsimaging'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _level_from_env() -> int:
    # Unknown names fall back to INFO; Config.from_env rejects them earlier.
    return getattr(logging, os.environ.get('LOG_LEVEL', 'INFO').upper(), logging.INFO)


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a stdout logger for an awsimaging module.

    Args:
        name: Module name, usually ``__name__``. Names outside the package
            are nested under ``awsimaging``.

    Returns:
        Logger with a single stdout handler
    """
    if not name or name == ROOT_LOGGER_NAME:
        name = ROOT_LOGGER_NAME
    elif not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f'{ROOT_LOGGER_NAME}.{name}'

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(_level_from_env())
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def set_log_level(level: str) -> None:
    """
    Apply a log level to every awsimaging logger created so far.

    Args:
        level: Level name such as 'DEBUG' or 'INFO'
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and (
            name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + '.')
        ):
            logger.setLevel(numeric_level)
