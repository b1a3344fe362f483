import logging.config
from typing import Final, Optional

from cyclecursor.core.util.defs import PACKAGE_NAME

DEFAULT_LOGGING_CONFIG: Final[dict] = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '[%(asctime)s] %(name)s: %(message)s',
        }
    },
    'handlers': {
        'default': {
            'class': 'logging.StreamHandler',
            'level': 'DEBUG',
            'formatter': 'simple',
            'stream': 'ext://sys.stdout',
        }
    },
    'loggers': {
        PACKAGE_NAME: {
            'level': 'DEBUG',
            'handlers': ['default'],
            'propagate': False,
        }
    }
}

def apply_default_config(level: Optional[str] = None) -> None:
    """
    Applies the default logging configuration to the package logger. Loggers outside the package are left untouched.
    :param level: A level name overriding the default ``DEBUG`` level of the package logger (optional).
    """
    config = DEFAULT_LOGGING_CONFIG
    if level is not None:
        config = {**config, 'loggers': {PACKAGE_NAME: {**config['loggers'][PACKAGE_NAME], 'level': level}}}
    logging.config.dictConfig(config)
