import logging.config
import os

# Check if we're in test mode
IS_TESTING = os.getenv("TESTING", "false").lower() == "true"

LOG_LEVEL = os.getenv("LONGMAP_LOG_LEVEL", "INFO").upper()

TEST_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(levelname)s - %(message)s',
        }
    },
    'handlers': {
        'null': {
            'class': 'logging.NullHandler',
            'level': 'DEBUG'
        }
    },
    'loggers': {
        'longmap': {
            'level': 'DEBUG',
            'handlers': ['null'],  # Use null handler to suppress logs during tests
            'propagate': False
        }
    }
}

DEFAULT_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s: %(message)s',
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'DEBUG',
            'formatter': 'simple',
            'stream': 'ext://sys.stdout'
        }
    },
    'loggers': {
        'longmap': {
            'level': LOG_LEVEL,
            'handlers': ['console'],
            'propagate': False
        }
    }
}

LOGGING = TEST_LOGGING if IS_TESTING else DEFAULT_LOGGING


def configure_logging(config=None):
    """Apply the logging configuration for the 'longmap' logger.

    Importing the library never touches logging; applications call this
    once at startup if they want the library's events on stdout.
    """
    logging.config.dictConfig(config or LOGGING)
