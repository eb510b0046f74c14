"""
Centralized logging configuration for Podcast Downloader.

All modules obtain their logger through setup_logging(), which applies a
single dictConfig() configuration the first time it is called. Console
output goes to stderr so that it never mixes with the episode menu or the
progress bar written to stdout.
"""

import logging
import logging.config
import sys
from pathlib import Path
from typing import Optional
from podcast_downloader import config

# Track if logging has been configured to avoid reconfiguration
_logging_configured = False


def _get_logging_config() -> dict:
    """
    Build logging configuration dictionary.

    Returns:
    dict: Logging configuration for dictConfig()
    """
    log_level = getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING)

    logging_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'detailed': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            }
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': log_level,
                'formatter': 'standard',
                'stream': sys.stderr
            }
        },
        'loggers': {
            'podcast_downloader': {
                'level': log_level,
                'handlers': ['console'],
                'propagate': False
            }
        }
    }

    if config.LOG_FILE:
        try:
            log_path = Path(config.LOG_FILE)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            logging_config['handlers']['file'] = {
                'class': 'logging.FileHandler',
                'level': log_level,
                'formatter': 'detailed',
                'filename': config.LOG_FILE,
                'mode': 'a',
                'encoding': 'utf-8'
            }
            logging_config['loggers']['podcast_downloader']['handlers'].append('file')
        except OSError as e:
            # If file logging fails, log to console only
            print(f"Warning: Could not set up file logging to {config.LOG_FILE}: {e}", file=sys.stderr)

    return logging_config


def configure_logging() -> None:
    """
    Configure logging for the entire application.

    Safe to call repeatedly; only the first call has an effect.
    """
    global _logging_configured

    if _logging_configured:
        return

    logging.config.dictConfig(_get_logging_config())
    _logging_configured = True


def setup_logging(logger_name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger under the podcast_downloader namespace, configuring
    logging first if needed.

    Parameters:
    logger_name: Name of the logger (typically __name__). If None, returns
        the package logger.

    Returns:
    logging.Logger: Configured logger instance

    Example:
        >>> from podcast_downloader.logging_config import setup_logging
        >>> logger = setup_logging(__name__)
        >>> logger.warning("This will be logged")
    """
    configure_logging()

    if not logger_name:
        logger_name = 'podcast_downloader'
    elif not logger_name.startswith('podcast_downloader'):
        logger_name = f'podcast_downloader.{logger_name}'

    return logging.getLogger(logger_name)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Convenience alias for setup_logging()."""
    return setup_logging(name)
