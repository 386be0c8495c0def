import logging
import logging.config
from typing import Optional

NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


def level_for_verbosity(verbose: int) -> str:
    """Map a ``-v`` count to a logging level name."""
    if verbose <= 0:
        return "WARNING"
    if verbose == 1:
        return "INFO"
    return "DEBUG"


def setup_logging(verbose: int = 0, log_level: Optional[str] = None) -> None:
    """
    Set up logging configuration.

    Logs go to stderr so that stdout only carries command output.

    Args:
        verbose: Number of ``-v`` flags given on the command line
        log_level: Explicit level name, used when ``verbose`` is 0
    """
    level = level_for_verbosity(verbose) if verbose or not log_level else log_level.upper()

    loggers = {
        "": {
            "handlers": ["console"],
            "level": level,
            "propagate": True,
        },
    }
    # -vvv lets the HTTP stack log at full detail too
    if verbose < 3:
        for name in NOISY_LOGGERS:
            loggers[name] = {"level": "WARNING"}

    log_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "standard",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": loggers,
    }

    logging.config.dictConfig(log_config)
