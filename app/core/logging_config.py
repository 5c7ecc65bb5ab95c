"""
Logging setup - stdlib logging configured once per process.
Modules log through logging.getLogger(__name__).
"""

import logging.config


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
            },
            "handlers": {
                "console": {"class": "logging.StreamHandler", "formatter": "default"},
            },
            "loggers": {
                "app": {"handlers": ["console"], "level": level.upper(), "propagate": False},
            },
        }
    )
