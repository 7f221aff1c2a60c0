import logging
import logging.config
from pathlib import Path
from main.config import settings


def setup_logging(overrides=None):
    overrides = overrides or {}
    log_dir = Path(overrides.get("LOG_DIR", settings.LOG_DIR))
    log_level = overrides.get("LOG_LEVEL", settings.LOG_LEVEL)
    log_dir.mkdir(parents=True, exist_ok=True)

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
        },
        "handlers": {
            "console": {
                "level": log_level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
            "file": {
                "level": log_level,
                "class": "logging.FileHandler",
                "filename": log_dir / "market.log",
                "formatter": "standard",
            },
        },
        "loggers": {
            "": {
                "handlers": ["console", "file"],
                "level": log_level,
                "propagate": True,
            },
            "werkzeug": {
                "handlers": ["console", "file"],
                "level": "INFO",
                "propagate": False,
            },
            "sqlalchemy.engine": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(config)
