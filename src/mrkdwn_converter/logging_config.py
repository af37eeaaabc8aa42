"""Structured JSON logging configuration.

Configures Python stdlib logging to emit JSON with GCP-compatible field names,
so directory lookup failures reported by the renderer arrive as structured
records (`severity`, `message`, plus any `extra` fields such as the Slack ID).

Usage:
    from mrkdwn_converter.logging_config import configure_logging
    configure_logging()
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "mrkdwn-converter",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def build_logging_config(level: str = "INFO") -> dict:
    """Return a copy of LOGGING_CONFIG with the root level set to ``level``."""
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = level.upper()
    return config


def configure_logging(level: str | None = None) -> None:
    """Apply structured JSON logging configuration.

    Call once at host application startup. When ``level`` is omitted the
    root level comes from ``Settings.log_level``.
    """
    if level is None:
        # Lazy import keeps this module usable before settings exist
        from mrkdwn_converter.config import get_settings

        level = get_settings().log_level
    logging.config.dictConfig(build_logging_config(level))
