"""structlog setup for string_input_validator.

Modules take their logger from get_logger(__name__); the CLI calls
setup_logging() once at startup so events go through the stdlib handlers.
"""

import logging
import sys

import structlog

from string_input_validator.config import get_settings


def get_logger(name: str | None = None):
    """Return a structlog logger in the string_input_validator namespace.

    Module names already inside the package are used as they are; anything
    else is nested under the package name.
    """
    if name is None:
        return structlog.get_logger("string_input_validator")
    if name.startswith("string_input_validator"):
        return structlog.get_logger(name)
    return structlog.get_logger(f"string_input_validator.{name}")


def setup_third_party_logging(debug_all: bool = False):
    """Cap loggers outside the package at WARNING unless debug_all is set."""
    if debug_all:
        return

    for log_name in list(logging.Logger.manager.loggerDict):
        if not log_name.startswith("string_input_validator"):
            logging.getLogger(log_name).setLevel(logging.WARNING)


def format_context(logger, method_name, event_dict):
    """Append key=value pairs of the bound context to the event text."""
    excluded = {"level", "timestamp", "logger", "stack", "exc_info", "event"}
    context = " ".join(f"{k}={v}" for k, v in event_dict.items() if k not in excluded)

    event = event_dict.get("event", "")
    event_dict["event"] = f"{event} [{context}]" if context else event

    return event_dict


def setup_logging() -> None:
    """Route structlog through stdlib logging with levels from LoggingSettings.

    DEBUG_ALL lowers the root logger to DEBUG and leaves third-party loggers
    alone; LOG_LEVEL sets the level of the string_input_validator logger.
    """
    settings = get_settings().logging

    root_level = "DEBUG" if settings.debug_all else "WARNING"
    logging.basicConfig(
        stream=sys.stderr,
        level=root_level,
        format="%(levelname)s:%(name)s: %(message)s",
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            format_context,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    setup_third_party_logging(settings.debug_all)

    logging.getLogger("string_input_validator").setLevel(settings.log_level)
