"""
Logging Setup

Log output for the search scenario goes to stderr so it never mixes with the
Rich step panels on stdout. What gets logged where:

    search_scenario.browser.controller  INFO     chosen Chrome binary, remote endpoint
                                        WARNING  remote endpoint unreachable, local fallback;
                                                 ignored SLOW_MS values
                                        DEBUG    release errors during teardown
    search_scenario.browser.session     DEBUG    cancelled typing delays
    search_scenario.scenario            DEBUG    session released

The level comes from LOG_LEVEL (default INFO). Playwright's own logger is
held at WARNING unless the scenario runs at DEBUG.

Usage:
    from search_scenario.config import configure_logging, get_logger

    configure_logging()
    logger = get_logger(__name__)
"""

import logging
import os
import sys
from typing import Mapping, Optional

PACKAGE_LOGGER = "search_scenario"

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s: %(message)s"

VALID_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Driver-side loggers that only matter when debugging a session
DRIVER_LOGGERS = ("playwright", "asyncio")


def get_log_level(env: Optional[Mapping[str, str]] = None) -> int:
    """
    Resolve LOG_LEVEL from an environment snapshot.

    Args:
        env: Environment snapshot (defaults to os.environ)

    Returns:
        Logging level constant; INFO when unset or not a level name
    """
    env = os.environ if env is None else env
    level_str = env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()

    if level_str not in VALID_LEVELS:
        print(
            f"Warning: Invalid LOG_LEVEL '{level_str}'. "
            f"Valid values: {', '.join(VALID_LEVELS.keys())}. "
            f"Using {DEFAULT_LOG_LEVEL}.",
            file=sys.stderr,
        )
        return VALID_LEVELS[DEFAULT_LOG_LEVEL]

    return VALID_LEVELS[level_str]


def configure_logging(
    level: Optional[int] = None,
    verbose: bool = False,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Configure logging for a scenario run.

    Called once by the CLI; pytest runs leave logging to pytest's own
    capture.

    Args:
        level: Override log level (default: LOG_LEVEL from env)
        verbose: Timestamped format with logger names
        env: Environment snapshot for LOG_LEVEL (defaults to os.environ)

    Returns:
        The level that was applied
    """
    if level is None:
        level = get_log_level(env)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT if verbose else LOG_FORMAT_SIMPLE,
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)

    driver_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in DRIVER_LOGGERS:
        logging.getLogger(name).setLevel(driver_level)

    return level


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module (typically __name__)."""
    return logging.getLogger(name)
