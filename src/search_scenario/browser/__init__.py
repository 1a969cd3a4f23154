"""
Browser Module

Playwright session management and search-page interactions.
"""

from .controller import (
    BrowserConfig,
    BrowserController,
    CHROME_BINARY_CANDIDATES,
    create_browser,
    find_executable,
    selenium_grid_environment,
)
from .session import SEARCH_INPUT_SELECTOR, SearchSession

__all__ = [
    "BrowserConfig",
    "BrowserController",
    "CHROME_BINARY_CANDIDATES",
    "create_browser",
    "find_executable",
    "selenium_grid_environment",
    "SEARCH_INPUT_SELECTOR",
    "SearchSession",
]
