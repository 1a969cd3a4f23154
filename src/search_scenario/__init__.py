"""
Search Scenario

Behaviour-driven browser search check built on Playwright.
"""

from .browser import BrowserConfig, BrowserController, SearchSession
from .errors import SearchScenarioError, SessionNotStartedError, SessionStartError
from .scenario import SearchScenario, run_scenario

__version__ = "0.1.0"

__all__ = [
    "BrowserConfig",
    "BrowserController",
    "SearchSession",
    "SearchScenario",
    "run_scenario",
    "SearchScenarioError",
    "SessionNotStartedError",
    "SessionStartError",
]
