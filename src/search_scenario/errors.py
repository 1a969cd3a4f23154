"""
Scenario error types.

Assertion failures are plain AssertionError so the test runner reports them
as failures rather than errors.
"""


class SearchScenarioError(Exception):
    """Base class for search scenario errors."""


class SessionStartError(SearchScenarioError):
    """Raised when no local browser session can be launched."""


class SessionNotStartedError(SearchScenarioError):
    """Raised when a step needs a browser session that was never created."""
