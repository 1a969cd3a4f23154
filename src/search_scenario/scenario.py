"""
Search Scenario

The four entry points a BDD runner drives for one scenario (given, when,
then, after) and run_scenario() for running the same sequence directly.
"""

from typing import Callable, Optional

from .browser import BrowserConfig, BrowserController, SearchSession
from .config import get_logger
from .errors import SessionNotStartedError
from .tui import ScenarioConsole

logger = get_logger(__name__)


class SearchScenario:
    """
    One search scenario: configure, open homepage, search, verify, tear down.

    The configuration is resolved once when the scenario is created. after()
    must be called on every exit path; it is a no-op when given_homepage()
    never acquired a session.
    """

    def __init__(
        self,
        config: Optional[BrowserConfig] = None,
        *,
        console: Optional[ScenarioConsole] = None,
        controller_factory: Callable[..., BrowserController] = BrowserController,
    ):
        self.config = config or BrowserConfig.from_env()
        self.console = console
        self._controller_factory = controller_factory
        self.controller: Optional[BrowserController] = None
        self.session: Optional[SearchSession] = None

    def given_homepage(self) -> None:
        """Start the browser session on the search homepage."""
        self.controller = self._controller_factory(self.config, console=self.console)
        page = self.controller.start()
        self.session = SearchSession(page, self.config, console=self.console)

    def when_search(self, query: str) -> None:
        self._require_session().search(query)

    def then_results_contain(self, expected: str) -> bool:
        return self._require_session().verify(expected)

    def after(self) -> None:
        """Release the browser session if one was created."""
        controller, self.controller = self.controller, None
        self.session = None
        if controller is not None:
            controller.close()
            logger.debug("Browser session released")

    def _require_session(self) -> SearchSession:
        if self.session is None:
            raise SessionNotStartedError(
                "No browser session; the homepage step has not run"
            )
        return self.session


def run_scenario(
    query: str,
    expected: str,
    config: Optional[BrowserConfig] = None,
    **kwargs,
) -> bool:
    """
    Run a complete search scenario with guaranteed teardown.

    Args:
        query: Text to search for
        expected: Text the results page must contain
        config: Browser configuration (uses env if None)
        **kwargs: Passed to SearchScenario

    Returns:
        True when the results page contains the expected text

    Raises:
        AssertionError: If the expected text is missing
        SessionStartError: If no browser could be launched
    """
    scenario = SearchScenario(config, **kwargs)
    try:
        scenario.given_homepage()
        scenario.when_search(query)
        return scenario.then_results_contain(expected)
    finally:
        scenario.after()
