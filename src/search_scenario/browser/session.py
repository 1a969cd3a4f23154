"""
Search Session

Drives the search page of a started browser session: typing and
submitting a query, then checking the results page for expected text.
"""

import threading
from typing import Optional

from playwright.sync_api import Locator, Page

from ..config import get_logger
from ..tui import ScenarioConsole, print_error, print_interaction, print_result
from .controller import BrowserConfig

logger = get_logger(__name__)

# The query input on the search homepage is identified by name="q"
SEARCH_INPUT_SELECTOR = '[name="q"]'


class SearchSession:
    """
    Search interactions against one page.

    Per-character typing waits stop early on Ctrl-C (KeyboardInterrupt during
    a wait) or when another thread calls cancel(); the remaining characters
    are then typed without delay and the search still goes through.
    """

    def __init__(
        self,
        page: Page,
        config: BrowserConfig,
        *,
        console: Optional[ScenarioConsole] = None,
    ):
        self.page = page
        self.config = config
        self.console = console
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        """True once a typing wait has been asked to stop."""
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """
        Stop any current and future typing delays.

        For callers outside the typing loop, such as a watchdog thread or a
        signal handler; an interrupt during a wait calls this itself.
        """
        self._cancelled.set()

    def search_box(self) -> Locator:
        return self.page.locator(SEARCH_INPUT_SELECTOR).first

    def search(self, query: str) -> None:
        """
        Enter the query in the search box and submit it.

        Args:
            query: Text to search for
        """
        box = self.search_box()
        delay_ms = self.config.typing_delay_ms

        print_interaction(
            SEARCH_INPUT_SELECTOR, "type", value=query, console=self.console
        )
        if delay_ms > 0:
            for char in query:
                box.press_sequentially(char)
                self._pause(delay_ms)
        else:
            box.fill(query)

        print_interaction(SEARCH_INPUT_SELECTOR, "submit", console=self.console)
        box.press("Enter")

    def _pause(self, delay_ms: int) -> None:
        if self._cancelled.is_set():
            return
        try:
            interrupted = self._cancelled.wait(delay_ms / 1000)
        except KeyboardInterrupt:
            self.cancel()
            interrupted = True
        if interrupted:
            logger.debug("Typing delay cancelled; sending remaining input at once")

    def verify(self, expected: str) -> bool:
        """
        Check that the results page contains the expected text.

        Waits a fixed settle interval, then searches the page source for a
        literal substring match.

        Args:
            expected: Text that must appear in the page source

        Returns:
            True when the text is present

        Raises:
            AssertionError: If the text is not in the page source
        """
        self.page.wait_for_timeout(self.config.settle_ms)
        source = self.page.content()

        if expected not in source:
            message = f"Expected page to contain: {expected}"
            print_error(message, error_type="assertion", console=self.console)
            raise AssertionError(message)

        print_result(f"Page contains {expected!r}", console=self.console)
        return True
