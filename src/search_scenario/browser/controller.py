"""
Browser Controller

Resolves the browser configuration from the environment and owns the
Playwright browser session for one scenario: local or remote acquisition,
navigation to the search homepage, and release on every exit path.
"""

import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, Mapping, Optional, Sequence

from playwright.sync_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
    sync_playwright,
)

from ..config import get_logger
from ..errors import SessionNotStartedError, SessionStartError
from ..tui import ScenarioConsole, print_navigation

logger = get_logger(__name__)

# Read by the Playwright driver itself: when set, every launch() goes to this
# Selenium Grid hub instead of starting a local browser
GRID_ENV_VAR = "SELENIUM_REMOTE_URL"

DEFAULT_HOME_URL = "https://www.google.com"

# Fixed wait after submitting a search before reading the page source
DEFAULT_SETTLE_MS = 1500

# Probed in order when CHROME_BINARY is not set
CHROME_BINARY_CANDIDATES: tuple[str, ...] = (
    "/usr/bin/google-chrome-stable",
    "/usr/bin/google-chrome",
    "/usr/bin/chrome",
    "/usr/bin/chromium-browser",
    "/usr/bin/chromium",
)

# Flags for unattended runs in containers and CI
UNATTENDED_ARGS: tuple[str, ...] = (
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--disable-software-rasterizer",
    "--remote-allow-origins=*",
)


def find_executable(candidates: Sequence[str]) -> Optional[str]:
    """
    Return the first candidate path that exists and is executable.

    Args:
        candidates: Paths to probe, in priority order

    Returns:
        Matching path, or None when nothing matches
    """
    for candidate in candidates:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
    return None


def parse_headless(value: Optional[str]) -> bool:
    """Only "false" (any case) and "0" turn headless mode off."""
    if value is None:
        return True
    return value.lower() != "false" and value != "0"


def parse_delay_ms(value: Optional[str]) -> int:
    """Parse a per-character delay; garbage and negatives mean no delay."""
    if value is None:
        return 0
    try:
        delay = int(value.strip())
    except ValueError:
        logger.warning(f"Ignoring non-integer SLOW_MS value: {value!r}")
        return 0
    return max(delay, 0)


def _non_blank(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


@contextmanager
def selenium_grid_environment(grid_url: Optional[str]) -> Iterator[None]:
    """
    Set or clear SELENIUM_REMOTE_URL while a Playwright driver is started.

    The driver inherits the process environment when it is spawned, so this
    decides whether its launches go to a Selenium Grid hub or start locally.
    The previous value is restored on exit.
    """
    previous = os.environ.pop(GRID_ENV_VAR, None)
    if grid_url:
        os.environ[GRID_ENV_VAR] = grid_url
    try:
        yield
    finally:
        os.environ.pop(GRID_ENV_VAR, None)
        if previous is not None:
            os.environ[GRID_ENV_VAR] = previous


@dataclass
class BrowserConfig:
    """
    Configuration for one scenario's browser session.

    Built once per scenario by from_env(); steps never read the
    environment themselves.
    """

    # Explicit browser executable (None lets Playwright use its own build)
    binary_path: Optional[str] = None

    headless: bool = True

    # Remote automation endpoint (ws:// Playwright server or Selenium Grid hub URL)
    remote_url: Optional[str] = None

    # Per-character typing delay; 0 fills the query at once
    typing_delay_ms: int = 0

    home_url: str = DEFAULT_HOME_URL

    settle_ms: int = DEFAULT_SETTLE_MS

    window_width: int = 1920
    window_height: int = 1080

    binary_candidates: tuple[str, ...] = field(
        default_factory=lambda: CHROME_BINARY_CANDIDATES
    )

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        binary_candidates: Sequence[str] = CHROME_BINARY_CANDIDATES,
    ) -> "BrowserConfig":
        """
        Create BrowserConfig from an environment snapshot.

        Environment variables:
            CHROME_BINARY: absolute path to the browser executable
            HEADLESS: "false" or "0" shows the browser (default: headless)
            SELENIUM_REMOTE_URL: remote automation endpoint
            SLOW_MS: per-character typing delay in ms (default: 0)
            SEARCH_HOME_URL: search homepage (default: https://www.google.com)

        Args:
            env: Mapping to read from (defaults to os.environ)
            binary_candidates: Paths probed when CHROME_BINARY is unset
        """
        env = os.environ if env is None else env
        candidates = tuple(binary_candidates)

        binary_path = _non_blank(env.get("CHROME_BINARY"))
        if binary_path is None:
            binary_path = find_executable(candidates)

        if binary_path:
            logger.info(f"Using Chrome binary: {binary_path}")
        else:
            logger.info(
                "No Chrome binary found in common paths; "
                "relying on driver-managed binary."
            )

        return cls(
            binary_path=binary_path,
            headless=parse_headless(env.get("HEADLESS")),
            remote_url=_non_blank(env.get("SELENIUM_REMOTE_URL")),
            typing_delay_ms=parse_delay_ms(env.get("SLOW_MS")),
            home_url=_non_blank(env.get("SEARCH_HOME_URL")) or DEFAULT_HOME_URL,
            binary_candidates=candidates,
        )

    @property
    def launch_args(self) -> list[str]:
        """Chromium command-line flags for the session."""
        return [
            *UNATTENDED_ARGS,
            f"--window-size={self.window_width},{self.window_height}",
        ]

    def launch_options(self, local: bool = True) -> dict:
        """
        Keyword arguments for BrowserType.launch().

        Args:
            local: Include the local executable path (False for a grid launch)
        """
        options = {
            "headless": self.headless,
            "args": self.launch_args,
        }
        if local and self.binary_path:
            options["executable_path"] = self.binary_path
        return options


class BrowserController:
    """
    Owns the Playwright browser session for one scenario.

    The session is acquired by start() and released by close(); close() is
    safe to call any number of times and releases at most once.

    Usage:
        >>> with BrowserController(BrowserConfig.from_env()) as page:
        ...     print(page.title())
    """

    def __init__(
        self,
        config: Optional[BrowserConfig] = None,
        *,
        console: Optional[ScenarioConsole] = None,
        playwright_factory: Callable = sync_playwright,
    ):
        """
        Initialize browser controller.

        Args:
            config: Browser configuration (uses env if None)
            console: Console for step output (global console if None)
            playwright_factory: Returns a Playwright context manager
        """
        self.config = config or BrowserConfig.from_env()
        self.console = console
        self._playwright_factory = playwright_factory

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None
        self.is_remote = False

    @property
    def is_active(self) -> bool:
        """Check if a browser session is currently held."""
        return self._browser is not None

    @property
    def page(self) -> Page:
        """The session's page, positioned at the homepage after start()."""
        if self._page is None:
            raise SessionNotStartedError("Browser session has not been started")
        return self._page

    def start(self) -> Page:
        """
        Acquire a browser session and open the search homepage.

        Returns:
            The live page

        Raises:
            SessionStartError: If the local browser cannot be launched
        """
        if self._page is not None:
            return self._page

        try:
            self._browser = self._acquire_browser()
            self._context = self._browser.new_context(
                viewport={
                    "width": self.config.window_width,
                    "height": self.config.window_height,
                },
            )
            self._page = self._context.new_page()

            print_navigation(self.config.home_url, console=self.console)
            self._page.goto(self.config.home_url)
        except BaseException:
            self.close()
            raise

        return self._page

    def _start_driver(self, grid_url: Optional[str] = None) -> Playwright:
        """Start a Playwright driver, routing launches to grid_url if given."""
        with selenium_grid_environment(grid_url):
            self._playwright = self._playwright_factory().start()
        return self._playwright

    def _stop_driver(self) -> None:
        playwright, self._playwright = self._playwright, None
        if playwright is None:
            return
        try:
            playwright.stop()
        except Exception as e:
            logger.debug(f"Error stopping driver: {e}")

    def _acquire_browser(self) -> Browser:
        """Connect to the remote endpoint if configured, else launch locally."""
        if self.config.remote_url:
            browser = self._connect_remote(self.config.remote_url)
            if browser is not None:
                self.is_remote = True
                return browser

        try:
            chromium = self._start_driver().chromium
            return chromium.launch(**self.config.launch_options())
        except (PlaywrightError, OSError) as e:
            raise SessionStartError(f"Failed to launch local browser: {e}") from e

    def _connect_remote(self, url: str) -> Optional[Browser]:
        """
        Open a browser on the remote endpoint, or None when it is unreachable.

        ws:// and wss:// URLs are Playwright servers; anything else is treated
        as a Selenium Grid hub and driven through Playwright's grid support.
        The driver used for a failed attempt is stopped so the local launch
        starts from a driver that knows nothing about the grid.
        """
        logger.info(f"Using remote browser endpoint: {url}")
        try:
            if url.startswith(("ws://", "wss://")):
                return self._start_driver().chromium.connect(url)
            chromium = self._start_driver(grid_url=url).chromium
            return chromium.launch(**self.config.launch_options(local=False))
        except (PlaywrightError, OSError, ValueError) as e:
            logger.warning(f"Failed to connect to remote browser at {url}: {e}")
            self._stop_driver()
            return None

    def close(self) -> None:
        """Release the browser session; a no-op when nothing is held."""
        page, self._page = self._page, None
        context, self._context = self._context, None
        browser, self._browser = self._browser, None

        for name, resource in (
            ("page", page),
            ("context", context),
            ("browser", browser),
        ):
            if resource is None:
                continue
            try:
                resource.close()
            except Exception as e:
                logger.debug(f"Error releasing {name}: {e}")

        self._stop_driver()
        self.is_remote = False

    def __enter__(self) -> Page:
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def create_browser(
    config: Optional[BrowserConfig] = None,
    console: Optional[ScenarioConsole] = None,
) -> BrowserController:
    """
    Factory function to create a browser controller (not yet started).

    Args:
        config: Browser configuration (uses env if None)
        console: Console for step output
    """
    return BrowserController(config, console=console)
