"""
Shared fixtures.

Step output is sent to an in-memory Rich console so test logs stay clean
and assertions can inspect what was printed.
"""

import io
from unittest.mock import MagicMock

import pytest
from dotenv import load_dotenv
from rich.console import Console

from search_scenario.browser import BrowserConfig
from search_scenario.tui import TUIConfig, create_console, set_console

load_dotenv()


@pytest.fixture(autouse=True)
def quiet_console():
    """Install a buffered console as the global console."""
    buffer = io.StringIO()
    console = create_console(
        TUIConfig(show_timestamps=False),
        Console(file=buffer, width=100, color_system=None),
    )
    set_console(console)
    yield console
    set_console(None)


@pytest.fixture
def config():
    """Headless local configuration with no binary probing."""
    return BrowserConfig(home_url="http://search.test/")


@pytest.fixture
def fake_playwright():
    """
    A sync_playwright() stand-in.

    The returned factory is passed as playwright_factory; fake.pw is the
    started Playwright object, fake.page the page the controller ends up with.
    """
    factory = MagicMock(name="sync_playwright")
    pw = factory.return_value.start.return_value
    factory.pw = pw
    factory.browser = pw.chromium.launch.return_value
    factory.page = factory.browser.new_context.return_value.new_page.return_value
    return factory
