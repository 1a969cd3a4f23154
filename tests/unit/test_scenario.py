"""
Unit tests for the scenario entry points and run_scenario().

These use the real BrowserController with a fake Playwright so the
exactly-once release guarantee is checked end to end.
"""

import functools

import pytest
from playwright.sync_api import Error as PlaywrightError

from search_scenario.browser import BrowserConfig, BrowserController
from search_scenario.errors import SessionNotStartedError, SessionStartError
from search_scenario.scenario import SearchScenario, run_scenario


@pytest.fixture
def controller_factory(fake_playwright):
    return functools.partial(BrowserController, playwright_factory=fake_playwright)


@pytest.fixture
def scenario(config, controller_factory):
    scenario = SearchScenario(config, controller_factory=controller_factory)
    yield scenario
    scenario.after()


class TestEntryPoints:
    def test_steps_in_order(self, scenario, fake_playwright):
        fake_playwright.page.content.return_value = "results for selenium"

        scenario.given_homepage()
        scenario.when_search("selenium")
        assert scenario.then_results_contain("selenium") is True

        scenario.after()

        fake_playwright.browser.close.assert_called_once()
        assert scenario.controller is None
        assert scenario.session is None

    def test_search_before_homepage(self, scenario):
        with pytest.raises(SessionNotStartedError):
            scenario.when_search("selenium")

    def test_verify_before_homepage(self, scenario):
        with pytest.raises(SessionNotStartedError):
            scenario.then_results_contain("selenium")

    def test_after_without_session_is_noop(self, config):
        SearchScenario(config).after()

    def test_after_twice_releases_once(self, scenario, fake_playwright):
        scenario.given_homepage()

        scenario.after()
        scenario.after()

        fake_playwright.browser.close.assert_called_once()
        fake_playwright.pw.stop.assert_called_once()

    def test_resolves_config_from_environment(self, monkeypatch):
        monkeypatch.setenv("SLOW_MS", "25")
        monkeypatch.setenv("CHROME_BINARY", "/opt/chrome")

        scenario = SearchScenario()

        assert scenario.config.typing_delay_ms == 25
        assert scenario.config.binary_path == "/opt/chrome"


class TestRunScenario:
    def test_passes(self, config, controller_factory, fake_playwright):
        fake_playwright.page.content.return_value = "<div>selenium.dev</div>"

        assert run_scenario(
            "selenium", "selenium", config, controller_factory=controller_factory
        )
        fake_playwright.browser.close.assert_called_once()

    def test_assertion_failure_releases_once(
        self, config, controller_factory, fake_playwright
    ):
        fake_playwright.page.content.return_value = "<div>selenium.dev</div>"

        with pytest.raises(AssertionError, match="zzz-not-present-zzz"):
            run_scenario(
                "selenium",
                "zzz-not-present-zzz",
                config,
                controller_factory=controller_factory,
            )

        fake_playwright.browser.close.assert_called_once()
        fake_playwright.pw.stop.assert_called_once()

    def test_search_fault_releases_once(
        self, config, controller_factory, fake_playwright
    ):
        box = fake_playwright.page.locator.return_value.first
        box.fill.side_effect = PlaywrightError("element is not editable")

        with pytest.raises(PlaywrightError):
            run_scenario("selenium", "selenium", config, controller_factory=controller_factory)

        fake_playwright.browser.close.assert_called_once()

    def test_remote_refused_falls_back(
        self, controller_factory, fake_playwright, monkeypatch
    ):
        monkeypatch.setenv("SELENIUM_REMOTE_URL", "http://localhost:4444")
        chromium = fake_playwright.pw.chromium
        chromium.launch.side_effect = [
            PlaywrightError("ECONNREFUSED"),
            fake_playwright.browser,
        ]
        fake_playwright.page.content.return_value = "selenium"
        config = BrowserConfig.from_env(binary_candidates=[])

        assert run_scenario("selenium", "selenium", config, controller_factory=controller_factory)
        assert chromium.launch.call_count == 2
        fake_playwright.browser.close.assert_called_once()

    def test_no_browser_is_fatal(self, config, controller_factory, fake_playwright):
        fake_playwright.pw.chromium.launch.side_effect = PlaywrightError("no browser")

        with pytest.raises(SessionStartError):
            run_scenario("selenium", "selenium", config, controller_factory=controller_factory)

        fake_playwright.page.locator.assert_not_called()
