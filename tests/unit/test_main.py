"""
Unit tests for the command-line entry point.
"""

from unittest.mock import patch

import pytest

from search_scenario import main as cli
from search_scenario.errors import SessionStartError


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch.object(cli, "configure_logging"):
        yield


@pytest.fixture
def run():
    with patch.object(cli, "run_scenario", return_value=True) as run:
        yield run


class TestMain:
    def test_pass_exit_code(self, run):
        assert cli.main(["selenium"]) == cli.EXIT_PASSED

        query, expected, config = run.call_args.args
        assert query == "selenium"
        assert expected == "selenium"

    def test_expect_overrides_query(self, run):
        cli.main(["pytest bdd", "--expect", "pytest-bdd"])

        assert run.call_args.args[:2] == ("pytest bdd", "pytest-bdd")

    def test_assertion_failure_exit_code(self, run):
        run.side_effect = AssertionError("Expected page to contain: x")

        assert cli.main(["selenium", "-e", "x"]) == cli.EXIT_FAILED

    def test_no_browser_exit_code(self, run):
        run.side_effect = SessionStartError("Failed to launch local browser")

        assert cli.main(["selenium"]) == cli.EXIT_NO_BROWSER


class TestBuildConfig:
    def test_overrides(self, monkeypatch):
        monkeypatch.delenv("HEADLESS", raising=False)
        args = cli.parse_args(
            ["q", "--headed", "--slow-ms", "40", "--home-url", "http://localhost:8080/"]
        )

        config = cli.build_config(args)

        assert config.headless is False
        assert config.typing_delay_ms == 40
        assert config.home_url == "http://localhost:8080/"

    def test_environment_kept_without_flags(self, monkeypatch):
        monkeypatch.setenv("SLOW_MS", "15")

        config = cli.build_config(cli.parse_args(["q"]))

        assert config.typing_delay_ms == 15

    def test_negative_slow_ms_clamped(self):
        config = cli.build_config(cli.parse_args(["q", "--slow-ms=-3"]))

        assert config.typing_delay_ms == 0
