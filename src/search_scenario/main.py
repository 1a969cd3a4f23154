"""
Search Scenario CLI Entry Point

Runs one search scenario outside the BDD runner.

Usage:
    python -m search_scenario.main selenium
    python -m search_scenario.main "python docs" --expect docs.python.org --headed
"""

import argparse
import dataclasses
import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from search_scenario.browser import BrowserConfig
from search_scenario.config import configure_logging
from search_scenario.errors import SessionStartError
from search_scenario.scenario import run_scenario
from search_scenario.tui import print_error, print_result

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_NO_BROWSER = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Search the web from a real browser and check the results page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    search-scenario selenium
    search-scenario "pytest bdd" --expect pytest-bdd --slow-ms 80 --headed
        """,
    )

    parser.add_argument("query", help="Text to search for")

    parser.add_argument(
        "--expect", "-e",
        default=None,
        help="Text the results page must contain (default: the query)",
    )

    parser.add_argument(
        "--home-url", "-u",
        default=None,
        help="Search homepage (default: SEARCH_HOME_URL or https://www.google.com)",
    )

    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )

    parser.add_argument(
        "--slow-ms",
        type=int,
        default=None,
        help="Per-character typing delay in milliseconds",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging with timestamps",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> BrowserConfig:
    """Resolve configuration from the environment, then apply CLI overrides."""
    config = BrowserConfig.from_env()
    overrides = {}
    if args.home_url:
        overrides["home_url"] = args.home_url
    if args.headed:
        overrides["headless"] = False
    if args.slow_ms is not None:
        overrides["typing_delay_ms"] = max(args.slow_ms, 0)
    return dataclasses.replace(config, **overrides)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the scenario and return a process exit code."""
    load_dotenv()
    args = parse_args(argv)

    if args.verbose:
        configure_logging(level=logging.DEBUG, verbose=True)
    else:
        configure_logging()

    expected = args.expect if args.expect is not None else args.query

    try:
        run_scenario(args.query, expected, build_config(args))
    except SessionStartError as e:
        print_error(
            str(e),
            error_type="browser",
            suggestion="Set CHROME_BINARY or run `playwright install chromium`.",
        )
        return EXIT_NO_BROWSER
    except AssertionError:
        return EXIT_FAILED

    print_result("Scenario passed", title="[SCENARIO]")
    return EXIT_PASSED


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
