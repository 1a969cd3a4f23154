#!/usr/bin/env python
"""
Watch a Search Example

Runs the search scenario in a visible browser, typing slowly enough to
follow along.

Usage:
    python examples/watch_search.py [query]

Requirements:
    - Chromium available (CHROME_BINARY or `playwright install chromium`)
    - search-scenario installed: pip install -e .
"""

import dataclasses
import sys

from search_scenario import BrowserConfig, run_scenario
from search_scenario.config import configure_logging


def main():
    """Search for the given query and check the results mention it."""
    configure_logging()
    query = sys.argv[1] if len(sys.argv) > 1 else "selenium"

    config = dataclasses.replace(
        BrowserConfig.from_env(),
        headless=False,
        typing_delay_ms=120,
    )

    run_scenario(query, query, config)


if __name__ == "__main__":
    main()
