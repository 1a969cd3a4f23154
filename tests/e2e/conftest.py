"""
Fixtures for browser-backed tests.

A tiny search site is served from a background HTTP server so scenarios run
without network access. Tests are skipped when Chromium cannot be launched.
"""

import dataclasses
import html
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlparse

import pytest
from playwright.sync_api import Error as PlaywrightError, sync_playwright

from search_scenario.browser import BrowserConfig, selenium_grid_environment

HOME_PAGE = """<!DOCTYPE html>
<html><head><title>Search</title></head>
<body>
  <form action="/search" method="get">
    <input type="text" name="q" autocomplete="off">
  </form>
</body></html>
"""

RESULTS_PAGE = """<!DOCTYPE html>
<html><head><title>{query} - Search</title></head>
<body><h3>Results for {query}</h3></body></html>
"""


class SearchSiteHandler(BaseHTTPRequestHandler):
    def do_GET(self):
        url = urlparse(self.path)
        if url.path == "/search":
            query = parse_qs(url.query).get("q", [""])[0]
            body = RESULTS_PAGE.format(query=html.escape(query))
        else:
            body = HOME_PAGE
        payload = body.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="session")
def search_site():
    """Base URL of the local search site."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), SearchSiteHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}/"
    server.shutdown()
    server.server_close()


@pytest.fixture(scope="session")
def browser_config():
    """Environment-resolved config; skips the test if Chromium won't start."""
    config = BrowserConfig.from_env()
    try:
        with selenium_grid_environment(None), sync_playwright() as p:
            p.chromium.launch(**config.launch_options()).close()
    except PlaywrightError as e:
        pytest.skip(f"Chromium not available: {e}")
    return config


@pytest.fixture
def e2e_config(browser_config, search_site):
    """Local-site config without remote endpoint or typing delay."""
    return dataclasses.replace(
        browser_config,
        home_url=search_site,
        remote_url=None,
        typing_delay_ms=0,
    )
