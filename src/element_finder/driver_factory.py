"""
Creates browser sessions to run tests with different browsers and options.

Browser-specific launch logic is kept in this module so the page objects
and tests never need to know which engine is driving them.
"""

import logging
from typing import Optional

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright
from playwright.sync_api import Error as PlaywrightError

from .exceptions import BrowserSetupError

logger = logging.getLogger(__name__)

# Substring of the requested browser name -> (Playwright engine, channel)
BROWSER_ENGINES = [
    ('firefox', ('firefox', None)),
    ('webkit', ('webkit', None)),
    ('safari', ('webkit', None)),
    ('edge', ('chromium', 'msedge')),
    ('chrom', ('chromium', None)),
]

MAXIMIZED_VIEWPORT = {'width': 1920, 'height': 1080}


def resolve_browser(browser_name: Optional[str]):
    """Map a browser name such as 'chrome' or 'Firefox' to (engine, channel)"""
    if browser_name:
        lowered = browser_name.lower()
        for key, engine in BROWSER_ENGINES:
            if key in lowered:
                return engine

    raise ValueError(
        f"Browser name '{browser_name}' is not a valid browser name, or is not handled by this method")


class BrowserSession:
    """One Playwright browser, context and page, started and stopped together"""

    def __init__(self, browser_name: str, maximize: bool = False, headless: bool = False,
                 slow_mo: int = 0, default_timeout: int = 30000):
        self.browser_name = browser_name
        self.engine, self.channel = resolve_browser(browser_name)
        self.maximize = maximize
        self.headless = headless
        self.slow_mo = slow_mo
        self.default_timeout = default_timeout

        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None

    def start(self) -> Page:
        """Launch the browser and open a page"""
        launch_args = []
        context_options = {}

        if self.maximize:
            if self.engine == 'chromium' and not self.headless:
                launch_args.append('--start-maximized')
                context_options['no_viewport'] = True
            else:
                context_options['viewport'] = MAXIMIZED_VIEWPORT

        launch_options = {'headless': self.headless, 'slow_mo': self.slow_mo, 'args': launch_args}
        if self.channel:
            launch_options['channel'] = self.channel

        try:
            self.playwright = sync_playwright().start()
            browser_type = getattr(self.playwright, self.engine)
            self.browser = browser_type.launch(**launch_options)
            self.context = self.browser.new_context(**context_options)
            self.page = self.context.new_page()
            self.page.set_default_timeout(self.default_timeout)
        except PlaywrightError as e:
            self.close()
            raise BrowserSetupError(f"Could not start {self.browser_name} ({self.engine}): {e}") from e

        logger.info("Started %s (engine=%s, maximized=%s, headless=%s)",
                    self.browser_name, self.engine, self.maximize, self.headless)
        return self.page

    def close(self):
        """Close the page, browser and Playwright driver; errors are logged, never raised"""
        try:
            if self.context is not None:
                self.context.close()
            if self.browser is not None:
                self.browser.close()
        except PlaywrightError as e:
            logger.debug("Error closing browser session: %s", e)
        finally:
            if self.playwright is not None:
                try:
                    self.playwright.stop()
                except PlaywrightError as e:
                    logger.debug("Error stopping Playwright: %s", e)
            self.playwright = None
            self.browser = None
            self.context = None
            self.page = None

    def __enter__(self) -> "BrowserSession":
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False


def create_session(browser_name: str, maximize: bool = False, headless: bool = False,
                   **options) -> BrowserSession:
    """
    Create and start a browser session.

    Args:
        browser_name: Name of the browser to create a session for
        maximize: Maximize the browser window when it starts
        headless: Run in headless mode

    Returns:
        A started BrowserSession
    """
    session = BrowserSession(browser_name, maximize=maximize, headless=headless, **options)
    session.start()
    return session
