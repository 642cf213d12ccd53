"""
Element Finder - explicit polling waits over Playwright locators
"""

import logging
import time
from typing import Any, Dict, List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from .base import (
    DEFAULT_INTERVAL_MS,
    DEFAULT_TIMEOUT_MS,
    By,
    ElementCondition,
    FinderContext,
    SearchRoot,
)
from .conditions import (
    ElementToBeClickable,
    EnabledElements,
    PresenceOfAllElements,
    VisibilityOfAllElements,
    VisibilityOfElement,
)
from .exceptions import ElementNotFoundError, InvalidLocatorError

logger = logging.getLogger(__name__)


class ElementFinder:
    """
    Finds elements by polling a condition until it holds or a timeout expires.

    Lookups never raise on "not found": a single element lookup returns None
    and a multi-element lookup returns an empty list, so calling code can
    carry on and report results its own way.
    """

    def __init__(self, page: Page, default_timeout: int = DEFAULT_TIMEOUT_MS,
                 default_interval: int = DEFAULT_INTERVAL_MS, debug: bool = False):
        self.page = page
        self.default_timeout = default_timeout
        self.default_interval = default_interval
        self.debug = debug

        # Performance tracking
        self.performance_stats = {
            'total_searches': 0,
            'found': 0,
            'not_found': 0,
            'total_search_time': 0.0,
            'average_search_time': 0.0
        }

    def find_visible_element(self, locator: By, timeout: Optional[int] = None,
                             interval: Optional[int] = None,
                             parent: Optional[Locator] = None) -> Optional[Locator]:
        """
        Find a visible element, either in the page or within a parent element

        Args:
            locator: Locator to find the element with
            timeout: Maximum time to spend looking for the element (ms)
            interval: Polling interval between attempts (ms)
            parent: Element to search within. Child XPath locators must
                start with a period.

        Returns:
            The element if found, None otherwise
        """
        if parent is not None and locator.is_absolute_xpath:
            raise InvalidLocatorError(
                f"Locator '{locator}' must start with a period, because this "
                f"method is intended to search for child elements.")

        root = parent if parent is not None else self.page
        return self._wait_for(VisibilityOfElement(), root, locator, timeout, interval)

    def find_clickable_element(self, locator: By, timeout: Optional[int] = None,
                               interval: Optional[int] = None) -> Optional[Locator]:
        """Find a visible, enabled element; None if not found"""
        return self._wait_for(ElementToBeClickable(), self.page, locator, timeout, interval)

    def find_visible_elements(self, locator: By, timeout: Optional[int] = None,
                              interval: Optional[int] = None) -> List[Locator]:
        """Find all elements matching the locator once they are all visible; [] if not found"""
        return self._wait_for(VisibilityOfAllElements(), self.page, locator, timeout, interval) or []

    def find_clickable_elements(self, locator: By, min_elements: int = 1,
                                timeout: Optional[int] = None,
                                interval: Optional[int] = None) -> List[Locator]:
        """
        Look for enabled elements until at least `min_elements` are found or
        the timeout expires.

        Returns:
            The enabled elements found on the last attempt, possibly fewer
            than `min_elements`, or an empty list
        """
        condition = EnabledElements(min_elements)
        found = self._wait_for(condition, self.page, locator, timeout, interval)
        if found is None:
            return condition.last_found
        return found

    def count_elements(self, locator: By, timeout: Optional[int] = None,
                       interval: Optional[int] = None) -> int:
        """Count elements present in the page; 0 if none appear before the timeout"""
        elements = self._wait_for(PresenceOfAllElements(), self.page, locator, timeout, interval)
        return len(elements) if elements else 0

    def require(self, element: Optional[Locator], what: str, locator: Optional[By] = None) -> Locator:
        """Return the element, or raise ElementNotFoundError if the lookup came back empty"""
        if element is None:
            raise ElementNotFoundError(what, locator)
        return element

    def _wait_for(self, condition: ElementCondition, root: SearchRoot, locator: By,
                  timeout: Optional[int], interval: Optional[int]) -> Optional[Any]:
        """Poll the condition until it is satisfied or the timeout expires"""
        context = FinderContext(
            root=root,
            locator=locator,
            timeout=self.default_timeout if timeout is None else timeout,
            interval=self.default_interval if interval is None else interval,
            description=condition.name,
            debug=self.debug
        )

        start_time = time.monotonic()
        deadline = start_time + context.timeout / 1000.0
        context.deadline = deadline
        self.performance_stats['total_searches'] += 1

        if self.debug:
            logger.debug("Waiting for %s of '%s' (timeout=%dms, interval=%dms)",
                         condition.name, locator, context.timeout, context.interval)

        result = None
        while True:
            context.attempts += 1
            try:
                result = condition.evaluate(context)
            except PlaywrightError as e:
                # Not there yet, or detached while checking; keep polling
                if self.debug:
                    logger.debug("  → Attempt %d for '%s' failed: %s", context.attempts, locator, e)
                result = None

            if result is not None:
                break

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            time.sleep(min(context.interval / 1000.0, remaining))

        search_time = time.monotonic() - start_time
        self._update_performance_stats(search_time, result is not None)

        if self.debug:
            if result is not None:
                logger.debug("✓ Found '%s' in %.1fms (%d attempts)", locator, search_time * 1000, context.attempts)
            else:
                logger.debug("✗ '%s' not found after %.2fs", locator, search_time)

        return result

    def _update_performance_stats(self, duration: float, success: bool):
        """Update performance statistics"""
        stats = self.performance_stats
        if success:
            stats['found'] += 1
        else:
            stats['not_found'] += 1

        stats['total_search_time'] += duration
        stats['average_search_time'] = stats['total_search_time'] / stats['total_searches']

    def get_performance_stats(self) -> Dict[str, Any]:
        """Get a copy of the search statistics, with the success rate"""
        stats = self.performance_stats.copy()
        if stats['total_searches'] > 0:
            stats['success_rate'] = stats['found'] / stats['total_searches']
        else:
            stats['success_rate'] = 0.0
        return stats

    def reset_stats(self):
        """Reset performance statistics"""
        self.performance_stats = {
            'total_searches': 0,
            'found': 0,
            'not_found': 0,
            'total_search_time': 0.0,
            'average_search_time': 0.0
        }
