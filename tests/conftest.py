"""Pytest configuration and Playwright test doubles for the unit tests."""

from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

from element_finder import ElementFinder


def _make_element(visible: bool = True, enabled: bool = True, text: str = "", **attributes) -> MagicMock:
    element = MagicMock(name=f"element<{text}>")
    element.is_visible.return_value = visible
    element.is_enabled.return_value = enabled
    element.inner_text.return_value = text
    element.get_attribute.side_effect = lambda name: attributes.get(name.replace("-", "_"))
    return element


def _make_matches(elements: List[MagicMock]) -> MagicMock:
    """Stand-in for a Playwright Locator matching the given elements"""
    matches = MagicMock(name="matches")
    matches.count.return_value = len(elements)
    matches.first = elements[0] if elements else _make_element(visible=False)
    matches.nth.side_effect = lambda index: elements[index]
    return matches


class StubFinder(ElementFinder):
    """ElementFinder that answers lookups from a table instead of polling a browser"""

    def __init__(self):
        super().__init__(page=MagicMock(name="page"), default_timeout=0, default_interval=0)
        self.results: Dict[Any, Any] = {}
        self.lookups: List[tuple] = []

    def _wait_for(self, condition, root, locator, timeout, interval):
        self.lookups.append((condition.name, locator, root, timeout, interval))
        result = self.results.get(locator)
        if callable(result) and not isinstance(result, MagicMock):
            result = result(root)
        return result


@pytest.fixture
def make_element():
    """Factory for fake elements: make_element(visible, enabled, text, **attributes)"""
    return _make_element


@pytest.fixture
def page_elements() -> Dict[str, List[MagicMock]]:
    """Selector -> matching elements, read by `fake_page` on every query"""
    return {}


@pytest.fixture
def fake_page(page_elements):
    """A Playwright Page double whose locator() answers from `page_elements`"""
    page = MagicMock(name="page")
    page.locator.side_effect = lambda selector: _make_matches(page_elements.get(selector, []))
    return page


@pytest.fixture
def make_matches():
    return _make_matches


@pytest.fixture
def stub_finder() -> StubFinder:
    return StubFinder()
