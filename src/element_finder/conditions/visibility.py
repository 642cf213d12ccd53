"""
Conditions for finding visible elements
"""

from typing import List, Optional
from playwright.sync_api import Locator

from ..base import ElementCondition, FinderContext


class VisibilityOfElement(ElementCondition):
    """First element matching the locator, once it is visible"""

    def evaluate(self, context: FinderContext) -> Optional[Locator]:
        matches = context.query()
        if matches.count() == 0:
            return None

        element = matches.first
        if element.is_visible():
            return element
        return None


class VisibilityOfAllElements(ElementCondition):
    """All elements matching the locator, once every one of them is visible"""

    def evaluate(self, context: FinderContext) -> Optional[List[Locator]]:
        matches = context.query()
        count = matches.count()
        if count == 0:
            return None

        elements = [matches.nth(index) for index in range(count)]
        for element in elements:
            if not element.is_visible():
                return None
        return elements
