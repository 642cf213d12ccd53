"""
Conditions for finding elements that can be clicked
"""

from typing import List, Optional
from playwright.sync_api import Locator

from ..base import ElementCondition, FinderContext
from .visibility import VisibilityOfAllElements, VisibilityOfElement


class ElementToBeClickable(ElementCondition):
    """First matching element, once it is both visible and enabled"""

    def __init__(self):
        super().__init__()
        self.visibility = VisibilityOfElement()

    def evaluate(self, context: FinderContext) -> Optional[Locator]:
        element = self.visibility.evaluate(context)
        if element is not None and element.is_enabled(timeout=context.check_timeout()):
            return element
        return None


class EnabledElements(ElementCondition):
    """
    Visible matching elements filtered down to the enabled ones.

    Only satisfied once at least `min_elements` are enabled. The latest
    enabled set is kept in `last_found` so a caller that times out can
    still use what was seen on the final poll.
    """

    def __init__(self, min_elements: int = 1):
        super().__init__()
        self.min_elements = min_elements
        self.visibility = VisibilityOfAllElements()
        self.last_found: List[Locator] = []

    def evaluate(self, context: FinderContext) -> Optional[List[Locator]]:
        elements = self.visibility.evaluate(context) or []
        self.last_found = [element for element in elements
                           if element.is_enabled(timeout=context.check_timeout())]

        if len(self.last_found) >= self.min_elements:
            return self.last_found
        return None
