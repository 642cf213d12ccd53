"""
Condition for elements present in the page, visible or not
"""

from typing import List, Optional
from playwright.sync_api import Locator

from ..base import ElementCondition, FinderContext


class PresenceOfAllElements(ElementCondition):
    """Every element matching the locator, as soon as there is at least one"""

    def evaluate(self, context: FinderContext) -> Optional[List[Locator]]:
        matches = context.query()
        count = matches.count()
        if count == 0:
            return None
        return [matches.nth(index) for index in range(count)]
