"""
The header bar shared across store pages
"""

from typing import Optional
from playwright.sync_api import Locator, Page

from element_finder import By, ElementFinder


class StoreGlobalHeader:
    """
    The header bar used across multiple store pages. Contains common links
    and controls like the cart button showing the number of items in the cart.
    """

    CART_COUNT_LOCATOR = By.id("cartItemCountSpan")

    def __init__(self, page: Page, finder: Optional[ElementFinder] = None):
        self.page = page
        self.finder = finder or ElementFinder(page)

    def _find_cart_item_count_elem(self) -> Locator:
        element = self.finder.find_clickable_element(self.CART_COUNT_LOCATOR, 30000, 500)
        return self.finder.require(element, "Cart item count", self.CART_COUNT_LOCATOR)

    def find_cart_item_count(self) -> int:
        """Number of items in the cart as displayed in the header"""
        return int(self._find_cart_item_count_elem().inner_text().strip())

    def click_into_cart(self):
        self._find_cart_item_count_elem().click()
