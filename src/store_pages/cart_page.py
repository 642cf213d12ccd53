"""
Page model for the standard cart page
"""

import logging
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from element_finder import By, ElementFinder, FrameworkError

from .global_header import StoreGlobalHeader

logger = logging.getLogger(__name__)


class CartPage:
    """Page model for the standard cart page"""

    MAIN_EMPTY_CART_BUTTON_LOCATOR = By.link_text("Empty Cart")
    EMPTY_CART_CONFIRM_BUTTON_LOCATOR = By.xpath("//button[text()='Empty Cart']")
    CART_EMPTY_TEXT_LOCATOR = By.xpath("//*[text()='Your cart is empty.']")

    def __init__(self, page: Page, finder: Optional[ElementFinder] = None):
        self.page = page
        self.finder = finder or ElementFinder(page)
        self.global_menu = StoreGlobalHeader(page, self.finder)

    def _find_item_description_in_cart(self, item_description: str) -> Optional[Locator]:
        # TODO: find by product number where the cart exposes it
        return self.finder.find_clickable_element(By.link_text(item_description), 10000, 250)

    def item_with_description_is_in_cart(self, item_description: str) -> bool:
        """Check for an item whose link text is the given description"""
        return self._find_item_description_in_cart(item_description) is not None

    def _find_empty_cart_button_on_main_cart_page(self) -> Optional[Locator]:
        return self.finder.find_clickable_element(self.MAIN_EMPTY_CART_BUTTON_LOCATOR, 10000, 250)

    def _find_empty_cart_confirmation_button(self) -> Optional[Locator]:
        return self.finder.find_clickable_element(self.EMPTY_CART_CONFIRM_BUTTON_LOCATOR, 10000, 250)

    def empty_cart(self) -> bool:
        """
        Empty the cart with the Empty Cart button, then the Empty Cart button
        in the confirmation dialog.

        Returns:
            True if both clicks worked, "Your cart is empty." is displayed
            and the cart count in the header is zero
        """
        try:
            self.finder.require(self._find_empty_cart_button_on_main_cart_page(), "Empty Cart button",
                                self.MAIN_EMPTY_CART_BUTTON_LOCATOR).click()
            self.finder.require(self._find_empty_cart_confirmation_button(), "Empty Cart confirmation button",
                                self.EMPTY_CART_CONFIRM_BUTTON_LOCATOR).click()
            success = True
        except (PlaywrightError, FrameworkError) as e:
            logger.debug("Emptying the cart failed: %s", e)
            success = False

        success = self.your_cart_is_empty_header_is_found() and success

        try:
            success = self.global_menu.find_cart_item_count() == 0 and success
        except (PlaywrightError, FrameworkError, ValueError) as e:
            logger.debug("Could not read the cart count: %s", e)
            success = False

        return success

    def _find_your_cart_is_empty_header(self) -> Optional[Locator]:
        return self.finder.find_visible_element(self.CART_EMPTY_TEXT_LOCATOR, 10000, 250)

    def your_cart_is_empty_header_is_found(self) -> bool:
        """Check for the large "Your cart is empty." text"""
        return self._find_your_cart_is_empty_header() is not None
