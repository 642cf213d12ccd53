"""
Product accessories dialog that may appear when adding an item to the cart
"""

import logging
from typing import List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from element_finder import By, ElementFinder, FrameworkError

logger = logging.getLogger(__name__)


class ProductAccessoriesDialog:
    """Dialog offering optional accessories for the product being added to the cart"""

    ACCESSORY_DROPDOWN_LOCATOR = By.xpath("//select[@name='accessories']")
    ADD_TO_CART_BUTTON_LOCATOR = By.xpath(
        "//div[@role='dialog'][@aria-modal='true']//button[text()='Add To Cart']")

    def __init__(self, page: Page, finder: Optional[ElementFinder] = None):
        self.page = page
        self.finder = finder or ElementFinder(page)

    def find_dropdowns(self) -> List[Locator]:
        """
        Accessory option dropdowns in the dialog, or [] if the dialog is not up.

        The timeout is kept short: the dialog is not expected to always be
        there, so the full timeout passes whenever it is absent.
        """
        return self.finder.find_clickable_elements(self.ACCESSORY_DROPDOWN_LOCATOR, 1, 2000, 250)

    def find_add_to_cart_button(self) -> Optional[Locator]:
        return self.finder.find_clickable_element(self.ADD_TO_CART_BUTTON_LOCATOR, 1000, 250)

    def try_selecting_options(self) -> bool:
        """
        Select an arbitrary option in each accessory dropdown and confirm.

        Returns:
            True if the dialog was found and its Add To Cart button clicked
        """
        try:
            dropdowns = self.find_dropdowns()
            for dropdown in dropdowns:
                dropdown.press("ArrowDown")
                dropdown.press("Enter")

            if dropdowns:
                button = self.finder.require(self.find_add_to_cart_button(),
                                             "Accessories Add To Cart button",
                                             self.ADD_TO_CART_BUTTON_LOCATOR)
                button.click()
                return True
        except (PlaywrightError, FrameworkError) as e:
            # the dialog may not even exist, so keep going
            logger.debug("Accessories dialog not handled: %s", e)

        return False
