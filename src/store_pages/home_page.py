"""
Page model for the store home page, including product search results
"""

import logging
from typing import List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from element_finder import By, ElementFinder, ElementNotFoundError, FrameworkError

from . import config
from .accessories_dialog import ProductAccessoriesDialog
from .global_header import StoreGlobalHeader

logger = logging.getLogger(__name__)


class StoreHomePage:
    """Page model for the store home page and its search results"""

    SEARCH_BUTTON_LOCATOR = By.xpath("//button[text()='Search']")
    SEARCH_TEXTBOX_LOCATOR = By.id("searchval")
    GRIDVIEW_BUTTON_LOCATOR = By.xpath("//button[@aria-label='Switch to Grid view']")
    LISTVIEW_BUTTON_LOCATOR = By.xpath("//button[@aria-label='Switch to List view']")
    SEARCH_RESULT_BOX_LOCATOR = By.id("ProductBoxContainer")
    SEARCH_RESULT_LINK_LOCATOR = By.xpath(".//a[@data-testid='itemDescription']")
    SEARCH_RESULT_CART_BUTTON_LOCATOR = By.xpath(".//input[@name='addToCartButton']")
    ADDED_TO_CART_CLOSE_BUTTON_LOCATOR = By.xpath(
        "//div[@class='notification__content']/../button[@class='close']")
    PAGINATION_ITEMS_XPATH = "//nav[@aria-label='pagination']/ul/li"

    def __init__(self, page: Page, environment: str, finder: Optional[ElementFinder] = None):
        """
        Args:
            page: Playwright page to automate
            environment: Testing environment, "production" for example
            finder: Element finder to share with other page objects
        """
        self.page = page
        self.environment = environment
        self.finder = finder or ElementFinder(page)
        self.global_menu = StoreGlobalHeader(page, self.finder)
        self.accessories_dialog = ProductAccessoriesDialog(page, self.finder)

        # Incremented each time the next page is clicked; 0 until a search is made
        self.page_number = 0

    def build_url(self) -> str:
        """Base URL of the store for the testing environment"""
        if config.BASE_URL_OVERRIDE:
            return config.BASE_URL_OVERRIDE

        lowered = self.environment.lower()
        for key, url in config.ENVIRONMENT_URLS.items():
            if key in lowered:
                return url

        raise ValueError(f"Environment '{self.environment}' is not valid or not implemented.")

    def go(self):
        self.page.goto(self.build_url())

    def find_cart_item_count(self) -> int:
        return self.global_menu.find_cart_item_count()

    # Search

    def _find_search_text_box(self) -> Optional[Locator]:
        return self.finder.find_clickable_element(self.SEARCH_TEXTBOX_LOCATOR, 30000, 500)

    def _find_search_button(self) -> Optional[Locator]:
        return self.finder.find_clickable_element(self.SEARCH_BUTTON_LOCATOR, 5000, 250)

    def search_products(self, search_text: str):
        """Enter text in the search box and click the Search button"""
        search_box = self.finder.require(self._find_search_text_box(), "Search box",
                                         self.SEARCH_TEXTBOX_LOCATOR)
        search_box.click()
        search_box.fill(search_text)
        self.finder.require(self._find_search_button(), "Search button",
                            self.SEARCH_BUTTON_LOCATOR).click()
        self.page_number = 1

    def set_results_layout(self, layout_option: str):
        """Switch the search results to 'grid' or 'list' layout"""
        if "list" in layout_option.lower():
            locator, what = self.LISTVIEW_BUTTON_LOCATOR, "List view button"
        else:
            locator, what = self.GRIDVIEW_BUTTON_LOCATOR, "Grid view button"

        button = self.finder.find_visible_element(locator, 10000, 250)
        self.finder.require(button, what, locator).click()

    # Result items

    def find_all_result_item_boxes(self) -> List[Locator]:
        """Parent boxes of every search result on this page, or [] if none are found"""
        return self.finder.find_visible_elements(self.SEARCH_RESULT_BOX_LOCATOR, 30000, 500)

    def _find_link_in_item_box(self, parent_box: Locator) -> Optional[Locator]:
        return self.finder.find_visible_element(self.SEARCH_RESULT_LINK_LOCATOR, 5000, 100, parent=parent_box)

    def find_link_text_in_item_box(self, parent_box: Optional[Locator]) -> str:
        """
        Text of the product link in a result box, which is the product description.

        Never raises; a placeholder describing the error is returned instead.
        """
        try:
            if parent_box is None:
                raise ElementNotFoundError("Result item box")
            link = self.finder.require(self._find_link_in_item_box(parent_box), "Item description link",
                                       self.SEARCH_RESULT_LINK_LOCATOR)
            return link.inner_text()
        except (PlaywrightError, FrameworkError) as e:
            return f"[Unable to get link text (Error='{e}')]"

    def item_link_contains(self, parent_box: Locator, contained_text: str, ignore_case: bool = True) -> bool:
        """Check whether the product description in a result box contains the text"""
        item_box_text = self.find_link_text_in_item_box(parent_box)
        if ignore_case:
            contained_text = contained_text.lower()
            item_box_text = item_box_text.lower()

        return contained_text in item_box_text

    def find_result_item_box_by_description(self, description: str) -> Optional[Locator]:
        """The result box on this page whose product description is exactly `description`, or None"""
        for box in self.find_all_result_item_boxes():
            if self.find_link_text_in_item_box(box) == description:
                return box
        return None

    def _find_add_to_cart_button_in_item_box(self, parent_box: Locator) -> Optional[Locator]:
        return self.finder.find_visible_element(self.SEARCH_RESULT_CART_BUTTON_LOCATOR, 5000, 100,
                                                parent=parent_box)

    def _click_add_to_cart_button_in_item_box(self, parent_box: Locator):
        button = self._find_add_to_cart_button_in_item_box(parent_box)
        self.finder.require(button, "Add to Cart button", self.SEARCH_RESULT_CART_BUTTON_LOCATOR).click()

    def add_item_in_box_to_cart(self, parent_box: Locator, allow_accessories: bool) -> bool:
        """
        Add a search result to the cart with its Add to Cart button.

        Args:
            parent_box: The result's containing box
            allow_accessories: Handle the accessories prompt by picking
                arbitrary options

        Returns:
            True if the cart count in the header increased
        """
        try:
            cart_count_before = self.find_cart_item_count()
            self._click_add_to_cart_button_in_item_box(parent_box)

            if allow_accessories:
                self.try_selecting_accessories_dialog_options()

            return self.cart_count_increased(cart_count_before)
        except (PlaywrightError, FrameworkError, ValueError) as e:
            logger.debug("Adding item to the cart failed: %s", e)
            return False

    def cart_count_increased(self, items_previously_in_cart: int) -> bool:
        return self.find_cart_item_count() > items_previously_in_cart

    # Pagination

    def _find_nav_next_page_button(self) -> Optional[Locator]:
        """The next-page button on the right side of the page navigation control"""
        item_count = self.finder.count_elements(By.xpath(self.PAGINATION_ITEMS_XPATH), 30000, 500)
        page_right_button_index = item_count - 1
        if page_right_button_index < 1:
            return None

        return self.finder.find_visible_element(
            By.xpath(f"{self.PAGINATION_ITEMS_XPATH}[{page_right_button_index}]"), 15000, 500)

    def _next_page_button_state(self) -> Optional[str]:
        """
        The next-page button's aria-disabled value: "" if it has none, or
        None if there is no page navigation control.

        Raises:
            PlaywrightError: If the button could not be read
        """
        button = self._find_nav_next_page_button()
        if button is None:
            return None
        return button.get_attribute("aria-disabled") or ""

    def nav_page_right_is_disabled(self) -> bool:
        """True only if the next-page button is found and marked disabled"""
        try:
            return self._next_page_button_state() == "true"
        except PlaywrightError as e:
            logger.debug("Could not read the next-page button state: %s", e)
            return False

    def is_last_page(self) -> bool:
        """
        True if the next-page button is disabled, or if there is no page
        navigation control at all (a single page of results).
        """
        try:
            return self._next_page_button_state() in (None, "true")
        except PlaywrightError as e:
            logger.debug("Could not read the next-page button state: %s", e)
            return False

    def go_to_next_page(self) -> bool:
        """
        Click the next-page button unless this is the last page.

        Returns:
            True if the next-page button was clicked
        """
        if self.is_last_page():
            return False

        button = self.finder.require(self._find_nav_next_page_button(), "Next page button")
        button.click()
        self.page_number += 1
        return True

    # Cart

    def click_into_cart(self):
        self.global_menu.click_into_cart()

    def _find_added_to_your_cart_close_button(self) -> Optional[Locator]:
        # Short timeout: the notification is brief and often already gone
        return self.finder.find_clickable_element(self.ADDED_TO_CART_CLOSE_BUTTON_LOCATOR, 3000, 250)

    def try_click_added_to_your_cart_close_button(self) -> bool:
        """Close the "... added to your cart" notification if it is still up"""
        try:
            button = self._find_added_to_your_cart_close_button()
            if button is None:
                return False
            button.click()
            return True
        except PlaywrightError as e:
            logger.debug("Could not close the added-to-cart notification: %s", e)
            return False

    def try_selecting_accessories_dialog_options(self) -> bool:
        return self.accessories_dialog.try_selecting_options()
