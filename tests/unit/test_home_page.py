"""Unit tests for the store home page object.

Tests cover:
- URL building per environment, and the base URL override
- Search and results layout selection
- Result item text checks
- Adding an item to the cart, with and without accessories
- Pagination and the last-page check
- The added-to-cart notification
"""

from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError

from element_finder import By, ElementNotFoundError
from store_pages import StoreHomePage, StoreGlobalHeader, config

PAGINATION = StoreHomePage.PAGINATION_ITEMS_XPATH


@pytest.fixture(autouse=True)
def no_base_url_override(monkeypatch):
    monkeypatch.setattr(config, "BASE_URL_OVERRIDE", None)


@pytest.fixture
def home_page(stub_finder):
    return StoreHomePage(MagicMock(name="page"), "production", stub_finder)


class TestBuildUrl:
    """Tests for environment URLs."""

    @pytest.mark.parametrize("environment", ["production", "Prod", "PRODUCTION-us"])
    def test_production(self, stub_finder, environment):
        page = StoreHomePage(MagicMock(), environment, stub_finder)
        assert page.build_url() == config.PRODUCTION_URL

    def test_unknown_environment_raises(self, stub_finder):
        page = StoreHomePage(MagicMock(), "staging", stub_finder)
        with pytest.raises(ValueError, match="Environment 'staging' is not valid"):
            page.build_url()

    def test_base_url_override(self, stub_finder, monkeypatch):
        monkeypatch.setattr(config, "BASE_URL_OVERRIDE", "http://localhost:8080")
        page = StoreHomePage(MagicMock(), "staging", stub_finder)

        assert page.build_url() == "http://localhost:8080"

    def test_go_navigates(self, home_page):
        home_page.go()
        home_page.page.goto.assert_called_once_with(config.PRODUCTION_URL)


class TestSearch:
    """Tests for product search and layout."""

    def test_search_products(self, home_page, stub_finder, make_element):
        search_box = make_element()
        search_button = make_element()
        stub_finder.results[StoreHomePage.SEARCH_TEXTBOX_LOCATOR] = search_box
        stub_finder.results[StoreHomePage.SEARCH_BUTTON_LOCATOR] = search_button

        assert home_page.page_number == 0
        home_page.search_products("stainless work table")

        search_box.click.assert_called_once()
        search_box.fill.assert_called_once_with("stainless work table")
        search_button.click.assert_called_once()
        assert home_page.page_number == 1

    def test_search_box_missing_raises(self, home_page):
        with pytest.raises(ElementNotFoundError, match="Search box"):
            home_page.search_products("table")
        assert home_page.page_number == 0

    @pytest.mark.parametrize("layout, locator", [
        ("grid", StoreHomePage.GRIDVIEW_BUTTON_LOCATOR),
        ("List", StoreHomePage.LISTVIEW_BUTTON_LOCATOR),
        ("anything else", StoreHomePage.GRIDVIEW_BUTTON_LOCATOR),
    ])
    def test_set_results_layout(self, home_page, stub_finder, make_element, layout, locator):
        button = make_element()
        stub_finder.results[locator] = button

        home_page.set_results_layout(layout)

        button.click.assert_called_once()

    def test_set_results_layout_missing_button_raises(self, home_page):
        with pytest.raises(ElementNotFoundError, match="Grid view button"):
            home_page.set_results_layout("grid")


class TestResultItems:
    """Tests for reading search result boxes."""

    def _box_with_link(self, stub_finder, make_element, text):
        box = MagicMock(name="box")
        link = make_element(text=text)
        stub_finder.results[StoreHomePage.SEARCH_RESULT_LINK_LOCATOR] = \
            lambda root: link if root is box else None
        return box

    def test_find_all_result_item_boxes(self, home_page, stub_finder):
        boxes = [MagicMock(), MagicMock()]
        stub_finder.results[StoreHomePage.SEARCH_RESULT_BOX_LOCATOR] = boxes

        assert home_page.find_all_result_item_boxes() == boxes

    def test_find_all_result_item_boxes_empty(self, home_page):
        assert home_page.find_all_result_item_boxes() == []

    def test_link_text(self, home_page, stub_finder, make_element):
        box = self._box_with_link(stub_finder, make_element, "Regency Stainless Steel Work Table")
        assert home_page.find_link_text_in_item_box(box) == "Regency Stainless Steel Work Table"

    def test_link_text_searches_within_box(self, home_page, stub_finder, make_element):
        box = self._box_with_link(stub_finder, make_element, "Table")
        home_page.find_link_text_in_item_box(box)

        name, locator, root, timeout, interval = stub_finder.lookups[-1]
        assert root is box
        assert (timeout, interval) == (5000, 100)

    def test_link_text_missing_returns_placeholder(self, home_page):
        text = home_page.find_link_text_in_item_box(MagicMock())
        assert text.startswith("[Unable to get link text (Error='Item description link was not found")

    def test_link_text_for_no_box_returns_placeholder(self, home_page):
        assert home_page.find_link_text_in_item_box(None).startswith("[Unable to get link text")

    def test_link_text_playwright_error_returns_placeholder(self, home_page, stub_finder, make_element):
        link = make_element()
        link.inner_text.side_effect = PlaywrightError("Target closed")
        stub_finder.results[StoreHomePage.SEARCH_RESULT_LINK_LOCATOR] = link

        assert home_page.find_link_text_in_item_box(MagicMock()) == \
            "[Unable to get link text (Error='Target closed')]"

    def test_item_link_contains_ignores_case(self, home_page, stub_finder, make_element):
        box = self._box_with_link(stub_finder, make_element, "Stainless Steel Work TABLE")
        assert home_page.item_link_contains(box, "table") is True
        assert home_page.item_link_contains(box, "Table", ignore_case=False) is False

    def test_item_link_does_not_contain(self, home_page, stub_finder, make_element):
        box = self._box_with_link(stub_finder, make_element, "Undershelf for Work Bench")
        assert home_page.item_link_contains(box, "table") is False

    def test_find_result_item_box_by_description(self, home_page, stub_finder, make_element):
        boxes = [MagicMock(name="box-1"), MagicMock(name="box-2"), MagicMock(name="box-3")]
        links = {boxes[0]: make_element(text="Undershelf"),
                 boxes[1]: make_element(text="Stainless Work Table"),
                 boxes[2]: make_element(text="Stainless Work Table, 30\"")}
        stub_finder.results[StoreHomePage.SEARCH_RESULT_BOX_LOCATOR] = boxes
        stub_finder.results[StoreHomePage.SEARCH_RESULT_LINK_LOCATOR] = links.get

        assert home_page.find_result_item_box_by_description("Stainless Work Table") is boxes[1]

    def test_find_result_item_box_by_description_not_on_page(self, home_page, stub_finder, make_element):
        box = self._box_with_link(stub_finder, make_element, "Undershelf for Work Bench")
        stub_finder.results[StoreHomePage.SEARCH_RESULT_BOX_LOCATOR] = [box]

        assert home_page.find_result_item_box_by_description("Stainless Work Table") is None


class TestAddToCart:
    """Tests for adding a result to the cart."""

    @pytest.fixture
    def cart_count(self, stub_finder, make_element):
        count = make_element()
        stub_finder.results[StoreGlobalHeader.CART_COUNT_LOCATOR] = count
        return count

    @pytest.fixture
    def add_button(self, stub_finder, make_element):
        button = make_element()
        stub_finder.results[StoreHomePage.SEARCH_RESULT_CART_BUTTON_LOCATOR] = button
        return button

    def test_count_increases(self, home_page, cart_count, add_button):
        cart_count.inner_text.side_effect = ["0", "1"]
        home_page.accessories_dialog = MagicMock()

        assert home_page.add_item_in_box_to_cart(MagicMock(), allow_accessories=False) is True
        add_button.click.assert_called_once()
        home_page.accessories_dialog.try_selecting_options.assert_not_called()

    def test_accessories_handled_when_allowed(self, home_page, cart_count, add_button):
        cart_count.inner_text.side_effect = ["2", "3"]
        home_page.accessories_dialog = MagicMock()

        assert home_page.add_item_in_box_to_cart(MagicMock(), allow_accessories=True) is True
        home_page.accessories_dialog.try_selecting_options.assert_called_once()

    def test_count_unchanged(self, home_page, cart_count, add_button):
        cart_count.inner_text.side_effect = ["1", "1"]
        assert home_page.add_item_in_box_to_cart(MagicMock(), allow_accessories=False) is False

    def test_missing_add_button(self, home_page, cart_count):
        cart_count.inner_text.return_value = "0"
        assert home_page.add_item_in_box_to_cart(MagicMock(), allow_accessories=False) is False

    def test_missing_cart_count(self, home_page, add_button):
        assert home_page.add_item_in_box_to_cart(MagicMock(), allow_accessories=False) is False
        add_button.click.assert_not_called()

    def test_unreadable_cart_count(self, home_page, cart_count, add_button):
        cart_count.inner_text.return_value = ""
        assert home_page.add_item_in_box_to_cart(MagicMock(), allow_accessories=False) is False

    def test_cart_count_increased(self, home_page, cart_count):
        cart_count.inner_text.return_value = "4"
        assert home_page.cart_count_increased(3) is True
        assert home_page.cart_count_increased(4) is False


class TestPagination:
    """Tests for moving through pages of results."""

    def _pagination(self, stub_finder, make_element, item_count, next_button):
        stub_finder.results[By.xpath(PAGINATION)] = [make_element() for _ in range(item_count)]
        stub_finder.results[By.xpath(f"{PAGINATION}[{item_count - 1}]")] = next_button

    def test_next_button_enabled_is_not_last_page(self, home_page, stub_finder, make_element):
        self._pagination(stub_finder, make_element, 7, make_element(aria_disabled="false"))

        assert home_page.nav_page_right_is_disabled() is False
        assert home_page.is_last_page() is False

    def test_next_button_disabled_is_last_page(self, home_page, stub_finder, make_element):
        self._pagination(stub_finder, make_element, 7, make_element(aria_disabled="true"))

        assert home_page.nav_page_right_is_disabled() is True
        assert home_page.is_last_page() is True

    def test_no_pagination_is_last_page(self, home_page):
        assert home_page.nav_page_right_is_disabled() is False
        assert home_page.is_last_page() is True

    def test_next_button_without_disabled_attribute(self, home_page, stub_finder, make_element):
        self._pagination(stub_finder, make_element, 4, make_element())

        assert home_page.nav_page_right_is_disabled() is False
        assert home_page.is_last_page() is False

    def test_disabled_checks_share_one_button_lookup(self, home_page, stub_finder, make_element):
        self._pagination(stub_finder, make_element, 7, make_element(aria_disabled="true"))

        home_page.nav_page_right_is_disabled()
        lookups_for_one_check = len(stub_finder.lookups)
        home_page.is_last_page()

        assert len(stub_finder.lookups) == 2 * lookups_for_one_check
        assert [name for name, *_ in stub_finder.lookups[:lookups_for_one_check]] == \
            ["PresenceOfAllElements", "VisibilityOfElement"]

    def test_attribute_error_is_not_disabled(self, home_page, stub_finder, make_element):
        button = make_element()
        button.get_attribute.side_effect = PlaywrightError("detached")
        self._pagination(stub_finder, make_element, 5, button)

        assert home_page.nav_page_right_is_disabled() is False
        assert home_page.is_last_page() is False

    def test_go_to_next_page(self, home_page, stub_finder, make_element):
        next_button = make_element(aria_disabled="false")
        self._pagination(stub_finder, make_element, 7, next_button)
        home_page.page_number = 1

        assert home_page.go_to_next_page() is True
        next_button.click.assert_called_once()
        assert home_page.page_number == 2

    def test_go_to_next_page_on_last_page(self, home_page, stub_finder, make_element):
        next_button = make_element(aria_disabled="true")
        self._pagination(stub_finder, make_element, 7, next_button)
        home_page.page_number = 3

        assert home_page.go_to_next_page() is False
        next_button.click.assert_not_called()
        assert home_page.page_number == 3


class TestAddedToCartNotification:
    """Tests for closing the added-to-cart notification."""

    def test_closes_when_present(self, home_page, stub_finder, make_element):
        close_button = make_element()
        stub_finder.results[StoreHomePage.ADDED_TO_CART_CLOSE_BUTTON_LOCATOR] = close_button

        assert home_page.try_click_added_to_your_cart_close_button() is True
        close_button.click.assert_called_once()

    def test_absent_notification(self, home_page, stub_finder):
        assert home_page.try_click_added_to_your_cart_close_button() is False
        _, _, _, timeout, _ = stub_finder.lookups[-1]
        assert timeout == 3000

    def test_click_error_is_swallowed(self, home_page, stub_finder, make_element):
        close_button = make_element()
        close_button.click.side_effect = PlaywrightError("Element is not attached to the DOM")
        stub_finder.results[StoreHomePage.ADDED_TO_CART_CLOSE_BUTTON_LOCATOR] = close_button

        assert home_page.try_click_added_to_your_cart_close_button() is False

    def test_click_into_cart(self, home_page, stub_finder, make_element):
        cart_button = make_element()
        stub_finder.results[StoreGlobalHeader.CART_COUNT_LOCATOR] = cart_button

        home_page.click_into_cart()

        cart_button.click.assert_called_once()
