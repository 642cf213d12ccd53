"""
Store product search and cart scenario

Drives a browser through a product search, checks that every result
mentions the expected text, adds the last matching item to the cart,
verifies it is in the cart and empties the cart again.

Failures are recorded as soft assertions so one run reports everything that
went wrong instead of stopping at the first problem.
"""

import logging
import sys
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from playwright.sync_api import Error as PlaywrightError, Locator

from element_finder import BrowserSession, ElementFinder, FrameworkError, create_session
from scenario_data import SearchTestParams, load_search_params
from store_pages import CartPage, StoreHomePage
from store_pages import config

logger = logging.getLogger(__name__)


class SoftAssert:
    """Records failed assertions without stopping, and reports them all at the end"""

    def __init__(self):
        self.failures: List[str] = []

    def assert_true(self, condition: bool, message: str) -> bool:
        if not condition:
            self.fail(message)
        return bool(condition)

    def fail(self, message: str):
        logger.warning("Soft assertion failed: %s", message)
        self.failures.append(message)

    @property
    def passed(self) -> bool:
        return not self.failures

    def assert_all(self):
        """Raise one AssertionError listing every recorded failure"""
        if self.failures:
            lines = "\n".join(f"  {i}. {failure}" for i, failure in enumerate(self.failures, 1))
            raise AssertionError(f"The following asserts failed:\n{lines}")


@dataclass
class MatchingResult:
    """A search result whose description contained the expected text, and where it was seen"""
    box: Locator
    description: str
    page_number: int


class StoreSearchAndCartTest:
    """Search the store, check the results, and add and remove an item from the cart"""

    def __init__(self, params: SearchTestParams, debug: bool = False,
                 session_factory: Callable[..., BrowserSession] = create_session):
        self.params = params
        self.debug = debug
        self.session_factory = session_factory

        self.soft_assert = SoftAssert()
        self.session: Optional[BrowserSession] = None
        self.finder: Optional[ElementFinder] = None
        self.step_description: Optional[str] = None

        # Progress tracking
        self.test_performance = {
            'total_steps': 0,
            'results_returned': 0,
            'results_processed': 0,
            'pages_visited': 0
        }

    def _step(self, description: str, announce: bool = True):
        """Label the step being performed, for reporting unexpected failures"""
        self.step_description = description
        if announce:
            self.test_performance['total_steps'] += 1
            print(f"Step {self.test_performance['total_steps']}: {description}")

    def run(self) -> SoftAssert:
        """Run the whole scenario; the browser is always closed afterwards"""
        print(f"🚀 Starting store search and cart test ({self.params.test_id})...\n")
        test_start_time = time.time()

        try:
            self._run_scenario()
        except Exception as e:
            self.soft_assert.fail(
                f"An unhandled exception occurred during step, '{self.step_description}': {e}")
            logger.exception("Unhandled exception during step '%s'", self.step_description)
        finally:
            self.cleanup()

        self._print_summary(time.time() - test_start_time)
        return self.soft_assert

    def _run_scenario(self):
        params = self.params

        self._step(f"Open the browser (browser={params.browser}, maximized={params.maximize_browser}, "
                   f"headless={params.headless}).")
        self.session = self.session_factory(params.browser, maximize=params.maximize_browser,
                                            headless=params.headless, slow_mo=config.SLOW_MO,
                                            default_timeout=config.DEFAULT_TIMEOUT)
        page = self.session.page
        self.finder = ElementFinder(page, debug=self.debug)

        self._step(f"Go to the store homepage (environment={params.environment}).")
        home_page = StoreHomePage(page, params.environment, self.finder)
        home_page.go()

        self._step(f"Search products (search text='{params.search_text}').")
        home_page.search_products(params.search_text)

        self._step(f"Select grid or list view for the results layout (layout={params.grid_or_list_view}).")
        home_page.set_results_layout(params.grid_or_list_view)

        last_match = self._check_search_results(home_page)

        if last_match is None:
            self.soft_assert.fail(
                f"No search result contained '{params.results_expected_text}', so nothing could be added to the cart.")
            return

        last_item_description = last_match.description
        last_item_box = last_match.box

        # Result boxes are resolved against the current page, so a match seen
        # on an earlier page has to be found again by its description.
        if last_match.page_number != home_page.page_number:
            self._step(f"Find the last matching item on the current page "
                       f"(item description='{last_item_description}', seen on page {last_match.page_number}).")
            last_item_box = home_page.find_result_item_box_by_description(last_item_description)
            if last_item_box is None:
                self.soft_assert.fail(
                    f"The last matching item '{last_item_description}' (page {last_match.page_number}) is not on "
                    f"the current results page (page {home_page.page_number}), so it could not be added to the cart.")
                return

        self._step(f"Add the last item to the cart (item description='{last_item_description}').")
        added_to_cart = home_page.add_item_in_box_to_cart(last_item_box, params.add_accessories)
        self.soft_assert.assert_true(added_to_cart,
                                     "Nothing was added to the cart (count of items did not increase).")

        # The notification blocks clicks while it is up and may vanish on its
        # own at any moment, so close it if it is there and move on.
        self._step("If a popup says the item was added to the cart, close it if it's not already gone.")
        home_page.try_click_added_to_your_cart_close_button()

        self._step("Click into the cart.")
        home_page.click_into_cart()
        cart_page = CartPage(page, self.finder)

        self._step(f"Confirm that the item is in the cart (description='{last_item_description}').")
        self.soft_assert.assert_true(cart_page.item_with_description_is_in_cart(last_item_description),
                                     f"Item with description '{last_item_description}' was not found in the cart.")

        self._step("Empty the cart using the Empty Cart button and the Empty Cart button in the confirmation dialog.")
        self.soft_assert.assert_true(cart_page.empty_cart(), "Failed to empty the cart.")

    def _check_search_results(self, home_page: StoreHomePage) -> Optional[MatchingResult]:
        """
        Check every result on every page (up to the configured maximum).

        Returns:
            The last result whose description contained the expected text,
            with the page it was seen on, or None
        """
        params = self.params
        expected_text = params.results_expected_text
        last_match = None
        done_processing_results = False

        while not done_processing_results:
            self.test_performance['pages_visited'] += 1

            self._step(f"Get the boxes containing the products on page {home_page.page_number} of the search results.")
            result_boxes = home_page.find_all_result_item_boxes()
            number_of_results_returned = len(result_boxes)
            self.test_performance['results_returned'] += number_of_results_returned

            self._step(f"Confirm that the number of returned results meets the expected minimum "
                       f"(expected >= {params.min_results}, actual = {number_of_results_returned}).")
            self.soft_assert.assert_true(
                number_of_results_returned >= params.min_results,
                f"The number of search results returned is less than the expected minimum "
                f"(minimum={params.min_results}, actual={number_of_results_returned}).")

            for box in result_boxes:
                processed = self.test_performance['results_processed']
                self._step(f"Check if item's description contains the expected text "
                           f"(item {processed + 1}, expected text='{expected_text}').", announce=False)

                if home_page.item_link_contains(box, expected_text, True):
                    last_match = MatchingResult(box, home_page.find_link_text_in_item_box(box),
                                                home_page.page_number)
                else:
                    link_description = home_page.find_link_text_in_item_box(box)
                    self.soft_assert.fail(f"Item description '{link_description}' on page "
                                          f"{home_page.page_number} does not contain '{expected_text}'.")

                self.test_performance['results_processed'] += 1

                if self.test_performance['results_processed'] >= params.max_results_to_check:
                    done_processing_results = True
                    print(f"Info: The maximum number of results was reached. No more results will be processed, "
                          f"but remaining tests will still be performed. "
                          f"(maximum results to check = {params.max_results_to_check})")
                    break

            self._step("Go to the next page if the last page or maximum number of results have not been reached.")
            try:
                done_processing_results = done_processing_results or home_page.is_last_page()
                if not done_processing_results:
                    home_page.go_to_next_page()
            except (PlaywrightError, FrameworkError) as e:
                self.soft_assert.fail(f"Failed to go to the next page. ({e})")
                done_processing_results = True

        return last_match

    def _print_summary(self, total_test_time: float):
        """Print the run summary"""
        print("\n" + "=" * 60)
        print("📊 TEST SUMMARY")
        print("=" * 60)
        print(f"Scenario: {self.params.test_id}")
        print(f"Steps: {self.test_performance['total_steps']}")
        print(f"Pages of results: {self.test_performance['pages_visited']}")
        print(f"Results processed: {self.test_performance['results_processed']}"
              f"/{self.test_performance['results_returned']}")
        print(f"Total Test Time: {total_test_time:.2f}s")

        if self.finder is not None:
            finder_stats = self.finder.get_performance_stats()
            if finder_stats['total_searches'] > 0:
                print(f"\n📈 Element Finder:")
                print(f"  Searches: {finder_stats['total_searches']} "
                      f"({finder_stats['found']} found, {finder_stats['not_found']} not found)")
                print(f"  Average Time: {finder_stats['average_search_time'] * 1000:.1f}ms")

        if self.soft_assert.failures:
            print(f"\n❌ Failed Assertions:")
            for i, failure in enumerate(self.soft_assert.failures, 1):
                print(f"  {i}. {failure}")
        else:
            print("\n✓ All assertions passed")

        print("=" * 60)

    def cleanup(self):
        """Close the browser session if one was opened"""
        if self.session is not None:
            self.session.close()
            self.session = None


# Run the scenario for every row of the data table
if __name__ == "__main__":
    debug_mode = '--debug' in sys.argv
    args = [arg for arg in sys.argv[1:] if not arg.startswith('--')]

    logging.basicConfig(
        level=logging.DEBUG if debug_mode else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%m/%d/%Y %H:%M:%S'
    )

    params_file = args[0] if args else None
    all_params = load_search_params(params_file)
    if not all_params:
        print("No test parameters found. Exiting.")
        sys.exit(1)

    failed = 0
    for test_params in all_params:
        result = StoreSearchAndCartTest(test_params, debug=debug_mode).run()
        if not result.passed:
            failed += 1

    print(f"\n🎯 {len(all_params) - failed}/{len(all_params)} scenario runs passed")
    sys.exit(1 if failed else 0)
