"""
Test parameters for the store product search and cart scenario
"""

import json
from dataclasses import dataclass, fields, replace
from typing import List, Optional

from store_pages import config


@dataclass
class SearchTestParams:
    """
    One row of the search and cart data table.

    environment: test environment (production, etc.)
    browser: name of the browser to use
    search_text: text to enter in the search box
    results_expected_text: text expected in every result's description
    min_results: minimum number of results per page for the test to pass
    max_results_to_check: limit on results processed; not a pass/fail criterion
    add_accessories: pick arbitrary accessories if the product prompts for them
    maximize_browser: maximize the browser when it is started
    grid_or_list_view: results layout to select ('grid' or 'list')
    headless: run the browser headless, if supported
    """
    environment: str
    browser: str
    search_text: str
    results_expected_text: str
    min_results: int
    max_results_to_check: int
    add_accessories: bool
    maximize_browser: bool
    grid_or_list_view: str
    headless: bool

    @property
    def test_id(self) -> str:
        return f"{self.environment}-{self.browser}-{self.search_text.replace(' ', '_')}"


# Additional rows can be added here or loaded from a JSON file
SEARCH_TEST_PARAMS = [
    SearchTestParams("production", "chrome", "stainless work table", "table", 1, 2000, True, True, "grid", False),
]


def apply_overrides(params: SearchTestParams) -> SearchTestParams:
    """Apply STORE_HEADLESS / STORE_BROWSER environment overrides to a row"""
    changes = {}
    if config.HEADLESS_OVERRIDE:
        changes['headless'] = config.parse_bool(config.HEADLESS_OVERRIDE)
    if config.BROWSER_OVERRIDE:
        changes['browser'] = config.BROWSER_OVERRIDE
    return replace(params, **changes) if changes else params


def load_search_params(file_path: Optional[str] = None) -> List[SearchTestParams]:
    """
    Load the search test rows, with environment overrides applied.

    Args:
        file_path: Optional JSON file holding a list of objects with the
            SearchTestParams field names. The built-in table is used if omitted.
    """
    if file_path is None:
        rows = list(SEARCH_TEST_PARAMS)
    else:
        with open(file_path, 'r', encoding='utf-8') as file:
            data = json.load(file)

        field_names = {f.name for f in fields(SearchTestParams)}
        rows = []
        for index, item in enumerate(data, 1):
            unknown = set(item) - field_names
            missing = field_names - set(item)
            if unknown or missing:
                raise ValueError(
                    f"Row {index} in {file_path} is invalid "
                    f"(missing={sorted(missing)}, unknown={sorted(unknown)})")
            rows.append(SearchTestParams(**item))

    return [apply_overrides(row) for row in rows]
