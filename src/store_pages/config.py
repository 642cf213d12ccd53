"""
Configuration for the store tests, read from environment variables.
"""

import os

PRODUCTION_URL = "https://www.webstaurantstore.com"

# Substring of the environment name -> base URL
ENVIRONMENT_URLS = {
    "prod": PRODUCTION_URL,
}

# Overrides the environment lookup entirely, e.g. for a local mirror
BASE_URL_OVERRIDE = os.getenv("STORE_BASE_URL")

HEADLESS_OVERRIDE = os.getenv("STORE_HEADLESS")
BROWSER_OVERRIDE = os.getenv("STORE_BROWSER")
SLOW_MO = int(os.getenv("STORE_SLOW_MO", "0"))
DEFAULT_TIMEOUT = int(os.getenv("STORE_DEFAULT_TIMEOUT", "30000"))  # 30 seconds


def parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")
