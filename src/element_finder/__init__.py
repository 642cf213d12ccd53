"""
Element Finder

Explicit polling waits over Playwright locators, with tolerant "not found"
semantics, plus browser session setup for the tests that use them.
"""

from .base import By, ElementCondition, FinderContext, DEFAULT_TIMEOUT_MS, DEFAULT_INTERVAL_MS
from .conditions import (
    VisibilityOfElement,
    VisibilityOfAllElements,
    ElementToBeClickable,
    EnabledElements,
    PresenceOfAllElements
)
from .driver_factory import BrowserSession, create_session
from .exceptions import FrameworkError, ElementNotFoundError, InvalidLocatorError, BrowserSetupError
from .finder import ElementFinder

__all__ = [
    'By',
    'ElementCondition',
    'FinderContext',
    'DEFAULT_TIMEOUT_MS',
    'DEFAULT_INTERVAL_MS',
    'VisibilityOfElement',
    'VisibilityOfAllElements',
    'ElementToBeClickable',
    'EnabledElements',
    'PresenceOfAllElements',
    'BrowserSession',
    'create_session',
    'ElementFinder',
    'FrameworkError',
    'ElementNotFoundError',
    'InvalidLocatorError',
    'BrowserSetupError'
]
