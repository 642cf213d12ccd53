"""
Base classes and value types for the element finder system
"""

import json
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from playwright.sync_api import Locator, Page

# Defaults used when a caller does not pass its own timing
DEFAULT_TIMEOUT_MS = 10000
DEFAULT_INTERVAL_MS = 250

SearchRoot = Union[Page, Locator]


@dataclass(frozen=True)
class By:
    """A locator: how to query for an element in the page structure"""
    strategy: str
    value: str

    ID = "id"
    XPATH = "xpath"
    LINK_TEXT = "link text"

    @classmethod
    def id(cls, value: str) -> "By":
        return cls(cls.ID, value)

    @classmethod
    def xpath(cls, value: str) -> "By":
        return cls(cls.XPATH, value)

    @classmethod
    def link_text(cls, value: str) -> "By":
        return cls(cls.LINK_TEXT, value)

    @property
    def selector(self) -> str:
        """Render this locator as a Playwright selector string"""
        if self.strategy == self.ID:
            return f"id={self.value}"
        if self.strategy == self.XPATH:
            return f"xpath={self.value}"
        if self.strategy == self.LINK_TEXT:
            return f"a:text-is({json.dumps(self.value)})"
        raise ValueError(f"Unknown locator strategy '{self.strategy}'")

    @property
    def is_absolute_xpath(self) -> bool:
        return self.strategy == self.XPATH and self.value.startswith("/")

    def __str__(self) -> str:
        return f"By.{self.strategy}: {self.value}"


@dataclass
class FinderContext:
    """Context information for a single element lookup"""
    root: SearchRoot
    locator: By
    timeout: int = DEFAULT_TIMEOUT_MS
    interval: int = DEFAULT_INTERVAL_MS
    description: str = ""
    debug: bool = False
    attempts: int = field(default=0, compare=False)
    deadline: Optional[float] = field(default=None, compare=False)

    def query(self) -> Locator:
        """All matches of the locator under the search root"""
        return self.root.locator(self.locator.selector)

    def check_timeout(self) -> int:
        """Timeout in ms for a single state check, bounded by the interval and the time left"""
        if self.deadline is None:
            return max(1, self.interval)
        remaining_ms = int((self.deadline - time.monotonic()) * 1000)
        return max(1, min(self.interval, remaining_ms))


class ElementCondition(ABC):
    """Base class for the conditions a lookup polls for"""

    def __init__(self):
        self.name = self.__class__.__name__

    @abstractmethod
    def evaluate(self, context: FinderContext) -> Optional[Any]:
        """Check the condition once; return the found element(s) or None"""
        pass

    def __repr__(self) -> str:
        return f"<{self.name}>"
