"""Exceptions raised by the element finder and browser session helpers."""


class FrameworkError(Exception):
    """Base exception for test framework failures."""

    pass


class ElementNotFoundError(FrameworkError):
    """A required element was not found before the timeout."""

    def __init__(self, what: str, locator=None, timeout=None):
        self.what = what
        self.locator = locator
        self.timeout = timeout
        message = f"{what} was not found"
        if locator is not None:
            message += f" (locator='{locator}'"
            if timeout is not None:
                message += f", timeout={timeout}ms"
            message += ")"
        super().__init__(message)


class InvalidLocatorError(FrameworkError, ValueError):
    """Locator cannot be used for the requested kind of search."""

    pass


class BrowserSetupError(FrameworkError):
    """Browser session could not be started."""

    pass
