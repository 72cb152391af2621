"""Exception types raised by the suite's own code.

Playwright's errors (``playwright.async_api.Error`` and its ``TimeoutError``)
are never wrapped; they propagate to the caller unchanged.
"""


class AutomationExerciseError(Exception):
    """Base class for errors raised by this project."""


class PreconditionError(AutomationExerciseError):
    """Structural misuse that retrying cannot fix."""


class NoElementsFoundError(PreconditionError):
    """A locator group that had to hold candidates matched nothing."""


class MissingTextContentError(PreconditionError):
    """An element reported no text content where text was required."""


class FrameResolutionError(PreconditionError):
    """An iframe handle carries neither a ``name`` nor an ``id`` attribute."""


class PageConfigurationError(PreconditionError):
    """A page object was asked to navigate without a URL."""


class DragSourceNotVisibleError(AutomationExerciseError):
    """The drag source has no bounding box yet."""


class ConditionTimeoutError(AutomationExerciseError):
    """A polled condition never returned True within its limits."""

    def __init__(self, message: str = "Condition not met within specified timeout.", attempts: int = 0):
        super().__init__(message)
        self.attempts = attempts


class EnvironmentConfigurationError(ValueError):
    """ENVIRONMENT names an environment the suite does not know."""


class ApiResponseError(AutomationExerciseError):
    """An API response body did not match the expected shape."""

    def __init__(self, message: str, payload=None):
        super().__init__(message)
        self.payload = payload
