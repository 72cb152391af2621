"""
Option records for the UIBase helper methods.

Each operation family takes its own frozen dataclass. Defaults live in the
module-level constants below and nowhere else; ``resolve_options`` applies
them at the call boundary so the retry loops only ever see complete records.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Type, TypeVar, Union

from playwright.async_api import Locator, Request

# Attempts per call when the caller does not ask for retries
DEFAULT_RETRIES = 1

# get_all_texts: a list that is still rendering under-reports its size
DEFAULT_TEXT_COLLECTION_RETRIES = 3
DEFAULT_MIN_TEXT_COUNT = 30
DEFAULT_TEXT_POLL_INTERVAL_MS = 300

# wait_for_condition
DEFAULT_CONDITION_RETRIES = 10
DEFAULT_CONDITION_TIMEOUT_MS = 5000
DEFAULT_CONDITION_INTERVAL_MS = 200

DEFAULT_DRAG_STEPS = 1

ELEMENT_STATES: Tuple[str, ...] = ("attached", "detached", "visible", "hidden")


def _check_retries(retries: int) -> None:
    if isinstance(retries, bool) or not isinstance(retries, int) or retries < 1:
        raise ValueError(f"retries must be a positive integer, got {retries!r}")


@dataclass(frozen=True)
class ActionOptions:
    timeout: Optional[float] = None
    retries: int = DEFAULT_RETRIES

    def __post_init__(self):
        _check_retries(self.retries)


@dataclass(frozen=True)
class ClickOptions(ActionOptions):
    """force clicks through actionability checks; wait_for must turn visible afterwards."""
    force: Optional[bool] = None
    wait_for: Optional[Locator] = None


@dataclass(frozen=True)
class DoubleClickOptions(ClickOptions):
    pass


@dataclass(frozen=True)
class TypeOptions(ActionOptions):
    """
    clear: empty the field first
    delay: pause between keystrokes, in ms
    press_enter: confirm with Enter after typing
    wait_for: locator that must turn visible afterwards
    """
    clear: bool = False
    delay: Optional[float] = None
    press_enter: bool = False
    wait_for: Optional[Locator] = None


@dataclass(frozen=True)
class GetTextOptions(ActionOptions):
    trim: bool = False
    wait_for: Optional[Locator] = None


@dataclass(frozen=True)
class GetAllTextsOptions(ActionOptions):
    """
    Attempts repeat while fewer than ``min_count`` texts were collected.

    The threshold is a heuristic sized for the product grid of the site under
    test, not a correctness guarantee: a list that legitimately holds fewer
    items simply costs the extra polls before being returned.
    """
    retries: int = DEFAULT_TEXT_COLLECTION_RETRIES
    trim: bool = False
    min_count: int = DEFAULT_MIN_TEXT_COUNT
    interval_ms: float = DEFAULT_TEXT_POLL_INTERVAL_MS


@dataclass(frozen=True)
class CountElementsOptions(ActionOptions):
    visible_only: bool = False


@dataclass(frozen=True)
class StateCheckOptions(ActionOptions):
    pass


@dataclass(frozen=True)
class HoverOptions(ActionOptions):
    force: Optional[bool] = None


@dataclass(frozen=True)
class ClipboardOptions(ActionOptions):
    pass


@dataclass(frozen=True)
class AlertOptions(ActionOptions):
    pass


@dataclass(frozen=True)
class FileUploadOptions(ActionOptions):
    pass


@dataclass(frozen=True)
class FileDownloadOptions(ActionOptions):
    pass


@dataclass(frozen=True)
class IFrameOptions(ActionOptions):
    pass


@dataclass(frozen=True)
class WaitForRequestOptions(ActionOptions):
    predicate: Optional[Callable[[Request], bool]] = None


@dataclass(frozen=True)
class WaitForElementOptions(ActionOptions):
    state: str = "visible"

    def __post_init__(self):
        super().__post_init__()
        if self.state not in ELEMENT_STATES:
            raise ValueError(f"state must be one of {ELEMENT_STATES}, got {self.state!r}")


@dataclass(frozen=True)
class WaitForConditionOptions(ActionOptions):
    timeout: float = DEFAULT_CONDITION_TIMEOUT_MS
    retries: int = DEFAULT_CONDITION_RETRIES
    interval_ms: float = DEFAULT_CONDITION_INTERVAL_MS


@dataclass(frozen=True)
class DragAndDropOptions(ActionOptions):
    """steps: intermediate mouse moves; delay_ms: pause after press and after release."""
    steps: int = DEFAULT_DRAG_STEPS
    delay_ms: Optional[float] = None


OptionsT = TypeVar("OptionsT", bound=ActionOptions)


def resolve_options(options: Optional[OptionsT], options_type: Type[OptionsT]) -> OptionsT:
    """Return ``options`` or the defaults of ``options_type``; reject mismatched records."""
    if options is None:
        return options_type()
    if not isinstance(options, options_type):
        raise TypeError(f"expected {options_type.__name__}, got {type(options).__name__}")
    return options


# ---------- DRAG TARGETS ----------

@dataclass(frozen=True)
class ToElement:
    locator: Locator


@dataclass(frozen=True)
class ToPoint:
    x: float
    y: float


DragTarget = Union[ToElement, ToPoint]


def as_drag_target(target: Any) -> DragTarget:
    """
    Decide once which drag strategy applies.

    Accepts an explicit ToElement/ToPoint, an ``(x, y)`` pair, a mapping
    with ``x`` and ``y`` keys, or anything else, which is treated as a
    locator.
    """
    if isinstance(target, (ToElement, ToPoint)):
        return target
    if isinstance(target, dict) and "x" in target and "y" in target:
        return ToPoint(float(target["x"]), float(target["y"]))
    if isinstance(target, (tuple, list)) and len(target) == 2 and all(
        isinstance(v, (int, float)) and not isinstance(v, bool) for v in target
    ):
        return ToPoint(float(target[0]), float(target[1]))
    return ToElement(target)
