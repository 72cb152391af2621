"""
Bounded retry combinator used by every UIBase operation.

``attempt`` never raises for a failed attempt: it hands back a
``RetryOutcome`` that holds either the value or the error of the most recent
attempt, and the caller decides when to ``unwrap`` it. Errors listed in
``fatal`` (preconditions by default) bypass the loop and propagate at once.
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Optional, Tuple, Type, TypeVar

from automation_exercise.common.errors import PreconditionError

T = TypeVar("T")


@dataclass(frozen=True)
class RetryOutcome(Generic[T]):
    value: Optional[T] = None
    error: Optional[Exception] = None
    attempts: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the kept error object itself."""
        if self.error is not None:
            raise self.error
        return self.value


async def sleep_ms(delay_ms: float) -> None:
    await asyncio.sleep(delay_ms / 1000)


async def attempt(
    action: Callable[[], Awaitable[T]],
    attempts: int,
    *,
    delay_ms: Optional[float] = None,
    accept: Optional[Callable[[T], bool]] = None,
    pause: Callable[[float], Awaitable[None]] = sleep_ms,
    fatal: Tuple[Type[BaseException], ...] = (PreconditionError,),
    ) -> RetryOutcome[T]:
    """
    Run ``action`` up to ``attempts`` times.

    Args:
        action: Zero-argument coroutine function performing one try
        attempts: Maximum number of tries, at least 1
        delay_ms: Pause between tries; no pause after the last one
        accept: Optional check on a successful result. A rejected result is
            retried while tries remain and returned as-is on the last one.
        pause: Coroutine used for the pause, given milliseconds
        fatal: Exception types that are raised immediately

    Returns:
        RetryOutcome with the first accepted value, or the last error
    """
    if attempts < 1:
        raise ValueError(f"attempts must be at least 1, got {attempts}")

    last_error: Optional[Exception] = None
    for index in range(attempts):
        is_last = index == attempts - 1
        try:
            value = await action()
        except fatal:
            raise
        except Exception as e:
            last_error = e
        else:
            if accept is None or accept(value) or is_last:
                return RetryOutcome(value=value, attempts=index + 1)
            last_error = None

        if delay_ms and not is_last:
            await pause(delay_ms)

    return RetryOutcome(error=last_error, attempts=attempts)
