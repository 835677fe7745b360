from __future__ import annotations

from typing import Awaitable, Callable, TypeVar

from domain.ports import ClockPort

T = TypeVar("T")


async def wait_for_condition(
    predicate: Callable[[], Awaitable[T]],
    clock: ClockPort,
    *,
    timeout: float,
    poll_interval: float = 0.5,
) -> T | None:
    """Poll ``predicate`` until it returns something truthy or ``timeout`` expires.

    The predicate is always evaluated at least once. Returns its truthy
    result, or ``None`` once the deadline has passed.
    """
    deadline = clock.monotonic() + timeout
    while True:
        result = await predicate()
        if result:
            return result
        if clock.monotonic() >= deadline:
            return None
        await clock.sleep(poll_interval)
