from __future__ import annotations

from domain.models import Timings
from domain.ports import BrowserPagePort, ClockPort, LoggerPort
from domain.services.locator import ElementLocator, UiTarget, by_selector


class ElementNotFoundError(LookupError):
    """Raised when an action requires an element that is not on the page."""


class ActionPrimitives:
    """Click, type and settle helpers tolerant of elements that come and go."""

    def __init__(
        self,
        *,
        browser: BrowserPagePort,
        locator: ElementLocator,
        clock: ClockPort,
        logger: LoggerPort,
        timings: Timings | None = None,
    ) -> None:
        self._browser = browser
        self._locator = locator
        self._clock = clock
        self._logger = logger
        self._timings = timings or Timings()

    async def pause(self, seconds: float | None = None) -> None:
        await self._clock.sleep(self._timings.step_pause if seconds is None else seconds)

    async def click_resilient(
        self,
        target: str | UiTarget,
        timeout: float | None = None,
    ) -> bool:
        """Scroll into view, settle, click; fall back to an in-page click.

        Never raises. Returns whether some click was delivered.
        """
        wait = self._timings.click_timeout if timeout is None else timeout
        if isinstance(target, UiTarget):
            selector = await self._locator.locate(target)
            if selector is None:
                return False
            fallback = selector
        else:
            fallback = target
            selector = target if await self._visible(target, wait) else None

        if selector is not None:
            try:
                await self._browser.scroll_into_view(selector)
                await self._clock.sleep(self._timings.click_settle)
                await self._browser.click(selector)
                return True
            except Exception as exc:
                self._logger.warning("click_failed", selector=selector, error=str(exc))

        try:
            return await self._browser.dispatch_click(fallback)
        except Exception as exc:
            self._logger.warning("dispatch_click_failed", selector=fallback, error=str(exc))
            return False

    async def type_into(
        self,
        target: str | UiTarget,
        text: str,
        *,
        clear: bool = False,
        timeout: float | None = None,
    ) -> None:
        wait = self._timings.locate_timeout if timeout is None else timeout
        resolved = target if isinstance(target, UiTarget) else UiTarget(
            name=target,
            candidates=(by_selector(target, timeout=wait, require_enabled=False),),
        )
        selector = await self._locator.locate(resolved)
        if selector is None:
            raise ElementNotFoundError(f"Cannot type into missing element: {resolved.name}")
        if clear:
            await self._browser.clear_value(selector)
        await self._browser.type_text(selector, text)

    async def _visible(self, selector: str, timeout: float) -> bool:
        try:
            return await self._browser.wait_for_visible(selector, timeout)
        except Exception as exc:
            self._logger.warning("wait_for_visible_failed", selector=selector, error=str(exc))
            return False
