from __future__ import annotations

from domain import selectors
from domain.models import NavigatorState, PaginationCursor, Timings
from domain.page_scripts import SCROLL_PAGINATION
from domain.ports import BrowserPagePort, ClockPort, LoggerPort
from domain.services.locator import ElementLocator
from domain.services.targets import next_page_control
from domain.services.waiting import wait_for_condition


class ResultPageNavigator:
    """
    Moves through numbered result pages.

    ``advance`` walks ``ON_PAGE -> ADVANCING -> VERIFIED`` (or
    ``NO_MORE_PAGES``). When the active indicator never reports the new
    page, a fallback click is dispatched and the cursor is advanced anyway.
    """

    def __init__(
        self,
        *,
        browser: BrowserPagePort,
        locator: ElementLocator,
        clock: ClockPort,
        logger: LoggerPort,
        timings: Timings | None = None,
        cursor: PaginationCursor | None = None,
    ) -> None:
        self._browser = browser
        self._locator = locator
        self._clock = clock
        self._logger = logger
        self._timings = timings or Timings()
        self._cursor = cursor or PaginationCursor()
        self._state = NavigatorState.ON_PAGE

    @property
    def current_page(self) -> int:
        return self._cursor.current_page

    @property
    def state(self) -> NavigatorState:
        return self._state

    async def advance(self) -> bool:
        """Move to the next page. Returns False once there are no more pages."""
        if self._state is NavigatorState.NO_MORE_PAGES:
            return False

        selector = await self._locator.locate(next_page_control())
        if selector is None:
            self._state = NavigatorState.NO_MORE_PAGES
            self._logger.info("no_more_pages", page=self.current_page)
            return False

        self._state = NavigatorState.ADVANCING
        expected = self.current_page + 1
        await self._browser.evaluate(SCROLL_PAGINATION)
        await self._clock.sleep(self._timings.short_pause)

        if await self._click_and_verify(selector, expected):
            self._state = NavigatorState.VERIFIED
            self._cursor.current_page = expected
            await self._clock.sleep(self._timings.page_settle)
        else:
            self._logger.warning(
                "page_advance_unverified",
                expected_page=expected,
                selector=selector,
            )
            try:
                await self._browser.dispatch_click(selector)
            except Exception as exc:
                self._logger.warning("page_fallback_click_failed", error=str(exc))
            await self._clock.sleep(self._timings.page_fallback_settle)
            self._cursor.current_page = expected

        self._state = NavigatorState.ON_PAGE
        return True

    async def seek(self, start_page: int) -> int:
        """Advance from the current page until ``start_page`` is reached."""
        while self.current_page < start_page:
            if not await self.advance():
                break
        return self.current_page

    async def _click_and_verify(self, selector: str, expected: int) -> bool:
        try:
            await self._browser.click(selector)
        except Exception as exc:
            self._logger.warning("page_click_failed", selector=selector, error=str(exc))
            return False
        verified = await wait_for_condition(
            lambda: self._active_page_is(expected),
            self._clock,
            timeout=self._timings.page_verify_timeout,
            poll_interval=self._timings.poll_interval,
        )
        return bool(verified)

    async def _active_page_is(self, expected: int) -> bool:
        text = await self._browser.text_content(selectors.ACTIVE_PAGE_INDICATOR)
        if not text:
            return False
        try:
            return int(text.strip()) == expected
        except ValueError:
            return False
