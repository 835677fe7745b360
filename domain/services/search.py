from __future__ import annotations

from typing import Any, Awaitable, Mapping

from domain import selectors
from domain.models import SearchConfig
from domain.page_scripts import DATE_FILTER_APPLIED
from domain.ports import BrowserPagePort, LoggerPort, MessageCatalogPort, UserInteractionPort
from domain.services.actions import ActionPrimitives
from domain.services.targets import date_posted_filter, easy_apply_filter, past_day_option, show_results


class SearchFilterService:
    """Type the search query and narrow the results with the listing filters.

    Filters are best effort: a filter that cannot be set is logged and the
    run continues with whatever results the page shows.
    """

    def __init__(
        self,
        *,
        browser: BrowserPagePort,
        actions: ActionPrimitives,
        ui: UserInteractionPort,
        messages: MessageCatalogPort,
        logger: LoggerPort,
    ) -> None:
        self._browser = browser
        self._actions = actions
        self._ui = ui
        self._messages = messages
        self._logger = logger

    async def apply(self, search: SearchConfig) -> None:
        try:
            await self.search(search)
            if search.easy_apply_only:
                await self._guarded("easy_apply", self.easy_apply_filter())
            if search.past_24_hours:
                await self._guarded("date_posted", self.date_posted_filter())
            if search.workplace_types:
                await self._guarded("workplace", self.workplace_filter(search.workplace_types))
        except Exception as exc:
            self._logger.warning("search_failed", error=str(exc))
            await self._ui.send_info(self._messages.text("continue_with_results"))

    async def search(self, search: SearchConfig) -> None:
        await self._actions.click_resilient(selectors.GLOBAL_NAV_JOBS)
        await self._actions.pause()
        await self._actions.type_into(selectors.KEYWORD_INPUT, search.keyword_query)
        await self._actions.pause(1.0)
        if search.location:
            await self._actions.type_into(selectors.LOCATION_INPUT, search.location, clear=True)
        await self._browser.press_key("Enter")
        await self._actions.pause(2.0)

    async def easy_apply_filter(self) -> bool:
        clicked = await self._actions.click_resilient(easy_apply_filter())
        if not clicked:
            self._logger.info("filter_not_found", filter="easy_apply")
        await self._actions.pause()
        return clicked

    async def date_posted_filter(self) -> bool:
        await self._actions.pause()
        await self._actions.click_resilient(date_posted_filter())
        await self._actions.pause(2.0)
        await self._actions.click_resilient(past_day_option())
        await self._actions.pause(2.0)
        await self._actions.click_resilient(show_results())
        await self._actions.pause()
        applied = bool(await self._browser.evaluate(DATE_FILTER_APPLIED))
        if not applied:
            self._logger.warning("filter_not_applied", filter="date_posted")
        return applied

    async def workplace_filter(self, workplace_types: Mapping[str, str]) -> None:
        await self._actions.click_resilient(selectors.WORKPLACE_FILTER_TRIGGER)
        await self._actions.pause(2.0)
        for name, selector in workplace_types.items():
            if not await self._actions.click_resilient(selector):
                self._logger.info("workplace_option_missing", workplace=name)
        await self._actions.pause(2.0)
        await self._actions.click_resilient(selectors.WORKPLACE_SHOW_RESULTS)

    async def _guarded(self, name: str, step: Awaitable[Any]) -> None:
        try:
            await step
        except Exception as exc:
            self._logger.warning("filter_failed", filter=name, error=str(exc))
