"""Resolve logical UI targets through ordered fallback strategies.

A target is a name plus an ordered tuple of candidates. Each candidate is a
plain async closure ``(browser, clock) -> selector | None``; the locator
evaluates them in order and stops at the first one that resolves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Sequence

from domain.page_scripts import PageScript
from domain.ports import BrowserPagePort, ClockPort, LoggerPort
from domain.services.waiting import wait_for_condition

LocatorCandidate = Callable[[BrowserPagePort, ClockPort], Awaitable["str | None"]]


@dataclass(frozen=True)
class UiTarget:
    name: str
    candidates: tuple[LocatorCandidate, ...]


def by_selector(
    selector: str,
    *,
    timeout: float = 5.0,
    require_enabled: bool = True,
) -> LocatorCandidate:
    """Structural/attribute match: the selector must become visible in time."""

    async def _resolve(browser: BrowserPagePort, clock: ClockPort) -> str | None:
        if not await browser.wait_for_visible(selector, timeout):
            return None
        if require_enabled and not await browser.is_enabled(selector):
            return None
        return selector

    return _resolve


def by_label_text(
    selector: str,
    needles: Sequence[str],
    *,
    timeout: float = 5.0,
) -> LocatorCandidate:
    """Selector whose visible text contains one of ``needles`` (case-insensitive)."""
    lowered = tuple(n.lower() for n in needles)

    async def _resolve(browser: BrowserPagePort, clock: ClockPort) -> str | None:
        if not await browser.wait_for_visible(selector, timeout):
            return None
        text = (await browser.text_content(selector) or "").lower()
        if any(needle in text for needle in lowered):
            return selector
        return None

    return _resolve


def by_text(
    tag: str,
    needles: Sequence[str],
    *,
    timeout: float = 5.0,
    poll_interval: float = 0.5,
) -> LocatorCandidate:
    """Text-content predicate over every ``tag`` element on the page."""

    async def _resolve(browser: BrowserPagePort, clock: ClockPort) -> str | None:
        return await wait_for_condition(
            lambda: browser.find_by_text(tag, needles),
            clock,
            timeout=timeout,
            poll_interval=poll_interval,
        )

    return _resolve


def by_script(script: PageScript, template: str = 'button[aria-label="{}"]') -> LocatorCandidate:
    """In-page lookup returning an aria-label, turned into a selector."""

    async def _resolve(browser: BrowserPagePort, clock: ClockPort) -> str | None:
        label = await browser.evaluate(script)
        if not label:
            return None
        return template.format(str(label).replace('"', '\\"'))

    return _resolve


class ElementLocator:
    """Try each candidate of a target in priority order; absence is not an error."""

    def __init__(
        self,
        *,
        browser: BrowserPagePort,
        clock: ClockPort,
        logger: LoggerPort,
    ) -> None:
        self._browser = browser
        self._clock = clock
        self._logger = logger

    async def locate(self, target: UiTarget) -> str | None:
        for position, candidate in enumerate(target.candidates, start=1):
            try:
                found = await candidate(self._browser, self._clock)
            except Exception as exc:
                self._logger.warning(
                    "locator_candidate_failed",
                    target=target.name,
                    candidate=position,
                    error=str(exc),
                )
                continue
            if found:
                return found
        self._logger.info(
            "locator_exhausted",
            target=target.name,
            candidates=len(target.candidates),
        )
        return None
