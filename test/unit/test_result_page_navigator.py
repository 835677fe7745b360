from __future__ import annotations

import asyncio

from domain import selectors
from domain.models import NavigatorState, PaginationCursor, Timings
from domain.services import ElementLocator, ResultPageNavigator
from test.mocks import FakeBrowserPage, FakeClock, FakeJob, FakeJobBoard, InMemoryLogger


def _navigator(page: FakeBrowserPage) -> tuple[ResultPageNavigator, FakeClock, InMemoryLogger]:
    clock = FakeClock()
    logger = InMemoryLogger()
    navigator = ResultPageNavigator(
        browser=page,
        locator=ElementLocator(browser=page, clock=clock, logger=logger),
        clock=clock,
        logger=logger,
        timings=Timings(),
        cursor=PaginationCursor(),
    )
    return navigator, clock, logger


def _pages(count: int) -> list[list[FakeJob]]:
    return [[FakeJob(job_id=f"{p}-{i}") for i in range(2)] for p in range(count)]


def test_advance_verifies_active_indicator() -> None:
    page = FakeBrowserPage()
    board = FakeJobBoard(page, _pages(3))
    navigator, _, logger = _navigator(page)

    assert asyncio.run(navigator.advance()) is True
    assert navigator.current_page == 2
    assert navigator.state is NavigatorState.ON_PAGE
    assert board.page_index == 1
    assert page.clicks == ['button[aria-label="Page 2"]']
    assert page.evaluated("scroll_pagination") == [None]
    assert "page_advance_unverified" not in logger.messages()


def test_unverified_advance_dispatches_fallback_and_moves_cursor() -> None:
    page = FakeBrowserPage()
    board = FakeJobBoard(page, _pages(2), pagination="degraded")
    navigator, clock, logger = _navigator(page)

    assert asyncio.run(navigator.advance()) is True
    assert navigator.current_page == 2
    assert board.page_index == 1
    assert page.dispatched == ['button[aria-label="Page 2"]']
    assert "page_advance_unverified" in logger.messages("warning")
    assert 8.0 in clock.sleeps


def test_indicator_that_never_updates_still_advances_after_timeout() -> None:
    page = FakeBrowserPage()
    page.scripts["next_page_by_indicator"] = "Page 2"
    page.add('button[aria-label="Page 2"]')
    page.add(selectors.ACTIVE_PAGE_INDICATOR, text="1")
    navigator, clock, logger = _navigator(page)

    assert asyncio.run(navigator.advance()) is True
    assert navigator.current_page == 2
    assert page.clicks == ['button[aria-label="Page 2"]']
    assert page.dispatched == ['button[aria-label="Page 2"]']
    assert clock.elapsed >= Timings().page_verify_timeout
    assert "page_advance_unverified" in logger.messages("warning")


def test_no_next_control_means_no_more_pages() -> None:
    page = FakeBrowserPage()
    FakeJobBoard(page, _pages(1))
    navigator, _, _ = _navigator(page)

    assert asyncio.run(navigator.advance()) is False
    assert navigator.state is NavigatorState.NO_MORE_PAGES
    assert navigator.current_page == 1
    assert asyncio.run(navigator.advance()) is False


def test_next_control_falls_back_to_sibling_lookup() -> None:
    page = FakeBrowserPage()
    page.scripts["next_page_by_sibling"] = "Page 2"
    page.add('button[aria-label="Page 2"]', on_click=lambda: setattr(page.elements[selectors.ACTIVE_PAGE_INDICATOR], "text", "2"))
    page.add(selectors.ACTIVE_PAGE_INDICATOR, text="1")
    navigator, _, _ = _navigator(page)

    assert asyncio.run(navigator.advance()) is True
    assert navigator.current_page == 2
    assert page.dispatched == []


def test_seek_stops_at_start_page() -> None:
    page = FakeBrowserPage()
    board = FakeJobBoard(page, _pages(5))
    navigator, _, _ = _navigator(page)

    assert asyncio.run(navigator.seek(3)) == 3
    assert board.page_index == 2


def test_seek_stops_early_when_pages_run_out() -> None:
    page = FakeBrowserPage()
    FakeJobBoard(page, _pages(2))
    navigator, _, _ = _navigator(page)

    assert asyncio.run(navigator.seek(4)) == 2
    assert navigator.state is NavigatorState.NO_MORE_PAGES
