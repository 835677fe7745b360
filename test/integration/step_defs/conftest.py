"""Shared fixtures and context for BDD step definitions."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from app import EasyApplyRunner, OutcomeFacade
from domain import selectors
from domain.models import RunConfig, RunSummary, SearchConfig
from infra.persistence import SQLiteOutcomeRepository
from infra.reporting import CsvReportWriter, QueuedOutcomeRecorder
from test.mocks import (
    FakeBrowserPage,
    FakeClock,
    FakeJob,
    FakeJobBoard,
    FakeUserInteraction,
    InMemoryLogger,
    SequentialIdGenerator,
    StaticMessageCatalog,
)


@dataclass
class RunContext:
    """Holds mutable state shared across BDD steps."""

    report_path: Path
    pages: list[list[FakeJob]] = field(default_factory=list)
    board_options: dict[str, Any] = field(default_factory=dict)
    excluded_companies: tuple[str, ...] = ()
    page: FakeBrowserPage = field(default_factory=FakeBrowserPage)
    board: FakeJobBoard | None = None
    ui: FakeUserInteraction = field(default_factory=FakeUserInteraction)
    logger: InMemoryLogger = field(default_factory=InMemoryLogger)
    facade: OutcomeFacade | None = None
    summary: RunSummary | None = None


@pytest.fixture()
def ctx(tmp_path: Path) -> RunContext:
    return RunContext(report_path=tmp_path / "report.csv")


def _install_search_controls(page: FakeBrowserPage) -> None:
    page.add(selectors.GLOBAL_NAV_JOBS)
    page.add(selectors.KEYWORD_INPUT)
    page.add(selectors.LOCATION_INPUT)
    page.add(selectors.EASY_APPLY_FILTER[0])
    page.add(selectors.DATE_POSTED_FILTER[0])
    page.add("#past-day", tag=".artdeco-button__text", text="Past 24 hours")
    page.add(selectors.SHOW_RESULTS_BUTTON[0])
    page.scripts["date_filter_applied"] = True


def run_easy_apply(ctx: RunContext) -> None:
    """Run setup and the application loop against the fake board."""
    _install_search_controls(ctx.page)
    ctx.board = FakeJobBoard(ctx.page, ctx.pages, **ctx.board_options)
    config = RunConfig(
        base_url="https://www.linkedin.com/",
        search=SearchConfig(keywords=("python developer",), location="Berlin"),
        excluded_companies=ctx.excluded_companies,
    )
    clock = FakeClock()
    repo = SQLiteOutcomeRepository(run_id="run-bdd", clock=clock)

    async def _run() -> RunSummary:
        async with QueuedOutcomeRecorder(
            sinks=[CsvReportWriter(str(ctx.report_path)), repo],
            logger=ctx.logger,
        ) as recorder:
            runner = EasyApplyRunner(
                config=config,
                browser=ctx.page,
                recorder=recorder,
                ui=ctx.ui,
                messages=StaticMessageCatalog(),
                clock=clock,
                id_generator=SequentialIdGenerator(),
                logger=ctx.logger,
                run_id="run-bdd",
            )
            return await runner.run(None)

    ctx.summary = asyncio.run(_run())
    ctx.facade = OutcomeFacade(outcome_repo=repo)
