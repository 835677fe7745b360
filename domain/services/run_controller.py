from __future__ import annotations

import re
from dataclasses import replace

from domain import selectors
from domain.models import (
    ApplicationOutcome,
    ApplicationStatus,
    JobListing,
    RunConfig,
    RunSummary,
    TerminationReason,
)
from domain.page_scripts import JOB_CARD_IDS, SCROLL_JOB_LIST
from domain.ports import (
    BrowserPagePort,
    IdGeneratorPort,
    LoggerPort,
    MessageCatalogPort,
    OutcomeRecorderPort,
    UserInteractionPort,
)
from domain.services.actions import ActionPrimitives
from domain.services.dedup import DeduplicationTracker
from domain.services.eligibility import EligibilityFilter
from domain.services.form_driver import ApplicationFormDriver
from domain.services.pagination import ResultPageNavigator


_COUNT_PATTERN = re.compile(r"\d[\d,.\s\xa0]*")


class ApplyLimitReached(Exception):
    """The site reports that the daily Easy Apply limit has been hit."""


class ApplicationRunController:
    """Pages -> jobs -> eligibility -> apply -> outcome, until a stop condition."""

    def __init__(
        self,
        *,
        config: RunConfig,
        browser: BrowserPagePort,
        actions: ActionPrimitives,
        navigator: ResultPageNavigator,
        tracker: DeduplicationTracker,
        eligibility: EligibilityFilter,
        form_driver: ApplicationFormDriver,
        recorder: OutcomeRecorderPort,
        ui: UserInteractionPort,
        messages: MessageCatalogPort,
        id_generator: IdGeneratorPort,
        logger: LoggerPort,
        run_id: str | None = None,
    ) -> None:
        self._config = config
        self._browser = browser
        self._actions = actions
        self._navigator = navigator
        self._tracker = tracker
        self._eligibility = eligibility
        self._form_driver = form_driver
        self._recorder = recorder
        self._ui = ui
        self._messages = messages
        self._ids = id_generator
        self._logger = logger
        self._run_id = run_id

    async def run(self) -> RunSummary:
        run_id = self._run_id or self._ids.new_run_id()
        total = await self.read_total_job_count()
        self._logger.info(
            "run_started",
            run_id=run_id,
            total_jobs=total,
            start_page=self._config.start_page,
        )

        if self._config.start_page > 1:
            await self._ui.send_info(self._messages.text("navigating_to_page", page=self._config.start_page))
            page = await self._navigator.seek(self._config.start_page)
            await self._ui.send_info(self._messages.text("starting_from_page", page=page))

        outcomes: list[ApplicationOutcome] = []
        processed = 0
        pages_visited = 0
        reason: TerminationReason | None = None

        try:
            while reason is None:
                if processed >= total:
                    reason = TerminationReason.TOTAL_REACHED
                    break
                await self._ui.send_info(
                    self._messages.text("processing_page", page=self._navigator.current_page)
                )
                await self._actions.pause()

                job_ids = [str(i) for i in (await self._browser.evaluate(JOB_CARD_IDS) or [])]
                if not self._tracker.register_page(job_ids):
                    await self._ui.send_info(self._messages.text("no_new_jobs"))
                    reason = TerminationReason.STALL
                    break
                pages_visited += 1

                for index in range(min(self._config.jobs_per_page, len(job_ids))):
                    processed += 1
                    await self._ui.send_info(
                        self._messages.text("job_no", current=processed, total=total)
                    )
                    outcome = await self._handle_job(index, job_ids[index])
                    if outcome is not None:
                        self._recorder.append(outcome)
                        outcomes.append(outcome)
                    if processed >= total:
                        reason = TerminationReason.TOTAL_REACHED
                        break
                if reason is not None:
                    break

                await self._browser.evaluate(SCROLL_JOB_LIST)
                next_page = self._navigator.current_page + 1
                if not await self._navigator.advance():
                    await self._ui.send_info(self._messages.text("no_more_pages"))
                    reason = TerminationReason.NO_MORE_PAGES
                else:
                    await self._ui.send_info(self._messages.text("moved_to_page", page=next_page))
        except ApplyLimitReached:
            await self._ui.send_info(self._messages.text("limit"))
            reason = TerminationReason.APPLY_LIMIT

        if reason is TerminationReason.TOTAL_REACHED:
            await self._ui.send_info(self._messages.text("end_of_script"))
        self._logger.info(
            "run_finished",
            run_id=run_id,
            reason=reason.value,
            processed=processed,
            recorded=len(outcomes),
            pages_visited=pages_visited,
        )
        return RunSummary(
            run_id=run_id,
            reason=reason,
            total_jobs=total,
            processed=processed,
            pages_visited=pages_visited,
            outcomes=tuple(outcomes),
        )

    async def read_total_job_count(self) -> int:
        if not await self._browser.wait_for_visible(
            selectors.TOTAL_RESULTS_SUBTITLE, self._config.timings.locate_timeout
        ):
            self._logger.warning("total_job_count_unavailable")
            return 0
        text = await self._browser.text_content(selectors.TOTAL_RESULTS_SUBTITLE) or ""
        return parse_total_job_count(text)

    async def _handle_job(self, index: int, job_id: str) -> ApplicationOutcome | None:
        listing = JobListing(job_id=job_id, index_on_page=index)
        try:
            listing = await self._open_job(listing)
            return await self._process_job(listing)
        except ApplyLimitReached:
            raise
        except Exception as exc:
            self._logger.error(
                "job_processing_failed",
                job_id=job_id,
                index=index,
                error=str(exc),
            )
            await self._ui.send_info(self._messages.text("job_skipped"))
            return self._outcome(listing, ApplicationStatus.SKIPPED)

    async def _open_job(self, listing: JobListing) -> JobListing:
        await self._browser.evaluate(SCROLL_JOB_LIST)
        await self._actions.click_resilient(selectors.job_card(listing.index_on_page))
        await self._actions.pause()
        return replace(
            listing,
            company=_clean(await self._browser.text_content(selectors.COMPANY_NAME_LINK)),
            title=_clean(await self._browser.text_content(selectors.JOB_TITLE_LINK)),
            link=await self._browser.attribute(selectors.JOB_TITLE_LINK, "href"),
        )

    async def _process_job(self, listing: JobListing) -> ApplicationOutcome | None:
        if not await self._browser.is_present(selectors.EASY_APPLY_BUTTON):
            await self._ui.send_info(self._messages.text("already_applied"))
            if self._config.record_already_applied:
                return self._outcome(listing, ApplicationStatus.ALREADY_APPLIED)
            return None

        decision = self._eligibility.evaluate(company=listing.company, title=listing.title)
        if not decision.eligible:
            self._logger.info(
                "job_excluded",
                job_id=listing.job_id,
                rule=decision.reason,
                matched=decision.matched,
            )
            if decision.reason == "company":
                await self._ui.send_info(self._messages.text("skip_company", company=listing.company))
            else:
                await self._ui.send_info(self._messages.text("skip_title", title=listing.title))
            return None

        await self._ui.send_info(self._messages.text("apply_to", title=listing.title or "?"))
        await self._actions.pause()
        if await self._apply_limit_reached():
            raise ApplyLimitReached()

        await self._actions.click_resilient(selectors.EASY_APPLY_BUTTON)
        await self._actions.pause()
        await self._browser.dispatch_click(selectors.SAFETY_REMINDER_CONTINUE)

        result = await self._form_driver.drive()
        self._logger.info(
            "job_form_finished",
            job_id=listing.job_id,
            terminal=result.terminal.value,
            steps=result.steps_attempted,
        )
        if result.submitted:
            return self._outcome(listing, ApplicationStatus.APPLIED)
        await self._ui.send_info(self._messages.text("job_skipped"))
        return self._outcome(listing, ApplicationStatus.SKIPPED)

    async def _apply_limit_reached(self) -> bool:
        text = await self._browser.text_content(selectors.INLINE_FEEDBACK_MESSAGE)
        return bool(text) and "limit" in text.lower()

    @staticmethod
    def _outcome(listing: JobListing, status: ApplicationStatus) -> ApplicationOutcome:
        return ApplicationOutcome(
            job_id=listing.job_id,
            title=listing.title,
            link=listing.link,
            status=status,
        )


def parse_total_job_count(text: str) -> int:
    """``"1,234 results"`` -> 1234, ``"1,000+ results"`` -> 1000; no number -> 0.

    An open-ended count is read as its lower bound.
    """
    match = _COUNT_PATTERN.search(text)
    if match is None:
        return 0
    digits = re.sub(r"\D", "", match.group(0))
    return int(digits) if digits else 0


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None
