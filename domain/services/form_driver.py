"""State machine driving one Easy Apply dialog to a terminal state.

Every iteration probes the dialog once and picks the next ``FormState``:

* ``START``: wait for the dialog; a dialog that never shows ends the attempt
  as ``SKIPPED``. A submit control on the first screen means a single-step
  application; click it and finish.
* ``FAST_FORWARD``: while the footer holds only a primary "Next" button,
  click through the informational screens without touching fields. A click
  that leaves the screen unchanged hands over to field completion.
* ``FIELD_COMPLETION``: answer required inputs via ``FieldPolicy`` and
  click the continue control.
* ``AWAITING_COMPLETION``: look for the completion dialog, another
  advancing control, or neither (the last screen was submitted).

The attempt counter bounds the whole loop; a dialog that never completes
is dismissed, discarded and reported as ``STALLED``. Callers surface both
``STALLED`` and ``SKIPPED`` as a skipped job.
"""

from __future__ import annotations

from dataclasses import dataclass

from domain import selectors
from domain.models import FormProgressState, FormState, FormTerminal, Timings
from domain.page_scripts import APPLY_FORM_ANSWERS, COLLECT_FORM_FIELDS
from domain.ports import BrowserPagePort, ClockPort, LoggerPort
from domain.services.actions import ActionPrimitives
from domain.services.field_policy import FieldPolicy, answers_to_payload, parse_form_fields
from domain.services.locator import ElementLocator
from domain.services.targets import ADVANCE_LABELS, continue_control, dialog_dismiss, submit_control
from domain.services.waiting import wait_for_condition

DEFAULT_MAX_STEPS = 30

_TERMINAL_STATES = (FormState.SUBMITTED, FormState.STALLED)
_DIALOG_MARKERS = (
    selectors.EASY_APPLY_MODAL,
    selectors.FORM_PRIMARY_BUTTON,
    selectors.FORM_CONTINUE_BUTTON,
)


@dataclass(frozen=True)
class FormResult:
    terminal: FormTerminal
    steps_attempted: int

    @property
    def submitted(self) -> bool:
        return self.terminal is FormTerminal.SUBMITTED


class ApplicationFormDriver:
    def __init__(
        self,
        *,
        browser: BrowserPagePort,
        locator: ElementLocator,
        actions: ActionPrimitives,
        clock: ClockPort,
        logger: LoggerPort,
        policy: FieldPolicy,
        timings: Timings | None = None,
        max_steps: int = DEFAULT_MAX_STEPS,
    ) -> None:
        self._browser = browser
        self._locator = locator
        self._actions = actions
        self._clock = clock
        self._logger = logger
        self._policy = policy
        self._timings = timings or Timings()
        self._max_steps = max_steps

    async def drive(self) -> FormResult:
        progress = FormProgressState()
        while progress.state not in _TERMINAL_STATES:
            if progress.steps_attempted >= self._max_steps:
                progress.state = FormState.STALLED
                break
            current = progress.state
            consumes_attempt = current is not FormState.AWAITING_COMPLETION
            try:
                progress.state = await self._step(progress)
            except Exception as exc:
                consumes_attempt = True
                self._logger.warning(
                    "form_step_failed",
                    state=current.value,
                    step=progress.steps_attempted + 1,
                    error=str(exc),
                )
            if consumes_attempt:
                progress.steps_attempted += 1

        if progress.state is FormState.SUBMITTED:
            await self._close_confirmation()
            progress.terminal = FormTerminal.SUBMITTED
        elif not progress.dialog_seen:
            self._logger.warning("form_dialog_missing", steps=progress.steps_attempted)
            progress.terminal = FormTerminal.SKIPPED
        else:
            self._logger.warning("form_stalled", steps=progress.steps_attempted)
            await self._abandon()
            progress.terminal = FormTerminal.STALLED
        return FormResult(terminal=progress.terminal, steps_attempted=progress.steps_attempted)

    async def _step(self, progress: FormProgressState) -> FormState:
        state = progress.state
        if state is FormState.START:
            return await self._start(progress)
        if state is FormState.FAST_FORWARD:
            return await self._fast_forward()
        if state is FormState.FIELD_COMPLETION:
            return await self._field_completion()
        return await self._await_completion(progress)

    async def _start(self, progress: FormProgressState) -> FormState:
        if not progress.dialog_seen:
            progress.dialog_seen = bool(
                await wait_for_condition(
                    self._dialog_open,
                    self._clock,
                    timeout=self._timings.locate_timeout,
                    poll_interval=self._timings.poll_interval,
                )
            )
            if not progress.dialog_seen:
                return FormState.STALLED
        submit = await self._locator.locate(submit_control())
        if submit is None:
            return FormState.FAST_FORWARD
        if await self._actions.click_resilient(submit, self._timings.form_click_timeout):
            return FormState.SUBMITTED
        return FormState.START

    async def _fast_forward(self) -> FormState:
        if await self._browser.is_present(selectors.FORM_CONTINUE_BUTTON):
            return FormState.FIELD_COMPLETION
        if not await self._browser.is_present(selectors.FORM_PRIMARY_BUTTON):
            return FormState.FIELD_COMPLETION
        label = await self._primary_label()
        await self._actions.click_resilient(
            selectors.FORM_PRIMARY_BUTTON, self._timings.form_click_timeout
        )
        await self._actions.pause()
        if "submit" in label:
            return FormState.AWAITING_COMPLETION
        if not await self._browser.is_present(selectors.FORM_CONTINUE_BUTTON) and (
            await self._primary_label() == label
        ):
            # Usually a required field on the first screen blocks "Next".
            self._logger.info("form_screen_unchanged", label=label)
            return FormState.FIELD_COMPLETION
        return FormState.FAST_FORWARD

    async def _field_completion(self) -> FormState:
        await self._complete_fields()
        await self._actions.pause(self._timings.click_settle)
        await self._actions.click_resilient(continue_control(), self._timings.form_click_timeout)
        return FormState.AWAITING_COMPLETION

    async def _await_completion(self, progress: FormProgressState) -> FormState:
        await self._actions.pause()
        if await self._browser.is_present(selectors.COMPLETION_DIALOG):
            return FormState.SUBMITTED
        if await self._browser.is_present(selectors.FORM_CONTINUE_BUTTON):
            return FormState.FIELD_COMPLETION
        label = await self._primary_label()
        if any(needle in label for needle in ADVANCE_LABELS):
            return FormState.FIELD_COMPLETION
        return FormState.SUBMITTED if progress.dialog_seen else FormState.STALLED

    async def _dialog_open(self) -> bool:
        for selector in _DIALOG_MARKERS:
            if await self._browser.is_present(selector):
                return True
        return False

    async def _primary_label(self) -> str:
        if not await self._browser.is_present(selectors.FORM_PRIMARY_BUTTON):
            return ""
        return (await self._browser.text_content(selectors.FORM_PRIMARY_BUTTON) or "").strip().lower()

    async def _complete_fields(self) -> int:
        if not await self._browser.is_present(selectors.EASY_APPLY_MODAL):
            self._logger.warning("form_root_missing", selector=selectors.EASY_APPLY_MODAL)
            return 0
        raw = await self._browser.evaluate(COLLECT_FORM_FIELDS, selectors.EASY_APPLY_MODAL)
        answers = self._policy.answer_all(parse_form_fields(raw))
        if not answers:
            return 0
        applied = await self._browser.evaluate(APPLY_FORM_ANSWERS, answers_to_payload(answers))
        self._logger.info("form_fields_completed", answered=len(answers), applied=applied)
        return int(applied or 0)

    async def _close_confirmation(self) -> None:
        await self._actions.pause()
        for selector in (selectors.MODAL_DISMISS, *selectors.MODAL_DISMISS_FALLBACKS):
            try:
                if await self._browser.dispatch_click(selector):
                    return
            except Exception as exc:
                self._logger.warning("confirmation_close_failed", selector=selector, error=str(exc))

    async def _abandon(self) -> None:
        await self._actions.pause()
        await self._actions.click_resilient(dialog_dismiss(), self._timings.form_click_timeout)
        await self._actions.pause()
        await self._actions.click_resilient(
            selectors.DISCARD_CONFIRM, self._timings.form_click_timeout
        )
