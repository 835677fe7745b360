"""Logical UI targets used by the services, each with its fallback chain."""

from __future__ import annotations

from domain import selectors
from domain.page_scripts import NEXT_PAGE_BY_INDICATOR, NEXT_PAGE_BY_SIBLING
from domain.services.locator import UiTarget, by_label_text, by_script, by_selector, by_text

_QUICK = 3.0

# Primary-button labels that move the dialog forward.
ADVANCE_LABELS = ("next", "continue", "review", "submit")


def next_page_control() -> UiTarget:
    return UiTarget(
        name="next page control",
        candidates=(by_script(NEXT_PAGE_BY_INDICATOR), by_script(NEXT_PAGE_BY_SIBLING)),
    )


def submit_control() -> UiTarget:
    return UiTarget(
        name="single-step submit",
        candidates=(
            by_label_text(selectors.FORM_PRIMARY_BUTTON, ("submit",), timeout=_QUICK),
            by_selector(selectors.SUBMIT_BUTTON_BY_LABEL, timeout=0),
        ),
    )


def continue_control() -> UiTarget:
    return UiTarget(
        name="continue control",
        candidates=(
            by_selector(selectors.FORM_CONTINUE_BUTTON, timeout=_QUICK),
            by_label_text(selectors.FORM_PRIMARY_BUTTON, ADVANCE_LABELS, timeout=0),
        ),
    )


def dialog_dismiss() -> UiTarget:
    return UiTarget(
        name="dialog dismiss",
        candidates=(by_selector(selectors.MODAL_DISMISS, timeout=_QUICK),)
        + tuple(by_selector(s, timeout=0) for s in selectors.MODAL_DISMISS_FALLBACKS),
    )


def easy_apply_filter() -> UiTarget:
    return UiTarget(
        name="easy apply filter",
        candidates=tuple(by_selector(s, timeout=5.0) for s in selectors.EASY_APPLY_FILTER),
    )


def date_posted_filter() -> UiTarget:
    return UiTarget(
        name="date posted filter trigger",
        candidates=tuple(by_selector(s, timeout=5.0) for s in selectors.DATE_POSTED_FILTER)
        + (by_text("button", ("date posted", "time posted"), timeout=0),),
    )


def past_day_option() -> UiTarget:
    return UiTarget(
        name="past 24 hours option",
        candidates=(by_text(".artdeco-button__text", ("past 24 hours", "past day"), timeout=0),)
        + tuple(by_selector(s, timeout=_QUICK) for s in selectors.PAST_DAY_OPTION),
    )


def show_results() -> UiTarget:
    return UiTarget(
        name="show results",
        candidates=tuple(by_selector(s, timeout=_QUICK) for s in selectors.SHOW_RESULTS_BUTTON),
    )
