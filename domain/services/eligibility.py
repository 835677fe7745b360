from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class EligibilityDecision:
    eligible: bool
    reason: str | None = None
    matched: str | None = None


ELIGIBLE = EligibilityDecision(eligible=True)


class EligibilityFilter:
    """
    Company/title exclusion rules applied before any click on Apply.

    Companies match by case-insensitive substring. Titles match as whole
    words: a pattern only counts when it is not glued to another letter or
    digit on either side, so ``Java`` rejects "Senior Java Engineer" but not
    "Javascript Engineer". Missing values are unknown, never a rejection.
    """

    def __init__(
        self,
        *,
        excluded_companies: Sequence[str] = (),
        excluded_titles: Sequence[str] = (),
    ) -> None:
        self._companies = tuple(c.lower() for c in excluded_companies if c and c.strip())
        titles = [t for t in excluded_titles if t and t.strip()]
        self._title_pattern = (
            re.compile(
                r"(?<![A-Za-z0-9])(" + "|".join(re.escape(t.strip()) for t in titles) + r")(?![A-Za-z0-9])",
                re.IGNORECASE,
            )
            if titles
            else None
        )

    def company_excluded(self, company: str | None) -> str | None:
        if not company:
            return None
        lowered = company.lower()
        return next((c for c in self._companies if c in lowered), None)

    def title_excluded(self, title: str | None) -> str | None:
        if not title or self._title_pattern is None:
            return None
        match = self._title_pattern.search(title)
        return match.group(1) if match else None

    def evaluate(self, *, company: str | None, title: str | None) -> EligibilityDecision:
        matched = self.company_excluded(company)
        if matched is not None:
            return EligibilityDecision(eligible=False, reason="company", matched=matched)
        matched = self.title_excluded(title)
        if matched is not None:
            return EligibilityDecision(eligible=False, reason="title", matched=matched)
        return ELIGIBLE
