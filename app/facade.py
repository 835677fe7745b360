from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from domain.models import ApplicationStatus, StoredOutcome
from domain.ports import OutcomeRepositoryPort


@dataclass(frozen=True)
class OutcomeSummary:
    total: int
    by_status: Mapping[ApplicationStatus, int] = field(default_factory=dict)

    def count(self, status: ApplicationStatus) -> int:
        return self.by_status.get(status, 0)


class OutcomeFacade:
    """
    UI-facing facade over recorded outcomes.
    """

    def __init__(self, *, outcome_repo: OutcomeRepositoryPort) -> None:
        self._outcome_repo = outcome_repo

    def get_outcomes(self, run_id: str | None = None) -> Sequence[StoredOutcome]:
        outcomes = self._outcome_repo.list_all()
        if run_id is None:
            return outcomes
        return [o for o in outcomes if o.run_id == run_id]

    def get_summary(self, run_id: str | None = None) -> OutcomeSummary:
        outcomes = self.get_outcomes(run_id)
        counts = Counter(o.status for o in outcomes)
        return OutcomeSummary(
            total=len(outcomes),
            by_status={status: counts.get(status, 0) for status in ApplicationStatus},
        )
