from __future__ import annotations

from typing import Iterable


class DeduplicationTracker:
    """Remembers every job id seen during a run.

    Used only to notice that a new page brought nothing new; it never
    filters jobs out of processing.
    """

    def __init__(self) -> None:
        self._seen: set[str] = set()

    @property
    def seen(self) -> frozenset[str]:
        return frozenset(self._seen)

    def register_page(self, job_ids: Iterable[str]) -> frozenset[str]:
        """Merge ``job_ids`` and return the ones not seen before.

        An empty result means the page is stale and the run should stop.
        """
        fresh = frozenset(job_ids) - self._seen
        self._seen |= fresh
        return fresh
