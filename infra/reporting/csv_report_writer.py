from __future__ import annotations

import csv
from pathlib import Path

from domain.models import ApplicationOutcome

_FIELDNAMES = ("Job Title", "Link", "Status")


class CsvReportWriter:
    """Appends one row per outcome to ``report.csv``.

    The header is written only when the file is created, so reports from
    earlier runs are kept.
    """

    def __init__(self, path: str = "report.csv") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def write(self, outcome: ApplicationOutcome) -> None:
        new_file = not self._path.exists() or self._path.stat().st_size == 0
        if new_file:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=_FIELDNAMES)
            if new_file:
                writer.writeheader()
            writer.writerow(
                {
                    "Job Title": outcome.title or "",
                    "Link": outcome.link or "",
                    "Status": outcome.status.value,
                }
            )
