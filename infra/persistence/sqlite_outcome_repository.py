from __future__ import annotations

import sqlite3
from typing import Sequence

from domain.models import ApplicationOutcome, ApplicationStatus, StoredOutcome
from domain.ports import ClockPort

from ._datetime import dt_to_iso


class SQLiteOutcomeRepository:
    """
    SQLite-backed implementation of ``OutcomeSinkPort`` and ``OutcomeRepositoryPort``.

    Rows are only ever inserted; each one carries the id of the run that
    produced it and the time it was written.
    """

    _SCHEMA_SQL = """\
    CREATE TABLE IF NOT EXISTS application_outcomes (
        id          INTEGER PRIMARY KEY AUTOINCREMENT,
        run_id      TEXT NOT NULL,
        job_id      TEXT NOT NULL,
        job_title   TEXT NOT NULL,
        job_url     TEXT NOT NULL,
        status      TEXT NOT NULL,
        recorded_at TEXT NOT NULL
    );
    CREATE INDEX IF NOT EXISTS idx_application_outcomes_run
        ON application_outcomes (run_id);
    """

    def __init__(self, db_path: str = ":memory:", *, run_id: str = "", clock: ClockPort) -> None:
        # Writes arrive from the recorder's worker thread.
        self._conn = sqlite3.connect(db_path, check_same_thread=False)
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.executescript(self._SCHEMA_SQL)
        self._run_id = run_id
        self._clock = clock

    def write(self, outcome: ApplicationOutcome) -> None:
        self._conn.execute(
            "INSERT INTO application_outcomes "
            "(run_id, job_id, job_title, job_url, status, recorded_at) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (
                self._run_id,
                outcome.job_id,
                outcome.title or "",
                outcome.link or "",
                outcome.status.value,
                dt_to_iso(self._clock.now()),
            ),
        )
        self._conn.commit()

    def list_all(self) -> Sequence[StoredOutcome]:
        rows = self._conn.execute(
            "SELECT run_id, job_id, job_title, job_url, status, recorded_at "
            "FROM application_outcomes ORDER BY id",
        ).fetchall()
        return [self._row_to_outcome(r) for r in rows]

    def list_run(self, run_id: str) -> Sequence[StoredOutcome]:
        rows = self._conn.execute(
            "SELECT run_id, job_id, job_title, job_url, status, recorded_at "
            "FROM application_outcomes WHERE run_id = ? ORDER BY id",
            (run_id,),
        ).fetchall()
        return [self._row_to_outcome(r) for r in rows]

    def close(self) -> None:
        self._conn.close()

    @staticmethod
    def _row_to_outcome(row: tuple[object, ...]) -> StoredOutcome:
        return StoredOutcome(
            run_id=str(row[0]),
            job_id=str(row[1]),
            job_title=str(row[2]),
            job_url=str(row[3]),
            status=ApplicationStatus(row[4]),
            recorded_at=str(row[5]),
        )
