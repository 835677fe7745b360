from __future__ import annotations

from app import OutcomeFacade
from domain.models import ApplicationOutcome, ApplicationStatus
from infra.persistence import SQLiteOutcomeRepository
from test.mocks import FakeClock


def _write(repo: SQLiteOutcomeRepository, job_id: str, status: ApplicationStatus) -> None:
    repo.write(ApplicationOutcome(job_id=job_id, title=f"Job {job_id}", link=None, status=status))


def test_facade_lists_and_summarises_all_runs(tmp_path) -> None:
    db = str(tmp_path / "outcomes.db")
    first = SQLiteOutcomeRepository(db, run_id="run-1", clock=FakeClock())
    _write(first, "1", ApplicationStatus.APPLIED)
    _write(first, "2", ApplicationStatus.SKIPPED)
    first.close()

    repo = SQLiteOutcomeRepository(db, run_id="run-2", clock=FakeClock())
    _write(repo, "3", ApplicationStatus.APPLIED)
    facade = OutcomeFacade(outcome_repo=repo)

    assert [o.job_id for o in facade.get_outcomes()] == ["1", "2", "3"]
    summary = facade.get_summary()
    assert summary.total == 3
    assert summary.count(ApplicationStatus.APPLIED) == 2
    assert summary.count(ApplicationStatus.SKIPPED) == 1
    assert summary.count(ApplicationStatus.ALREADY_APPLIED) == 0
    repo.close()


def test_facade_filters_by_run_id() -> None:
    repo = SQLiteOutcomeRepository(run_id="run-9", clock=FakeClock())
    _write(repo, "1", ApplicationStatus.ALREADY_APPLIED)
    facade = OutcomeFacade(outcome_repo=repo)

    assert [o.run_id for o in facade.get_outcomes("run-9")] == ["run-9"]
    assert facade.get_outcomes("other") == []
    assert facade.get_summary("other").total == 0
    repo.close()
