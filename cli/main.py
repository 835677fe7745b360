from __future__ import annotations

import argparse
import asyncio
from dataclasses import replace
from typing import Sequence

from app import EasyApplyRunner, OutcomeFacade
from domain.models import ApplicationStatus, RunSummary
from domain.services import SetupError
from infra.browser import PlaywrightBrowserPage
from infra.config import FileSystemConfigProvider
from infra.i18n import JsonMessageCatalog
from infra.interaction import ConsoleUserInteraction
from infra.persistence import SQLiteOutcomeRepository
from infra.reporting import CsvReportWriter, QueuedOutcomeRecorder
from infra.runtime import StructuredLogger, SystemClock, UuidIdGenerator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="easy-apply")
    parser.add_argument("--db-path", default="easy_apply.db")
    sub = parser.add_subparsers(dest="command", required=True)

    run_p = sub.add_parser("run", help="Search LinkedIn and submit Easy Apply applications")
    run_p.add_argument("--config-dir", default="./config", help="Path to config folder")
    run_p.add_argument("--report-path", default="report.csv")
    run_p.add_argument("--headless", dest="headless", action="store_true", default=None)
    run_p.add_argument("--no-headless", dest="headless", action="store_false")

    validate_p = sub.add_parser("validate-config", help="Check config.json and credentials")
    validate_p.add_argument("--config-dir", default="./config", help="Path to config folder")

    list_p = sub.add_parser("list-outcomes", help="Print recorded application outcomes")
    list_p.add_argument("--run-id", default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger = StructuredLogger()

    if args.command == "validate-config":
        errors = FileSystemConfigProvider(args.config_dir).validate()
        if errors:
            _print_errors(errors)
            return 1
        print("Config OK")
        return 0

    if args.command == "list-outcomes":
        repo = SQLiteOutcomeRepository(db_path=args.db_path, clock=SystemClock())
        try:
            facade = OutcomeFacade(outcome_repo=repo)
            for item in facade.get_outcomes(args.run_id):
                print(f"{item.recorded_at} | {item.run_id} | {item.status.value} | {item.job_title} | {item.job_url}")
            summary = facade.get_summary(args.run_id)
            counts = ", ".join(f"{status.value}: {summary.count(status)}" for status in ApplicationStatus)
            print(f"total={summary.total} ({counts})")
        finally:
            repo.close()
        return 0

    if args.command == "run":
        return _handle_run(args, logger)

    raise SystemExit(f"Unsupported command: {args.command}")


def _handle_run(args: argparse.Namespace, logger: StructuredLogger) -> int:
    config_provider = FileSystemConfigProvider(args.config_dir)
    errors = config_provider.validate(require_credentials=False)
    if errors:
        _print_errors(errors)
        return 1

    config = config_provider.get_run_config()
    if args.headless is not None:
        config = replace(config, headless=args.headless)
    credentials = config_provider.get_credentials()
    messages = JsonMessageCatalog(config.locale)
    ui = ConsoleUserInteraction()
    clock = SystemClock()
    ids = UuidIdGenerator()
    run_id = ids.new_run_id()

    print("\n==========================================\n")
    print(f"\t{messages.text('app_title')}")
    print("\n==========================================\n")

    async def _run() -> RunSummary:
        repo = SQLiteOutcomeRepository(db_path=args.db_path, run_id=run_id, clock=clock)
        recorder = QueuedOutcomeRecorder(
            sinks=[CsvReportWriter(args.report_path), repo],
            logger=logger,
        )
        recorder.start()
        try:
            page = PlaywrightBrowserPage(
                user_data_dir=config.user_data_dir,
                headless=config.headless,
                executable_path=config.browser_path,
                window_size=config.window_size,
                action_timeout=config.timings.click_timeout,
            )
            try:
                await page.launch()
            except Exception as exc:
                await page.close()
                raise SetupError(f"Cannot launch the browser: {exc}") from exc
            try:
                runner = EasyApplyRunner(
                    config=config,
                    browser=page,
                    recorder=recorder,
                    ui=ui,
                    messages=messages,
                    clock=clock,
                    id_generator=ids,
                    logger=logger,
                    run_id=run_id,
                )
                return await runner.run(credentials)
            finally:
                await page.close()
        finally:
            await recorder.close()
            repo.close()

    try:
        summary = asyncio.run(_run())
    except SetupError as exc:
        logger.error("setup_failed", error=str(exc))
        print(messages.text("setup_failed", error=exc))
        return 1

    applied = sum(1 for o in summary.outcomes if o.status == ApplicationStatus.APPLIED)
    print(
        messages.text(
            "run_finished",
            reason=summary.reason.value,
            processed=summary.processed,
            applied=applied,
        )
    )
    return 0


def _print_errors(errors: Sequence[str]) -> None:
    print("Config validation failed:")
    for err in errors:
        print(f"  - {err}")


if __name__ == "__main__":
    raise SystemExit(main())
