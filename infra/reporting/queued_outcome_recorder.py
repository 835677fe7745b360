from __future__ import annotations

import asyncio
from typing import Sequence

from domain.models import ApplicationOutcome
from domain.ports import LoggerPort, OutcomeSinkPort


class QueuedOutcomeRecorder:
    """
    Non-blocking ``OutcomeRecorderPort`` in front of blocking sinks.

    ``append`` only enqueues. A background task drains the queue in order
    and hands each outcome to every sink on a worker thread, so a slow disk
    never stalls the browser flow. ``close`` waits until everything that was
    appended has been written.
    """

    def __init__(self, sinks: Sequence[OutcomeSinkPort], logger: LoggerPort) -> None:
        self._sinks = tuple(sinks)
        self._logger = logger
        self._queue: asyncio.Queue[ApplicationOutcome | None] | None = None
        self._worker: asyncio.Task[None] | None = None
        self._written = 0

    @property
    def written(self) -> int:
        return self._written

    async def __aenter__(self) -> "QueuedOutcomeRecorder":
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def start(self) -> None:
        if self._worker is not None:
            return
        self._queue = asyncio.Queue()
        self._worker = asyncio.create_task(self._drain())

    def append(self, outcome: ApplicationOutcome) -> None:
        if self._queue is None:
            raise RuntimeError("Recorder not started. Call start() first.")
        self._queue.put_nowait(outcome)

    async def close(self) -> None:
        if self._queue is None or self._worker is None:
            return
        self._queue.put_nowait(None)
        await self._worker
        self._worker = None
        self._queue = None

    async def _drain(self) -> None:
        assert self._queue is not None
        queue = self._queue
        while True:
            outcome = await queue.get()
            if outcome is None:
                return
            for sink in self._sinks:
                try:
                    await asyncio.to_thread(sink.write, outcome)
                except Exception as exc:
                    self._logger.error(
                        "outcome_write_failed",
                        sink=type(sink).__name__,
                        job_id=outcome.job_id,
                        error=str(exc),
                    )
            self._written += 1
