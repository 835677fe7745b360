from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import Any, Protocol, Sequence, runtime_checkable

from domain.models import ApplicationOutcome, StoredOutcome
from domain.page_scripts import PageScript


@runtime_checkable
class BrowserPagePort(Protocol):
    """
    Browser automation primitives the core drives.

    Elements are addressed by CSS selector. Every method that waits takes a
    timeout in seconds and reports absence as a negative result instead of
    raising. ``click`` and ``type_text`` may raise when the element cannot
    be interacted with; callers decide how to recover.
    """

    async def goto(self, url: str) -> None:
        ...

    async def wait_for_load(self) -> None:
        ...

    def current_url(self) -> str:
        ...

    async def wait_for_visible(self, selector: str, timeout: float) -> bool:
        ...

    async def is_present(self, selector: str) -> bool:
        ...

    async def is_enabled(self, selector: str) -> bool:
        ...

    async def scroll_into_view(self, selector: str) -> None:
        ...

    async def click(self, selector: str) -> None:
        ...

    async def dispatch_click(self, selector: str) -> bool:
        ...

    async def type_text(self, selector: str, text: str) -> None:
        ...

    async def clear_value(self, selector: str) -> None:
        ...

    async def press_key(self, key: str) -> None:
        ...

    async def text_content(self, selector: str) -> str | None:
        ...

    async def attribute(self, selector: str, name: str) -> str | None:
        ...

    async def find_by_text(self, tag: str, needles: Sequence[str]) -> str | None:
        ...

    async def evaluate(self, script: PageScript, arg: Any = None) -> Any:
        ...


@runtime_checkable
class OutcomeRecorderPort(Protocol):
    """Append-only, non-blocking outcome recording."""

    @abstractmethod
    def append(self, outcome: ApplicationOutcome) -> None:
        ...


@runtime_checkable
class OutcomeSinkPort(Protocol):
    """Blocking writer behind the recorder (CSV file, SQLite table)."""

    @abstractmethod
    def write(self, outcome: ApplicationOutcome) -> None:
        ...


@runtime_checkable
class OutcomeRepositoryPort(Protocol):
    @abstractmethod
    def list_all(self) -> Sequence[StoredOutcome]:
        ...


@runtime_checkable
class UserInteractionPort(Protocol):
    """Operator-facing progress messages."""

    async def send_info(self, message: str) -> None:
        ...


@runtime_checkable
class MessageCatalogPort(Protocol):
    """Localized operator text, selected by locale at startup."""

    @property
    def locale(self) -> str:
        ...

    def text(self, key: str, **params: Any) -> str:
        ...

    def tokens(self, key: str) -> tuple[str, ...]:
        ...


@runtime_checkable
class ClockPort(Protocol):
    """Time source and suspension point for deterministic tests."""

    def now(self) -> datetime:
        ...

    def monotonic(self) -> float:
        ...

    async def sleep(self, seconds: float) -> None:
        ...


@runtime_checkable
class IdGeneratorPort(Protocol):
    def new_run_id(self) -> str:
        ...


@runtime_checkable
class LoggerPort(Protocol):
    """Structured, testable logging abstraction."""

    def info(self, message: str, **fields: Any) -> None:
        ...

    def warning(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, **fields: Any) -> None:
        ...


__all__ = [
    "BrowserPagePort",
    "OutcomeRecorderPort",
    "OutcomeSinkPort",
    "OutcomeRepositoryPort",
    "UserInteractionPort",
    "MessageCatalogPort",
    "ClockPort",
    "IdGeneratorPort",
    "LoggerPort",
]
