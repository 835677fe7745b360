"""Infrastructure adapters – concrete implementations of domain ports."""

from .browser import PlaywrightBrowserPage
from .config import FileSystemConfigProvider
from .i18n import JsonMessageCatalog
from .interaction import ConsoleUserInteraction
from .persistence import SQLiteOutcomeRepository
from .reporting import CsvReportWriter, QueuedOutcomeRecorder
from .runtime import StructuredLogger, SystemClock, UuidIdGenerator

__all__ = [
    "PlaywrightBrowserPage",
    "FileSystemConfigProvider",
    "JsonMessageCatalog",
    "ConsoleUserInteraction",
    "SQLiteOutcomeRepository",
    "CsvReportWriter",
    "QueuedOutcomeRecorder",
    "SystemClock",
    "UuidIdGenerator",
    "StructuredLogger",
]
