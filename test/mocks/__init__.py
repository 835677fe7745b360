"""
Reusable fakes and in-memory implementations for tests.
"""

from .fake_browser_page import FakeBrowserPage, FakeElement
from .fake_job_board import FakeJob, FakeJobBoard, radio_field, text_field
from .fake_outcomes import InMemoryOutcomeRecorder, InMemoryOutcomeSink, StaticMessageCatalog
from .fake_runtime import FakeClock, InMemoryLogger, SequentialIdGenerator
from .fake_user_interaction import FakeUserInteraction

__all__ = [
    "FakeBrowserPage",
    "FakeElement",
    "FakeJob",
    "FakeJobBoard",
    "radio_field",
    "text_field",
    "FakeUserInteraction",
    "InMemoryOutcomeRecorder",
    "InMemoryOutcomeSink",
    "StaticMessageCatalog",
    "FakeClock",
    "SequentialIdGenerator",
    "InMemoryLogger",
]
