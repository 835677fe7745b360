from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Sequence


@dataclass(frozen=True)
class JobListing:
    """A single row of a search result page.

    ``title``, ``company`` and ``link`` are read from the job details pane
    and may be missing when the page variant does not render them.
    """

    job_id: str
    index_on_page: int
    title: str | None = None
    company: str | None = None
    link: str | None = None


class ApplicationStatus(str, Enum):
    """Status written to the outcome report."""

    APPLIED = "Applied"
    SKIPPED = "Skipped"
    ALREADY_APPLIED = "Already applied"


@dataclass(frozen=True)
class ApplicationOutcome:
    """Result of processing one job. Created once, never mutated."""

    job_id: str
    title: str | None
    link: str | None
    status: ApplicationStatus


@dataclass(frozen=True)
class StoredOutcome:
    """An outcome as persisted by the SQLite sink."""

    run_id: str
    job_id: str
    job_title: str
    job_url: str
    status: ApplicationStatus
    recorded_at: str


@dataclass
class PaginationCursor:
    current_page: int = 1

    def __post_init__(self) -> None:
        if self.current_page < 1:
            raise ValueError("current_page must be >= 1")


class NavigatorState(str, Enum):
    ON_PAGE = "on_page"
    ADVANCING = "advancing"
    VERIFIED = "verified"
    NO_MORE_PAGES = "no_more_pages"


class FormState(str, Enum):
    """Screens the application dialog can be classified into."""

    START = "start"
    FAST_FORWARD = "fast_forward"
    FIELD_COMPLETION = "field_completion"
    AWAITING_COMPLETION = "awaiting_completion"
    SUBMITTED = "submitted"
    STALLED = "stalled"


class FormTerminal(str, Enum):
    """``SKIPPED`` means the dialog never opened; ``STALLED`` means it never completed."""

    NONE = "none"
    SUBMITTED = "submitted"
    SKIPPED = "skipped"
    STALLED = "stalled"


@dataclass
class FormProgressState:
    """Transient state of one application attempt."""

    steps_attempted: int = 0
    state: FormState = FormState.START
    terminal: FormTerminal = FormTerminal.NONE
    dialog_seen: bool = False


class FieldKind(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    RADIO = "radio"
    SELECT = "select"


@dataclass(frozen=True)
class FieldOption:
    """One choice of a radio group or dropdown.

    ``value`` is whatever the page needs to select it: the option value for
    dropdowns, the element key for radio inputs.
    """

    value: str
    label: str
    selected: bool = False


@dataclass(frozen=True)
class FormField:
    """An input found on the current dialog screen."""

    key: str
    kind: FieldKind
    label: str = ""
    placeholder: str = ""
    aria_label: str = ""
    required: bool = False
    current_value: str = ""
    options: Sequence[FieldOption] = field(default_factory=tuple)

    def descriptors(self) -> tuple[str, ...]:
        return (
            self.label.lower(),
            self.placeholder.lower(),
            self.aria_label.lower(),
        )


@dataclass(frozen=True)
class FieldAnswer:
    key: str
    kind: FieldKind
    value: str


class TerminationReason(str, Enum):
    TOTAL_REACHED = "total_reached"
    APPLY_LIMIT = "apply_limit"
    STALL = "stall"
    NO_MORE_PAGES = "no_more_pages"


@dataclass(frozen=True)
class RunSummary:
    run_id: str
    reason: TerminationReason
    total_jobs: int
    processed: int
    pages_visited: int
    outcomes: Sequence[ApplicationOutcome] = field(default_factory=tuple)


@dataclass(frozen=True)
class Timings:
    """Fixed settle delays and bounded waits, in seconds."""

    click_settle: float = 1.0
    step_pause: float = 3.0
    short_pause: float = 2.0
    locate_timeout: float = 5.0
    click_timeout: float = 10.0
    form_click_timeout: float = 3.0
    page_verify_timeout: float = 10.0
    page_settle: float = 5.0
    page_fallback_settle: float = 8.0
    poll_interval: float = 0.5


@dataclass(frozen=True)
class FormDefaults:
    """Values the field policy writes into required inputs."""

    experience_years: int = 5
    expected_salary: int = 85000
    numeric_fallback: int = 5
    text_placeholder: str = " "


@dataclass(frozen=True)
class SearchConfig:
    keywords: Sequence[str]
    location: str = ""
    workplace_types: Mapping[str, str] = field(default_factory=dict)
    easy_apply_only: bool = True
    past_24_hours: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", tuple(self.keywords))
        object.__setattr__(
            self, "workplace_types", MappingProxyType(dict(self.workplace_types))
        )

    @property
    def keyword_query(self) -> str:
        return " OR ".join(self.keywords)


@dataclass(frozen=True)
class RunConfig:
    """Read-only run configuration loaded at startup."""

    base_url: str
    search: SearchConfig
    locale: str = "en"
    excluded_companies: Sequence[str] = field(default_factory=tuple)
    excluded_titles: Sequence[str] = field(default_factory=tuple)
    jobs_per_page: int = 25
    start_page: int = 1
    record_already_applied: bool = False
    headless: bool = False
    browser_path: str | None = None
    window_size: tuple[int, int] | None = None
    user_data_dir: str = "./userData"
    form_defaults: FormDefaults = field(default_factory=FormDefaults)
    timings: Timings = field(default_factory=Timings)


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str


__all__ = [
    "JobListing",
    "ApplicationStatus",
    "ApplicationOutcome",
    "StoredOutcome",
    "PaginationCursor",
    "NavigatorState",
    "FormState",
    "FormTerminal",
    "FormProgressState",
    "FieldKind",
    "FieldOption",
    "FormField",
    "FieldAnswer",
    "TerminationReason",
    "RunSummary",
    "Timings",
    "FormDefaults",
    "SearchConfig",
    "RunConfig",
    "Credentials",
]
