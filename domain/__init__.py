"""
Domain layer package.

This package contains the Easy Apply run logic, its models and ports,
independent of any specific browser driver, storage or console.
"""

from .models import (  # noqa: F401
    ApplicationOutcome,
    ApplicationStatus,
    Credentials,
    FormDefaults,
    JobListing,
    PaginationCursor,
    RunConfig,
    RunSummary,
    SearchConfig,
    StoredOutcome,
    TerminationReason,
    Timings,
)
from .ports import (  # noqa: F401
    BrowserPagePort,
    ClockPort,
    IdGeneratorPort,
    LoggerPort,
    MessageCatalogPort,
    OutcomeRecorderPort,
    OutcomeRepositoryPort,
    OutcomeSinkPort,
    UserInteractionPort,
)

__all__ = [
    # Models
    "JobListing",
    "ApplicationStatus",
    "ApplicationOutcome",
    "StoredOutcome",
    "PaginationCursor",
    "TerminationReason",
    "RunSummary",
    "RunConfig",
    "SearchConfig",
    "FormDefaults",
    "Timings",
    "Credentials",
    # Ports
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
