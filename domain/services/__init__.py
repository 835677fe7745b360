"""
Domain services.

These services orchestrate the Easy Apply run while depending only on
domain models and ports so that the browser, storage and console adapters
can remain thin.
"""

from .actions import ActionPrimitives, ElementNotFoundError
from .dedup import DeduplicationTracker
from .eligibility import EligibilityDecision, EligibilityFilter
from .field_policy import FieldPolicy
from .form_driver import ApplicationFormDriver, FormResult
from .locator import ElementLocator, UiTarget, by_label_text, by_script, by_selector, by_text
from .pagination import ResultPageNavigator
from .run_controller import ApplicationRunController, ApplyLimitReached, parse_total_job_count
from .search import SearchFilterService
from .setup import RunSetup, SetupError, SignInService
from .waiting import wait_for_condition

__all__ = [
    "ActionPrimitives",
    "ElementNotFoundError",
    "DeduplicationTracker",
    "EligibilityDecision",
    "EligibilityFilter",
    "FieldPolicy",
    "ApplicationFormDriver",
    "FormResult",
    "ElementLocator",
    "UiTarget",
    "by_label_text",
    "by_script",
    "by_selector",
    "by_text",
    "ResultPageNavigator",
    "ApplicationRunController",
    "ApplyLimitReached",
    "parse_total_job_count",
    "SearchFilterService",
    "RunSetup",
    "SetupError",
    "SignInService",
    "wait_for_condition",
]
