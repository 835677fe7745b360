"""Application layer: facades and run composition used by the CLI."""

from .facade import OutcomeFacade, OutcomeSummary
from .runner import EasyApplyRunner

__all__ = ["OutcomeFacade", "OutcomeSummary", "EasyApplyRunner"]
