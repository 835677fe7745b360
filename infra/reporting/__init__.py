from .csv_report_writer import CsvReportWriter
from .queued_outcome_recorder import QueuedOutcomeRecorder

__all__ = ["CsvReportWriter", "QueuedOutcomeRecorder"]
