"""Exception hierarchy for the reporting service."""


class ReportError(Exception):
    """Base exception for all reporting errors."""


class StoreUnavailableError(ReportError):
    """Raised when the live store cannot be reached at connection time."""


class UnknownReportError(ReportError, KeyError):
    """Raised when a report id is not part of the catalogue."""

    def __init__(self, report_id: str) -> None:
        super().__init__(report_id)
        self.report_id = report_id

    def __str__(self) -> str:
        return f"Unknown report: {self.report_id}"
