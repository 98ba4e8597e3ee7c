"""Exceptions raised by the E-Pay Pro engine."""


class EPayError(Exception):
    """Base class for all E-Pay Pro errors."""


class FormValidationError(EPayError, ValueError):
    """Raised when raw form input cannot become a valid record."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class UnknownRecordError(EPayError, LookupError):
    """Raised when an update targets a record id that is not in the store."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"No {kind} with id {record_id!r}")


class InsightsUnavailableError(EPayError):
    """Raised when the AI summary service cannot produce a usable answer."""
