"""Domain error codes for the analytics engine."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_TIME_WINDOW = "INVALID_TIME_WINDOW"
    INVALID_PERIOD = "INVALID_PERIOD"


@dataclass(eq=False)
class AnalyticsError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(AnalyticsError):
    """Raised when a single-event report targets an unknown event."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidTimeWindowError(AnalyticsError):
    """Raised when a clock bound is not a valid HH:MM value."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_WINDOW,
            message=f"Invalid time '{value}', expected HH:MM",
        )


class InvalidPeriodError(AnalyticsError):
    """Raised when a period selector cannot be resolved to calendar bounds."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_PERIOD, message=message)
