"""Custom exceptions used across schedule_io."""


class ScheduleIOError(Exception):
    """Base error for the package."""


class InvalidPathError(ScheduleIOError, FileNotFoundError):
    """Raised when the workbook path is missing or points to a directory."""


class MalformedRangeError(ScheduleIOError, ValueError):
    """Raised when a range expression cannot be decoded into two coordinates."""


class WorkbookReadError(ScheduleIOError):
    """Raised when the workbook exists but cannot be parsed."""


class ConfigError(ScheduleIOError):
    """Configuration related error."""
