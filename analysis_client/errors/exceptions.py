from enum import Enum


class ErrorOrigin(str, Enum):
    """Where a failure came from. Every surfaced error belongs to exactly one."""

    VALIDATION = "validation"
    FILE = "file"
    NETWORK = "network"
    ANALYSIS = "analysis"
    DATABASE = "database"


class AppError(Exception):
    """Base exception for all classified failures.

    Carries a stable ``code`` and the underlying ``cause``; the cause is for
    diagnostic logging only and never reaches a user-facing message.
    """

    origin: ErrorOrigin = ErrorOrigin.ANALYSIS

    def __init__(self, code: str = "default", cause: BaseException | None = None) -> None:
        super().__init__(f"{self.origin.value}:{code}")
        self.code = code
        self.cause = cause


class ValidationError(AppError):
    """Raised when the request is malformed or incomplete."""

    origin = ErrorOrigin.VALIDATION


class FileError(AppError):
    """Raised when the data file has the wrong shape or cannot be read."""

    origin = ErrorOrigin.FILE


class NetworkError(AppError):
    """Raised when static text (documentation, example payload) cannot be fetched."""

    origin = ErrorOrigin.NETWORK


class AnalysisError(AppError):
    """Raised when the engine fails to initialize, produce or render a report."""

    origin = ErrorOrigin.ANALYSIS


class DatabaseError(AppError):
    """Raised when the persistent cache cannot connect or a transaction fails."""

    origin = ErrorOrigin.DATABASE
