"""Acceptance rules applied to a request before any engine work."""

from analysis_client.config.settings import Settings
from analysis_client.errors.exceptions import AppError, FileError, ValidationError
from analysis_client.validation.models import (
    Accepted,
    AnalysisRequest,
    FileHandle,
    Rejected,
    ValidationOutcome,
)

DEFAULT_MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024


class InputValidator:
    """Checks options text and file shape. Pure: no I/O, no engine calls."""

    def __init__(
        self,
        *,
        max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES,
        accepted_types: tuple[str, ...] = ("text/plain",),
        accepted_extensions: tuple[str, ...] = (".txt",),
    ) -> None:
        self._max_file_size_bytes = max_file_size_bytes
        self._accepted_types = tuple(t.lower() for t in accepted_types)
        self._accepted_extensions = tuple(e.lower() for e in accepted_extensions)

    @classmethod
    def from_settings(cls, settings: Settings) -> "InputValidator":
        return cls(
            max_file_size_bytes=settings.max_file_size_bytes,
            accepted_types=tuple(settings.accepted_file_types),
            accepted_extensions=tuple(settings.accepted_file_extensions),
        )

    def validate(self, request: AnalysisRequest) -> ValidationOutcome:
        """Return ``Accepted`` with the trimmed options text, or ``Rejected``.

        Checks run in order: options emptiness, file presence, file size,
        file type. The first failing check wins.
        """
        try:
            options_text = self.sanitize_options(request.options_text)
            file = self.check_file(request.file)
        except AppError as exc:
            return Rejected(exc)
        return Accepted(options_text, file)

    @staticmethod
    def sanitize_options(options_text: str | None) -> str:
        """Trim the options text.

        Raises:
            ValidationError: ``emptyOptions`` when nothing is left after trimming.
        """
        trimmed = (options_text or "").strip()
        if not trimmed:
            raise ValidationError("emptyOptions")
        return trimmed

    def check_file(self, file: FileHandle | None) -> FileHandle:
        """Return ``file`` if acceptable.

        Raises:
            ValidationError: ``noFile`` or ``invalidFileType``.
            FileError: ``tooLarge``.
        """
        if file is None:
            raise ValidationError("noFile")
        if file.size > self._max_file_size_bytes:
            raise FileError("tooLarge")
        if not self._has_accepted_type(file):
            raise ValidationError("invalidFileType")
        return file

    def _has_accepted_type(self, file: FileHandle) -> bool:
        name_ok = file.name.lower().endswith(self._accepted_extensions)
        type_ok = file.declared_type.lower() in self._accepted_types
        return name_ok and type_ok
