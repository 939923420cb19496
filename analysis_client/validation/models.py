import mimetypes
from dataclasses import dataclass
from pathlib import Path

from analysis_client.errors.exceptions import AppError, FileError


@dataclass(frozen=True)
class FileHandle:
    """Opaque handle on the user's data file.

    Backed either by a filesystem ``path`` or by an in-memory ``payload``
    (e.g. the bundled example file fetched over HTTP).
    """

    name: str
    size: int
    declared_type: str
    path: Path | None = None
    payload: bytes | None = None

    @classmethod
    def from_path(cls, path: Path) -> "FileHandle":
        """Describe a file on disk. The declared type is guessed from its name.

        Raises:
            FileError: ``notFound`` if the path does not exist, ``readError``
                if it cannot be inspected.
        """
        try:
            size = path.stat().st_size
        except FileNotFoundError as exc:
            raise FileError("notFound", exc) from exc
        except OSError as exc:
            raise FileError("readError", exc) from exc
        declared_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            size=size,
            declared_type=declared_type or "application/octet-stream",
            path=path,
        )

    @classmethod
    def from_bytes(
        cls,
        name: str,
        payload: bytes,
        declared_type: str = "text/plain",
    ) -> "FileHandle":
        return cls(name=name, size=len(payload), declared_type=declared_type, payload=payload)


@dataclass(frozen=True)
class AnalysisRequest:
    """One user action: the raw options text and the chosen file, if any."""

    options_text: str
    file: FileHandle | None


@dataclass(frozen=True)
class Accepted:
    options_text: str
    file: FileHandle


@dataclass(frozen=True)
class Rejected:
    error: AppError

    @property
    def code(self) -> str:
        return self.error.code


ValidationOutcome = Accepted | Rejected
