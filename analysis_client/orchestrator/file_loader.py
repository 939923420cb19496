import asyncio

from analysis_client.errors.exceptions import FileError
from analysis_client.validation.models import FileHandle


class FileLoader:
    """Reads the bytes behind a FileHandle without blocking the event loop."""

    async def load(self, handle: FileHandle) -> bytes:
        """Return the file's bytes.

        Raises:
            FileError: ``notFound`` if the path does not exist, ``readError``
                for any other read failure or a handle with nothing behind it.
        """
        if handle.payload is not None:
            return handle.payload
        if handle.path is None:
            raise FileError("readError", ValueError(f"No content behind handle '{handle.name}'"))
        try:
            return await asyncio.to_thread(handle.path.read_bytes)
        except FileNotFoundError as exc:
            raise FileError("notFound", exc) from exc
        except OSError as exc:
            raise FileError("readError", exc) from exc
