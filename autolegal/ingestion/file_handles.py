import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class FileHandle(Protocol):
    """A user-selected file: display name, declared media type, payload."""

    @property
    def name(self) -> str: ...

    @property
    def media_type(self) -> str: ...

    def read(self) -> bytes | None:
        """Return the full payload, or None when nothing could be read."""
        ...


def guess_media_type(file_name: str) -> str:
    """Guess a MIME type from the file suffix; empty string when unknown."""
    media_type, _ = mimetypes.guess_type(file_name)
    return media_type or ""


class LocalFile:
    """A document on the local filesystem."""

    def __init__(self, path: Path, media_type: str | None = None) -> None:
        self._path = Path(path)
        self._media_type = (
            media_type if media_type is not None else guess_media_type(self._path.name)
        )

    @property
    def name(self) -> str:
        return self._path.name

    @property
    def media_type(self) -> str:
        return self._media_type

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> bytes:
        return self._path.read_bytes()


@dataclass(frozen=True)
class InMemoryFile:
    """A document whose bytes were already received, e.g. from an upload form."""

    name: str
    payload: bytes | None
    media_type: str = ""

    def read(self) -> bytes | None:
        return self.payload
