"""Turns user-selected files into base64 ``EncodedFile`` values."""

import asyncio
import base64
from collections.abc import Sequence
from dataclasses import dataclass, field

from autolegal.ingestion.exceptions import EncodingError
from autolegal.ingestion.file_handles import FileHandle
from autolegal.ingestion.models import EncodedFile
from autolegal.logging.logger import Log


@dataclass(frozen=True)
class BatchEncoding:
    """Outcome of encoding one selection batch.

    ``files`` keeps the order the files were selected in.
    """

    files: list[EncodedFile] = field(default_factory=list)
    errors: list[EncodingError] = field(default_factory=list)


class FileEncoder:
    """Reads file payloads off the event loop and base64-encodes them."""

    def __init__(self, max_file_size_bytes: int = 0) -> None:
        self._max_file_size_bytes = max(0, max_file_size_bytes)

    async def encode(self, handle: FileHandle) -> EncodedFile:
        """Encode a single file.

        Raises:
            EncodingError: if the payload cannot be read or exceeds the size limit.
        """
        try:
            payload = await asyncio.to_thread(handle.read)
        except (OSError, ValueError) as exc:
            raise EncodingError(handle.name, str(exc)) from exc

        if payload is None:
            raise EncodingError(handle.name, "файл не содержит данных")
        if self._max_file_size_bytes and len(payload) > self._max_file_size_bytes:
            raise EncodingError(
                handle.name,
                f"размер {len(payload)} байт превышает лимит "
                f"{self._max_file_size_bytes} байт",
            )

        return EncodedFile(
            name=handle.name,
            content=base64.b64encode(payload).decode("ascii"),
            media_type=handle.media_type or "",
        )

    async def encode_batch(self, handles: Sequence[FileHandle]) -> BatchEncoding:
        """Encode every file of a batch concurrently, keeping selection order."""
        outcomes = await asyncio.gather(
            *(self.encode(handle) for handle in handles),
            return_exceptions=True,
        )
        batch = BatchEncoding()
        for outcome in outcomes:
            if isinstance(outcome, EncodingError):
                Log.warning(f"Skipping file '{outcome.file_name}': {outcome.reason}")
                batch.errors.append(outcome)
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                batch.files.append(outcome)
        Log.info(f"Encoded {len(batch.files)} of {len(handles)} selected files")
        return batch
