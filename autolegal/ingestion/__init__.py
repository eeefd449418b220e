from autolegal.ingestion.encoder import BatchEncoding, FileEncoder
from autolegal.ingestion.exceptions import EncodingError
from autolegal.ingestion.file_handles import FileHandle, InMemoryFile, LocalFile
from autolegal.ingestion.models import EncodedFile

__all__ = [
    "BatchEncoding",
    "EncodedFile",
    "EncodingError",
    "FileEncoder",
    "FileHandle",
    "InMemoryFile",
    "LocalFile",
]
