"""Local filesystem implementation of the BlobStore interface."""

import os
import time
import uuid
from pathlib import Path

from voice_notes.domain.models import AudioUpload, StoredBlob
from voice_notes.exceptions import (
    CleanupError,
    FileTooLargeError,
    MissingAudioError,
    UploadError,
)
from voice_notes.logging import setup_logging

from .interfaces import BlobStore

logger = setup_logging()

CHUNK_SIZE = 1024 * 1024


class LocalBlobStore(BlobStore):
    """Stores each upload as its own file in a shared upload directory."""

    def __init__(self, directory: Path, max_bytes: int, field_name: str = "audio"):
        self._directory = Path(directory).resolve()
        self._max_bytes = max_bytes
        self._field_name = field_name

    @property
    def directory(self) -> Path:
        return self._directory

    def ensure_directory_exists(self) -> None:
        if not self._directory.exists():
            self._directory.mkdir(parents=True, exist_ok=True)
            logger.info("Upload directory created", extra={"directory": str(self._directory)})
        else:
            logger.info("Upload directory already exists", extra={"directory": str(self._directory)})

    def generate_filename(self, original_filename: str) -> str:
        """Builds a collision-resistant name that keeps the original extension."""
        extension = os.path.splitext(original_filename)[1]
        timestamp_ms = int(time.time() * 1000)
        return f"{self._field_name}-{timestamp_ms}-{uuid.uuid4().hex}{extension}"

    def acquire(self, upload: AudioUpload | None) -> StoredBlob:
        if upload is None:
            raise MissingAudioError()

        if upload.size is not None and upload.size > self._max_bytes:
            logger.info(
                "Upload rejected before write",
                extra={"file_name": upload.filename, "size": upload.size},
            )
            raise FileTooLargeError(self._max_bytes)

        filename = self.generate_filename(upload.filename)
        path = self._directory / filename

        try:
            size = self._write(upload, path)
        except FileExistsError as e:
            logger.exception("Generated upload name already taken", extra={"file_name": filename})
            raise UploadError(f"Failed to store upload: {e}", cause=e) from e
        except FileTooLargeError:
            self._discard_partial(path)
            logger.info(
                "Upload rejected during write",
                extra={"file_name": upload.filename, "max_bytes": self._max_bytes},
            )
            raise
        except OSError as e:
            self._discard_partial(path)
            logger.exception("Failed to store upload", extra={"file_name": upload.filename})
            raise UploadError(f"Failed to store upload: {e}", cause=e) from e

        blob = StoredBlob(
            filename=filename,
            path=path,
            size=size,
            content_type=upload.content_type,
            original_filename=upload.filename,
        )
        logger.info(
            "Upload stored",
            extra={"file_name": filename, "size": size, "content_type": blob.content_type},
        )
        return blob

    def release(self, blob: StoredBlob) -> None:
        try:
            self._delete(blob)
            logger.info("Stored blob deleted", extra={"file_name": blob.filename})
        except CleanupError as e:
            logger.warning(str(e), exc_info=e.cause, extra={"file_name": blob.filename})

    def _write(self, upload: AudioUpload, path: Path) -> int:
        written = 0
        with open(path, "xb") as destination:
            while True:
                chunk = upload.stream.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > self._max_bytes:
                    raise FileTooLargeError(self._max_bytes)
                destination.write(chunk)
        return written

    def _delete(self, blob: StoredBlob) -> None:
        try:
            blob.path.unlink()
        except OSError as e:
            raise CleanupError(blob.filename, e) from e

    def _discard_partial(self, path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError:
            logger.warning("Failed to remove partial upload", extra={"path": str(path)})
