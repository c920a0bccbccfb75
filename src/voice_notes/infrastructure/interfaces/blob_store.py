"""Abstract interface for temporary upload storage."""

from abc import ABC, abstractmethod
import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from voice_notes.domain.models import AudioUpload, StoredBlob


class BlobStore(ABC):
    """Abstract base class for per-request upload storage."""

    @abstractmethod
    def ensure_directory_exists(self) -> None:
        """Creates the upload location if it does not exist yet."""

    @abstractmethod
    def acquire(self, upload: AudioUpload | None) -> StoredBlob:
        """
        Persists an uploaded file under a freshly generated name.

        Args:
            upload: The audio field of the request, or None if it was absent.

        Returns:
            Handle to the stored file.

        Raises:
            MissingAudioError: If no audio field was uploaded.
            FileTooLargeError: If the upload exceeds the size ceiling.
            UploadError: If the file cannot be written.
        """

    @abstractmethod
    def release(self, blob: StoredBlob) -> None:
        """
        Deletes a stored file. Failures are logged, never raised.

        Args:
            blob: Handle returned by acquire.
        """

    @asynccontextmanager
    async def hold(self, upload: AudioUpload | None) -> AsyncIterator[StoredBlob]:
        """
        Stores an upload for the duration of the block, then releases it.

        Disk writes and deletes run in a worker thread so concurrent requests
        are not held up behind one another.
        """
        blob = await asyncio.to_thread(self.acquire, upload)
        try:
            yield blob
        finally:
            await asyncio.to_thread(self.release, blob)
