"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from voice_notes.domain.models import StoredBlob


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(self, blob: StoredBlob) -> str:
        """
        Transcribes a stored audio file and returns the recognized text.

        Args:
            blob: Handle to the audio file in the upload directory.

        Returns:
            The transcript text, verbatim from the provider.

        Raises:
            TranscriptionError: If transcription fails.
        """
        pass
