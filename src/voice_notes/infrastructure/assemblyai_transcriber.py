"""AssemblyAI implementation of the TranscriptionService interface."""

import assemblyai as aai

from voice_notes.domain.models import StoredBlob
from voice_notes.exceptions import TranscriptionError
from voice_notes.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    def transcribe(self, blob: StoredBlob) -> str:
        """
        Streams the stored audio file to AssemblyAI and returns its text.

        The transcriber is expected to be configured with the language hint;
        the returned text is passed through untouched.
        """
        logger.info("Starting transcription", extra={"file_name": blob.filename})
        try:
            with open(blob.path, "rb") as audio_stream:
                transcript = self._transcriber.transcribe(audio_stream)

            if transcript.status == aai.TranscriptStatus.error:
                raise TranscriptionError(blob.filename, Exception(transcript.error))

            if transcript.text is None:
                raise TranscriptionError(
                    blob.filename, Exception("Transcription returned no text")
                )

            logger.info(
                "Audio transcription successful",
                extra={"file_name": blob.filename, "characters": len(transcript.text)},
            )
            return transcript.text

        except TranscriptionError:
            logger.warning("AssemblyAI reported a failed transcript", extra={"file_name": blob.filename})
            raise
        except Exception as e:
            logger.exception("AssemblyAI transcription failed", extra={"file_name": blob.filename})
            raise TranscriptionError(blob.filename, e) from e
