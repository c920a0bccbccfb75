"""Orchestrates the store, transcribe, summarize and cleanup sequence."""

import asyncio
from collections.abc import Callable
from typing import TypeVar

from voice_notes.domain.models import (
    AudioUpload,
    FileInfo,
    PipelineFailure,
    PipelineResult,
    PipelineStage,
    PipelineSuccess,
)
from voice_notes.exceptions import SummarizationError, TranscriptionError
from voice_notes.infrastructure.interfaces import (
    BlobStore,
    SummarizationService,
    TranscriptionService,
)
from voice_notes.logging import setup_logging

logger = setup_logging()

T = TypeVar("T")

PROCESSING_ERROR_MESSAGE = "Error processing audio"


class SummarizeHandler:
    """Runs one upload through transcription and summarization."""

    def __init__(
        self,
        store: BlobStore,
        transcription_service: TranscriptionService,
        summarization_service: SummarizationService,
        transcription_timeout: float = 300.0,
        summarization_timeout: float = 120.0,
    ):
        self._store = store
        self._transcription_service = transcription_service
        self._summarization_service = summarization_service
        self._transcription_timeout = transcription_timeout
        self._summarization_timeout = summarization_timeout

    async def process(self, upload: AudioUpload | None) -> PipelineResult:
        """
        Stores the upload, transcribes it, summarizes the transcript and
        deletes the stored file before returning.

        The stored file is released exactly once on every path that got past
        storage, including stage failures and timeouts.

        Args:
            upload: The request's audio field, or None if it was absent.

        Returns:
            PipelineSuccess, or PipelineFailure when a provider call failed.

        Raises:
            UploadError: If the upload is missing, too large, or unwritable.
        """
        self._log_stage(PipelineStage.RECEIVED, file_name=upload.filename if upload else None)

        async with self._store.hold(upload) as blob:
            self._log_stage(PipelineStage.STORED, file_name=blob.filename)
            try:
                self._log_stage(PipelineStage.TRANSCRIBING, file_name=blob.filename)
                transcription = await self._call_with_timeout(
                    self._transcription_service.transcribe,
                    blob,
                    self._transcription_timeout,
                    lambda e: TranscriptionError(blob.filename, e),
                )

                self._log_stage(PipelineStage.SUMMARIZING, file_name=blob.filename)
                summary = await self._call_with_timeout(
                    self._summarization_service.summarize,
                    transcription,
                    self._summarization_timeout,
                    SummarizationError,
                )
            except (TranscriptionError, SummarizationError) as e:
                logger.warning(
                    "Pipeline stage failed",
                    extra={"file_name": blob.filename, "error": str(e)},
                )
                result = PipelineFailure(message=PROCESSING_ERROR_MESSAGE, detail=str(e))
            else:
                result = PipelineSuccess(
                    summary=summary,
                    transcription=transcription,
                    file_info=FileInfo(
                        originalname=blob.original_filename,
                        size=blob.size,
                        mimetype=blob.content_type,
                    ),
                )
            self._log_stage(PipelineStage.CLEANING_UP, file_name=blob.filename)

        final = PipelineStage.SUCCEEDED if result.status == "success" else PipelineStage.FAILED
        self._log_stage(final, file_name=blob.filename)
        return result

    async def _call_with_timeout(
        self,
        func: Callable[..., T],
        argument,
        timeout: float,
        error_factory: Callable[[Exception], Exception],
    ) -> T:
        try:
            return await asyncio.wait_for(asyncio.to_thread(func, argument), timeout=timeout)
        except asyncio.TimeoutError as e:
            raise error_factory(TimeoutError(f"timed out after {timeout:g}s")) from e

    def _log_stage(self, stage: PipelineStage, **fields) -> None:
        logger.info("Pipeline stage", extra={"stage": str(stage), **fields})
