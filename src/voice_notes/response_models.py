"""Response models for the voice notes API."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from voice_notes.domain.models import FileInfo


class SummarizeResponse(BaseModel):
    """Response returned after a successful summarize request."""

    model_config = ConfigDict(populate_by_name=True)

    status: Literal["success"] = "success"
    summary: str
    transcription: str
    file_info: FileInfo = Field(alias="fileInfo")


class ErrorResponse(BaseModel):
    """Body of 400 and 401 responses."""

    error: str


class ProcessingErrorResponse(BaseModel):
    """Body of 500 responses."""

    error: str
    details: str


class HealthResponse(BaseModel):
    status: str
