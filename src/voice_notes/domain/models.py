"""Domain models for the summarize pipeline."""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Annotated, BinaryIO, Literal, Union

from pydantic import BaseModel, Field


class PipelineStage(StrEnum):
    """States of one summarize pipeline invocation."""

    RECEIVED = "received"
    AUTHENTICATED = "authenticated"
    STORED = "stored"
    TRANSCRIBING = "transcribing"
    SUMMARIZING = "summarizing"
    CLEANING_UP = "cleaning_up"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class AudioUpload:
    """The audio file field of an inbound multipart request."""

    filename: str
    content_type: str
    size: int | None
    stream: BinaryIO


class StoredBlob(BaseModel, frozen=True):
    """An uploaded file persisted to the temporary upload directory."""

    filename: str
    path: Path
    size: int
    content_type: str
    original_filename: str


class AuthenticatedUser(BaseModel, frozen=True):
    """Identity resolved from a validated bearer credential."""

    id: str
    email: str | None = None


class FileInfo(BaseModel, frozen=True):
    """Upload details echoed back to the client."""

    originalname: str
    size: int
    mimetype: str


class PipelineSuccess(BaseModel, frozen=True):
    status: Literal["success"] = "success"
    summary: str
    transcription: str
    file_info: FileInfo


class PipelineFailure(BaseModel, frozen=True):
    status: Literal["error"] = "error"
    message: str
    detail: str


PipelineResult = Annotated[
    Union[PipelineSuccess, PipelineFailure], Field(discriminator="status")
]
