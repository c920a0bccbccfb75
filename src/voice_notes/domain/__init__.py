"""Domain layer exports."""

from .models import (
    AudioUpload,
    AuthenticatedUser,
    FileInfo,
    PipelineFailure,
    PipelineResult,
    PipelineStage,
    PipelineSuccess,
    StoredBlob,
)
from .prompts import build_summary_prompt

__all__ = [
    "AudioUpload",
    "AuthenticatedUser",
    "FileInfo",
    "PipelineFailure",
    "PipelineResult",
    "PipelineStage",
    "PipelineSuccess",
    "StoredBlob",
    "build_summary_prompt",
]
