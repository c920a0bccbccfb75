"""Infrastructure interface exports."""

from .blob_store import BlobStore
from .identity_provider import IdentityProvider
from .summarization_service import SummarizationService
from .transcription_service import TranscriptionService

__all__ = [
    "BlobStore",
    "IdentityProvider",
    "SummarizationService",
    "TranscriptionService",
]
