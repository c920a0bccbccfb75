"""Concrete implementations of infrastructure interfaces."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .gemini_summarizer import GeminiSummarizer
from .local_blob_store import LocalBlobStore
from .supabase_identity import SupabaseIdentityProvider

__all__ = [
    "AssemblyAITranscriber",
    "GeminiSummarizer",
    "LocalBlobStore",
    "SupabaseIdentityProvider",
]
