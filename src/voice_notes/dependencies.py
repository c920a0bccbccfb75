"""FastAPI dependency injection configuration."""

from dataclasses import dataclass
from typing import Annotated

import assemblyai as aai
from fastapi import Depends, Header, Request
from google import genai
from google.genai import types
from supabase import create_client

from voice_notes.config import AppConfig
from voice_notes.domain.models import AuthenticatedUser
from voice_notes.handlers import AuthGate, SummarizeHandler
from voice_notes.infrastructure import (
    AssemblyAITranscriber,
    GeminiSummarizer,
    LocalBlobStore,
    SupabaseIdentityProvider,
)
from voice_notes.infrastructure.interfaces import BlobStore
from voice_notes.logging import setup_logging

logger = setup_logging()


@dataclass(frozen=True)
class Services:
    """Everything the routes need, wired once per application."""

    auth_gate: AuthGate
    handler: SummarizeHandler
    store: BlobStore


def build_services(config: AppConfig) -> Services:
    """Constructs the production clients and composes the handlers."""
    # Supabase identity
    _supabase_client = create_client(config.supabase.url, config.supabase.key)
    _identity = SupabaseIdentityProvider(_supabase_client)

    # AssemblyAI setup
    aai.settings.api_key = config.assemblyai.api_key
    aai.settings.http_timeout = config.assemblyai.http_timeout_seconds
    _aai_config = aai.TranscriptionConfig(language_code=config.assemblyai.language_code)
    _transcriber = AssemblyAITranscriber(aai.Transcriber(config=_aai_config))

    # Gemini LLM
    _gemini_client = genai.Client(
        api_key=config.gemini.api_key,
        http_options=types.HttpOptions(
            timeout=int(config.gemini.http_timeout_seconds * 1000)
        ),
    )
    _summarizer = GeminiSummarizer(
        _gemini_client, config.gemini.model_name, config.gemini.max_output_tokens
    )

    # Temporary upload storage
    _store = LocalBlobStore(config.upload.directory, config.upload.max_bytes)

    logger.info(
        "Services configured",
        extra={
            "upload_dir": str(_store.directory),
            "gemini_model": config.gemini.model_name,
        },
    )

    return Services(
        auth_gate=AuthGate(_identity),
        handler=SummarizeHandler(
            _store,
            _transcriber,
            _summarizer,
            transcription_timeout=config.pipeline.transcription_timeout_seconds,
            summarization_timeout=config.pipeline.summarization_timeout_seconds,
        ),
        store=_store,
    )


def get_services(request: Request) -> Services:
    """Returns the services attached to the running application."""
    return request.app.state.services


ServicesDep = Annotated[Services, Depends(get_services)]


def get_summarize_handler(services: ServicesDep) -> SummarizeHandler:
    """Returns the configured summarize pipeline handler."""
    return services.handler


def require_user(
    services: ServicesDep,
    authorization: Annotated[str | None, Header()] = None,
) -> AuthenticatedUser:
    """Rejects the request unless its bearer token is valid."""
    return services.auth_gate.authenticate(authorization)
