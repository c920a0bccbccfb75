"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel

DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:8081",
    "http://localhost:3000",
    "http://localhost:19000",
    "http://localhost:19006",
    "http://localhost:19007",
    "http://localhost:19008",
    "exp://localhost:19000",
)


class SupabaseConfig(BaseModel, frozen=True):
    """Supabase identity service configuration."""

    url: str
    key: str


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    language_code: str = "en"
    http_timeout_seconds: float = 60.0


class GeminiConfig(BaseModel, frozen=True):
    """Gemini LLM configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash-lite"
    max_output_tokens: int = 1024
    http_timeout_seconds: float = 60.0


class UploadConfig(BaseModel, frozen=True):
    """Temporary upload storage configuration."""

    directory: Path = Path("uploads")
    max_bytes: int = 25 * 1024 * 1024  # 25 MiB


class PipelineConfig(BaseModel, frozen=True):
    """Per-stage time limits for the summarize pipeline."""

    transcription_timeout_seconds: float = 300.0
    summarization_timeout_seconds: float = 120.0


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3000
    allowed_origins: tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    supabase: SupabaseConfig
    assemblyai: AssemblyAIConfig
    gemini: GeminiConfig
    upload: UploadConfig = UploadConfig()
    pipeline: PipelineConfig = PipelineConfig()
    server: ServerConfig = ServerConfig()


def _parse_origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_ALLOWED_ORIGINS
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        supabase=SupabaseConfig(
            url=os.getenv("SUPABASE_URL", ""),
            key=os.getenv("SUPABASE_KEY", ""),
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
        ),
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite"),
        ),
        upload=UploadConfig(
            directory=Path(os.getenv("UPLOAD_DIR", "uploads")),
            max_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(25 * 1024 * 1024))),
        ),
        pipeline=PipelineConfig(
            transcription_timeout_seconds=float(
                os.getenv("TRANSCRIPTION_TIMEOUT_SECONDS", "300")
            ),
            summarization_timeout_seconds=float(
                os.getenv("SUMMARIZATION_TIMEOUT_SECONDS", "120")
            ),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            allowed_origins=_parse_origins(os.getenv("ALLOWED_ORIGINS")),
        ),
    )
