"""Shared pytest fixtures for the voice notes API tests.

Every external collaborator is replaced by an in-memory fake so the
pipeline can be exercised end to end without network access.
"""

import io
import time

import pytest
from fastapi.testclient import TestClient

from voice_notes.config import AppConfig, AssemblyAIConfig, GeminiConfig, SupabaseConfig, UploadConfig
from voice_notes.dependencies import Services
from voice_notes.domain.models import AudioUpload, AuthenticatedUser, StoredBlob
from voice_notes.exceptions import AuthError, SummarizationError, TranscriptionError
from voice_notes.handlers import AuthGate, SummarizeHandler
from voice_notes.infrastructure import LocalBlobStore
from voice_notes.infrastructure.interfaces import (
    IdentityProvider,
    SummarizationService,
    TranscriptionService,
)
from voice_notes.main import create_app

VALID_TOKEN = "valid-token"
TEST_MAX_BYTES = 1024


class FakeIdentityProvider(IdentityProvider):
    """Accepts exactly one token."""

    def __init__(self):
        self.calls: list[str] = []

    def validate(self, token: str) -> AuthenticatedUser:
        self.calls.append(token)
        if token != VALID_TOKEN:
            raise AuthError("Invalid token")
        return AuthenticatedUser(id="user-123", email="user@example.com")


class FakeTranscriber(TranscriptionService):
    """Returns a canned transcript, or raises a canned failure."""

    def __init__(self, text: str = "hello world", error: str | None = None, delay: float = 0.0):
        self.text = text
        self.error = error
        self.delay = delay
        self.calls: list[StoredBlob] = []
        self.seen_existing: list[bool] = []
        self.seen_bytes: list[bytes] = []

    def transcribe(self, blob: StoredBlob) -> str:
        self.calls.append(blob)
        self.seen_existing.append(blob.path.exists())
        if blob.path.exists():
            self.seen_bytes.append(blob.path.read_bytes())
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise TranscriptionError(blob.filename, Exception(self.error))
        return self.text


class FakeSummarizer(SummarizationService):
    """Returns a canned summary, or raises a canned failure."""

    def __init__(self, summary: str = "Greeting.", error: str | None = None):
        self.summary = summary
        self.error = error
        self.calls: list[str] = []

    def summarize(self, transcript: str) -> str:
        self.calls.append(transcript)
        if self.error is not None:
            raise SummarizationError(Exception(self.error))
        return self.summary


@pytest.fixture
def upload_dir(tmp_path):
    """Upload directory for the test; not created until app startup."""
    return tmp_path / "uploads"


@pytest.fixture
def store(upload_dir):
    return LocalBlobStore(upload_dir, TEST_MAX_BYTES)


@pytest.fixture
def identity_provider():
    return FakeIdentityProvider()


@pytest.fixture
def transcriber():
    return FakeTranscriber()


@pytest.fixture
def summarizer():
    return FakeSummarizer()


@pytest.fixture
def app_config(upload_dir):
    return AppConfig(
        supabase=SupabaseConfig(url="http://supabase.test", key="anon"),
        assemblyai=AssemblyAIConfig(api_key="test"),
        gemini=GeminiConfig(api_key="test"),
        upload=UploadConfig(directory=upload_dir, max_bytes=TEST_MAX_BYTES),
    )


def build_test_services(store, identity_provider, transcriber, summarizer, **timeouts):
    return Services(
        auth_gate=AuthGate(identity_provider),
        handler=SummarizeHandler(store, transcriber, summarizer, **timeouts),
        store=store,
    )


@pytest.fixture
def services(store, identity_provider, transcriber, summarizer):
    return build_test_services(store, identity_provider, transcriber, summarizer)


@pytest.fixture
def client(app_config, services):
    """Test client running the app lifespan against fake services."""
    app = create_app(config=app_config, services=services)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}", "Accept": "application/json"}


def make_upload(data: bytes = b"fake audio", filename: str = "note.m4a", size: int | None = -1):
    """Builds an AudioUpload; size defaults to the real length of data."""
    return AudioUpload(
        filename=filename,
        content_type="audio/m4a",
        size=len(data) if size == -1 else size,
        stream=io.BytesIO(data),
    )
