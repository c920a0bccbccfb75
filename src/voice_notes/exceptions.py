"""Custom exceptions for the voice notes service."""


class AuthError(Exception):
    """Raised when a request's bearer credential is missing or invalid."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class UploadError(Exception):
    """Raised when an uploaded file cannot be accepted or stored."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class MissingAudioError(UploadError):
    """Raised when the request carries no audio file field."""

    def __init__(self):
        super().__init__("No audio file uploaded")


class FileTooLargeError(UploadError):
    """Raised when an upload exceeds the configured size ceiling."""

    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes
        super().__init__(
            f"File too large (max {max_bytes // (1024 * 1024)} MB)"
        )


class TranscriptionError(Exception):
    """Raised when audio transcription fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        reason = str(cause) if cause is not None else "unknown error"
        super().__init__(f"Transcription failed: {reason}")


class SummarizationError(Exception):
    """Raised when transcript summarization fails."""

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        reason = str(cause) if cause is not None else "unknown error"
        super().__init__(f"Summarization failed: {reason}")


class CleanupError(Exception):
    """Raised when a stored blob cannot be deleted. Logged, never surfaced."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to delete stored blob '{file_name}'")
