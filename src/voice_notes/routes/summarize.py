"""Audio summarize endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from voice_notes.dependencies import get_summarize_handler, require_user
from voice_notes.domain.models import (
    AudioUpload,
    AuthenticatedUser,
    PipelineFailure,
    PipelineStage,
)
from voice_notes.handlers import SummarizeHandler
from voice_notes.logging import setup_logging
from voice_notes.response_models import (
    ErrorResponse,
    ProcessingErrorResponse,
    SummarizeResponse,
)

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["summarize"])

AUDIO_FIELD = "audio"

UserDep = Annotated[AuthenticatedUser, Depends(require_user)]
HandlerDep = Annotated[SummarizeHandler, Depends(get_summarize_handler)]

# The body is read by hand after authentication, so the multipart schema is
# declared here rather than inferred from a File() parameter.
AUDIO_REQUEST_BODY = {
    "required": True,
    "content": {
        "multipart/form-data": {
            "schema": {
                "type": "object",
                "properties": {
                    AUDIO_FIELD: {
                        "type": "string",
                        "format": "binary",
                        "description": "Audio file to summarize",
                    }
                },
                "required": [AUDIO_FIELD],
            }
        }
    },
}


def _to_audio_upload(field: UploadFile | str | None) -> AudioUpload | None:
    if not isinstance(field, UploadFile):
        return None
    return AudioUpload(
        filename=field.filename or "",
        content_type=field.content_type or "application/octet-stream",
        size=field.size,
        stream=field.file,
    )


@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing, oversize or malformed upload"},
        401: {"model": ErrorResponse, "description": "Missing or invalid credential"},
        500: {"model": ProcessingErrorResponse, "description": "Transcription or summarization failed"},
    },
    openapi_extra={"requestBody": AUDIO_REQUEST_BODY},
)
async def summarize_audio(request: Request, user: UserDep, handler: HandlerDep):
    """
    Transcribes an uploaded audio file and summarizes the transcript.

    The bearer token is validated before the multipart body is read, and the
    uploaded file is deleted before the response is sent.
    """
    logger.info(
        "Summarize request authenticated",
        extra={"stage": str(PipelineStage.AUTHENTICATED), "user_id": user.id},
    )

    form = await request.form()
    try:
        upload = _to_audio_upload(form.get(AUDIO_FIELD))
        result = await handler.process(upload)
    finally:
        await form.close()

    if isinstance(result, PipelineFailure):
        return JSONResponse(
            status_code=500,
            content=ProcessingErrorResponse(error=result.message, details=result.detail).model_dump(),
        )

    return SummarizeResponse(
        summary=result.summary,
        transcription=result.transcription,
        file_info=result.file_info,
    )
