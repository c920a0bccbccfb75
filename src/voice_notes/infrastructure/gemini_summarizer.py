"""Gemini implementation of the SummarizationService interface."""

from google import genai
from google.genai import types

from voice_notes.domain.prompts import build_summary_prompt
from voice_notes.exceptions import SummarizationError
from voice_notes.logging import setup_logging

from .interfaces import SummarizationService

logger = setup_logging()


class GeminiSummarizer(SummarizationService):
    """Summarization service implementation using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str, max_output_tokens: int = 1024):
        self._client = client
        self._model_name = model_name
        self._max_output_tokens = max_output_tokens

    def summarize(self, transcript: str) -> str:
        """
        Summarizes a transcript with a fixed instruction prompt.

        Args:
            transcript: The transcript text to summarize.

        Returns:
            The first candidate's text.

        Raises:
            SummarizationError: If the Gemini API call fails or returns nothing.
        """
        logger.info("Starting summarization", extra={"characters": len(transcript)})
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=build_summary_prompt(transcript),
                config=types.GenerateContentConfig(
                    max_output_tokens=self._max_output_tokens,
                ),
            )
            if not response.text:
                raise SummarizationError(Exception("Gemini returned empty response"))
            logger.info("Summarization completed")
            return response.text
        except SummarizationError:
            logger.warning("Gemini returned no summary text")
            raise
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise SummarizationError(e) from e
