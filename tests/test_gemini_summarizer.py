"""Tests for the Gemini summarization adapter."""

from unittest.mock import MagicMock

import pytest

from voice_notes.domain.prompts import SUMMARY_INSTRUCTION, build_summary_prompt
from voice_notes.exceptions import SummarizationError
from voice_notes.infrastructure import GeminiSummarizer


def make_client(text="Greeting."):
    client = MagicMock()
    client.models.generate_content.return_value.text = text
    return client


def test_prompt_wraps_transcript():
    prompt = build_summary_prompt("hello world")
    assert prompt.startswith(SUMMARY_INSTRUCTION)
    assert "key takeaways" in prompt
    assert prompt.endswith("hello world")


def test_returns_response_text_verbatim():
    client = make_client("  Greeting.\n")
    assert GeminiSummarizer(client, "gemini-test").summarize("hello world") == "  Greeting.\n"


def test_request_uses_model_prompt_and_token_budget():
    client = make_client()

    GeminiSummarizer(client, "gemini-test", max_output_tokens=1024).summarize("hello world")

    kwargs = client.models.generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-test"
    assert kwargs["contents"] == build_summary_prompt("hello world")
    assert kwargs["config"].max_output_tokens == 1024


@pytest.mark.parametrize("text", [None, ""])
def test_empty_response(text):
    with pytest.raises(SummarizationError, match="empty response"):
        GeminiSummarizer(make_client(text), "gemini-test").summarize("hello world")


def test_sdk_exception_wrapped_once():
    client = MagicMock()
    client.models.generate_content.side_effect = RuntimeError("429 RESOURCE_EXHAUSTED")

    with pytest.raises(SummarizationError) as exc_info:
        GeminiSummarizer(client, "gemini-test").summarize("hello world")

    assert "RESOURCE_EXHAUSTED" in str(exc_info.value)
    assert client.models.generate_content.call_count == 1
