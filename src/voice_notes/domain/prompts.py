"""Prompt construction for transcript summarization."""

SUMMARY_INSTRUCTION = (
    "Please provide a clear and concise summary of the following transcribed "
    "audio. Focus on the main points and key takeaways:"
)


def build_summary_prompt(transcript: str) -> str:
    """Returns the fixed summary instruction followed by the transcript."""
    return f"{SUMMARY_INSTRUCTION} {transcript}"
