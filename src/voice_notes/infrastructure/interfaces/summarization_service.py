"""Abstract interface for summarization service operations."""

from abc import ABC, abstractmethod


class SummarizationService(ABC):
    """Abstract base class for text-generation backends."""

    @abstractmethod
    def summarize(self, transcript: str) -> str:
        """
        Condenses a transcript into a short summary.

        Args:
            transcript: The transcript text to summarize.

        Returns:
            The summary text, verbatim from the provider.

        Raises:
            SummarizationError: If the provider call fails.
        """
        pass
