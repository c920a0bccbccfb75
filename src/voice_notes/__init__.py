"""Voice notes API: upload audio, get back its transcript and summary."""

__version__ = "0.1.0"
