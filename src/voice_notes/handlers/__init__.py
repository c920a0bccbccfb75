"""Request handlers."""

from .auth_gate import AuthGate
from .summarize_handler import SummarizeHandler

__all__ = ["AuthGate", "SummarizeHandler"]
