"""Exceptions raised by the seqdistance engines and pipeline.

Every error derives from :class:`SeqDistanceError` and also from the builtin
exception that best describes it, so callers can catch either.
"""

from typing import Optional


class SeqDistanceError(Exception):
    """Base exception for all seqdistance errors.

    Args:
        message: What went wrong
        suggestion: What the caller can do about it
    """

    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.formatted())

    def formatted(self) -> str:
        msg = self.message
        if self.suggestion:
            msg += f" ({self.suggestion})"
        return msg

    def __str__(self) -> str:
        return self.formatted()


class InvalidSequenceError(SeqDistanceError, TypeError):
    """A sequence argument is neither ``str`` nor ``bytes``, or a pair mixes the two."""

    def __init__(self, name: str, value, message: Optional[str] = None):
        super().__init__(
            message or f"{name} must be str or bytes, got {type(value).__name__}",
            suggestion="pass the raw sequence text",
        )
        self.name = name


class AnchorLookupError(SeqDistanceError, LookupError):
    """A chain backpointer refers to an anchor that was never inserted.

    This is an internal-consistency fault of the chaining step, not a
    condition callers are expected to recover from.
    """

    def __init__(self, match_index: int):
        super().__init__(f"No anchor for match index {match_index} while tracing the chain")
        self.match_index = match_index


class ConfigurationError(SeqDistanceError, ValueError):
    """Invalid or unreadable configuration."""


__all__ = [
    'SeqDistanceError',
    'InvalidSequenceError',
    'AnchorLookupError',
    'ConfigurationError',
]
