"""Errors raised by the codecs and the normalization engine.

Every error keeps the offending input and, when known, the position at which
the problem was detected, so that callers can point at it.
"""

from typing import Optional

__all__ = [
    "LambdaError",
    "ParseError",
    "UnboundReferenceError",
    "DecodeError",
    "ResourceExhausted",
]


class LambdaError(Exception):
    """Base class of every error raised by lambdacodec."""

    def __init__(
        self, msg: str, source: Optional[str] = None, position: Optional[int] = None
    ):
        super().__init__(msg)
        self.msg = msg
        self.source = source
        self.position = position

    def __str__(self):
        if self.source is None:
            return self.msg
        text = f"{self.msg}\n  {self.source}"
        if self.position is not None:
            text += "\n  " + " " * self.position + "^"
        return text


class ParseError(LambdaError):
    """Malformed named or De Bruijn syntax."""


class UnboundReferenceError(ParseError):
    """A name that no enclosing binder introduces."""


class DecodeError(LambdaError):
    """Malformed binary lambda calculus, raw or base64-packed."""


class ResourceExhausted(LambdaError):
    """The recursion limit was reached while normalizing a term."""
