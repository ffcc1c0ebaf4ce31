"""Error taxonomy for the conversion service.

InputError subclasses are client faults (bad document, bad options).
InternalError subclasses are server faults and should never be caused by
well-formed input.
"""

from __future__ import annotations

from typing import Any


class ScribbleError(Exception):
    """Base error. ``details`` carries the offending value for diagnosis."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({detail_str})"


class InputError(ScribbleError):
    """Client fault."""


class InternalError(ScribbleError):
    """Server fault."""


class InputDecodeError(InputError):
    """Input is not well-formed XML or a dimension attribute is unusable."""


class MalformedTransform(InputError):
    """A transform call's parameters are not two floats."""


class MalformedPathData(InputError):
    """A path-data token is neither a command marker nor an integer."""


class InvalidOptionError(InputError):
    """A request option could not be parsed."""


class ImageDecodeError(InputError):
    """The request body is not a decodable image."""


class BuilderStateViolation(InternalError):
    """A segment builder was fed when it could not accept a value."""


class OutputEncodeError(InternalError):
    """The scribble document could not be serialized."""


class TraceError(InternalError):
    """The external tracer failed."""
