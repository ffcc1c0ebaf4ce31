"""API response models."""

from __future__ import annotations

from pydantic import BaseModel

from ma3scribble import __version__


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__


class ErrorResponse(BaseModel):
    title: str
    status: int
    detail: str = ""
