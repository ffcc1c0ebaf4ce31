"""API request option models, read from query parameters.

The request body is the raw PNG, so every option travels in the query
string. Empty values fall back to the defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ma3scribble.engine.config import (
    DEFAULT_NAME,
    DEFAULT_STROKE_THICKNESS,
    MAX_STROKE_THICKNESS,
    MIN_STROKE_THICKNESS,
    ScribbleConfig,
)
from ma3scribble.errors import InvalidOptionError
from ma3scribble.imaging.preprocess import PreprocessConfig
from ma3scribble.imaging.trace import TraceConfig, TurnPolicy
from ma3scribble.utils.color import RGBA, WHITE, parse_hex_rgba

MAX_NAME_LENGTH = 1000


def _clamp(value: float, low: float, high: float) -> float:
    return max(min(value, high), low)


def _hex_color(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return parse_hex_rgba(value)
        except InvalidOptionError as e:
            raise ValueError(e.message) from e
    return value


class QueryOptions(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, allow_inf_nan=False)

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> QueryOptions:
        values = {k: v for k, v in params.items() if v != ""}
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            errors = [
                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"], "was": err.get("input")}
                for err in e.errors()
            ]
            raise InvalidOptionError(f"invalid {cls.__name__} query parameters", {"errors": errors}) from e


class ScribbleOptions(QueryOptions):
    name: str = Field(DEFAULT_NAME, alias="ma3_scribble_name", max_length=MAX_NAME_LENGTH)
    stroke_thickness: float = Field(DEFAULT_STROKE_THICKNESS, alias="ma3_scribble_stroke_thickness")
    stroke_color: RGBA = Field(WHITE, alias="ma3_scribble_stroke_color")

    @field_validator("stroke_color", mode="before")
    @classmethod
    def parse_stroke_color(cls, v: Any) -> Any:
        return _hex_color(v)

    @field_validator("stroke_thickness")
    @classmethod
    def clamp_thickness(cls, v: float) -> float:
        return _clamp(v, MIN_STROKE_THICKNESS, MAX_STROKE_THICKNESS)

    def to_config(self) -> ScribbleConfig:
        return ScribbleConfig(
            name=self.name,
            stroke_thickness=self.stroke_thickness,
            stroke_color=self.stroke_color,
        )


class PreprocessOptions(QueryOptions):
    transparency_replacement_color: RGBA = Field(
        WHITE, alias="preprocess_transparency_replacement_color"
    )
    blur_radius: float = Field(0.0, alias="preprocess_blur_radius")

    @field_validator("transparency_replacement_color", mode="before")
    @classmethod
    def parse_replacement_color(cls, v: Any) -> Any:
        return _hex_color(v)

    @field_validator("transparency_replacement_color")
    @classmethod
    def force_opaque(cls, v: RGBA) -> RGBA:
        return v._replace(a=255)

    def to_config(self) -> PreprocessConfig:
        return PreprocessConfig(
            transparency_replacement_color=self.transparency_replacement_color,
            blur_radius=self.blur_radius,
        )


class TraceOptions(QueryOptions):
    turn_policy: TurnPolicy = Field("minority", alias="trace_turn_policy")
    turd_size: int = Field(10_000, alias="trace_turd_size")
    alpha_max: float = Field(1.0, alias="trace_alpha_max")
    curve_optimization_tolerance: float = Field(0.2, alias="trace_curve_optimization_tolerance")
    black_level: float = Field(0.5, alias="black_level")
    invert: bool = Field(False, alias="invert")

    @field_validator("turd_size")
    @classmethod
    def clamp_turd_size(cls, v: int) -> int:
        return int(_clamp(v, 0, 100_000_000))

    @field_validator("alpha_max")
    @classmethod
    def clamp_alpha_max(cls, v: float) -> float:
        return _clamp(v, 0.0, 1.5)

    @field_validator("curve_optimization_tolerance")
    @classmethod
    def clamp_tolerance(cls, v: float) -> float:
        return _clamp(v, 0.0, 100_000_000.0)

    @field_validator("black_level")
    @classmethod
    def clamp_black_level(cls, v: float) -> float:
        return _clamp(v, 0.0, 1.0)

    def to_config(self) -> TraceConfig:
        return TraceConfig(
            turn_policy=self.turn_policy,
            turd_size=self.turd_size,
            alpha_max=self.alpha_max,
            curve_optimization_tolerance=self.curve_optimization_tolerance,
            black_level=self.black_level,
            invert=self.invert,
        )
