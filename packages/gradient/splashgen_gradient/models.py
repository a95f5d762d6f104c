"""Typed gradient models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


DEFAULT_ANGLE = 180.0
DEFAULT_FALLBACK_COLOR = "#000000"


class GradientKind(str, Enum):
    LINEAR = "linear"
    RADIAL = "radial"


class ParseFailureReason(str, Enum):
    EMPTY = "empty"
    UNRECOGNIZED = "unrecognized"
    TOO_FEW_STOPS = "too_few_stops"


@dataclass(frozen=True)
class ColorStop:
    color: str
    position: float

    @property
    def rgb(self) -> tuple[int, int, int]:
        return hex_to_rgb(self.color)


@dataclass(frozen=True)
class Gradient:
    kind: GradientKind
    stops: tuple[ColorStop, ...]
    angle_degrees: float | None = None
    shape: str | None = None
    warnings: tuple[str, ...] = field(default=(), compare=False)

    @property
    def start_color(self) -> str:
        return self.stops[0].color

    @property
    def end_color(self) -> str:
        return self.stops[-1].color


@dataclass(frozen=True)
class ParseFailure:
    reason: ParseFailureReason
    text: str
    dominant_color: str

    @property
    def message(self) -> str:
        if self.reason is ParseFailureReason.EMPTY:
            return "gradient value is empty"
        if self.reason is ParseFailureReason.UNRECOGNIZED:
            return "not a linear-gradient(...) or radial-gradient(...) expression"
        return "gradient needs at least two '#RRGGBB NN%' color stops"


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #RRGGBB color, got {color!r}")
    return tuple(int(value[i : i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]
