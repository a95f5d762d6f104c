"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Density:
    bucket: str
    scale: float


@dataclass(frozen=True)
class RenderResult:
    platform: str
    target: str
    files: tuple[Path, ...] = field(default_factory=tuple)
    fallback: bool = False

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class RenderFailure:
    platform: str
    target: str
    error: str

    @property
    def ok(self) -> bool:
        return False


RenderOutcome = RenderResult | RenderFailure
