"""Vector (SVG) description of a parsed gradient on a fixed canvas."""

from __future__ import annotations

import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .models import Gradient, GradientKind

SVG_NS = "http://www.w3.org/2000/svg"
GRADIENT_ID = "grad"


def _num(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@dataclass(frozen=True)
class SvgStop:
    offset: float  # percent, 0..100
    color: str


def _stop_elements(parent: ET.Element, stops: tuple[SvgStop, ...]) -> None:
    for stop in stops:
        ET.SubElement(parent, "stop", {"offset": f"{_num(stop.offset)}%", "stop-color": stop.color})


def _document(width: int, height: int, gradient_el: ET.Element) -> str:
    root = ET.Element("svg", {"xmlns": SVG_NS, "width": str(width), "height": str(height)})
    defs = ET.SubElement(root, "defs")
    defs.append(gradient_el)
    ET.SubElement(root, "rect", {"width": str(width), "height": str(height), "fill": f"url(#{GRADIENT_ID})"})
    return ET.tostring(root, encoding="unicode")


@dataclass(frozen=True)
class LinearGradientShape:
    width: int
    height: int
    x1: float
    y1: float
    x2: float
    y2: float
    stops: tuple[SvgStop, ...]

    def to_svg(self) -> str:
        element = ET.Element(
            "linearGradient",
            {
                "id": GRADIENT_ID,
                "gradientUnits": "userSpaceOnUse",
                "x1": _num(self.x1),
                "y1": _num(self.y1),
                "x2": _num(self.x2),
                "y2": _num(self.y2),
            },
        )
        _stop_elements(element, self.stops)
        return _document(self.width, self.height, element)


@dataclass(frozen=True)
class RadialGradientShape:
    width: int
    height: int
    cx: float
    cy: float
    r: float
    stops: tuple[SvgStop, ...]

    def to_svg(self) -> str:
        element = ET.Element(
            "radialGradient",
            {
                "id": GRADIENT_ID,
                "gradientUnits": "userSpaceOnUse",
                "cx": _num(self.cx),
                "cy": _num(self.cy),
                "r": _num(self.r),
            },
        )
        _stop_elements(element, self.stops)
        return _document(self.width, self.height, element)


VectorShape = LinearGradientShape | RadialGradientShape


def build_vector(gradient: Gradient, width: int, height: int) -> VectorShape:
    """Lay ``gradient`` out on a ``width`` x ``height`` canvas (origin top-left, y down).

    Linear gradients run through the canvas center along ``angle_degrees`` and
    span the full diagonal so every corner is covered at any rotation.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}")

    stops = tuple(SvgStop(offset=stop.position * 100.0, color=stop.color) for stop in gradient.stops)
    cx = width / 2.0
    cy = height / 2.0
    half_diagonal = math.hypot(width, height) / 2.0

    if gradient.kind is GradientKind.RADIAL:
        return RadialGradientShape(width=width, height=height, cx=cx, cy=cy, r=half_diagonal, stops=stops)

    rad = math.radians(gradient.angle_degrees or 0.0)
    dx = half_diagonal * math.cos(rad)
    dy = half_diagonal * math.sin(rad)
    return LinearGradientShape(
        width=width,
        height=height,
        x1=cx - dx,
        y1=cy - dy,
        x2=cx + dx,
        y2=cy + dy,
        stops=stops,
    )
