"""Declarative Android ``<shape>`` drawable for a gradient.

This is a two-color approximation: intermediate stops are lost. It backs up the
raster density set when rendering is unavailable or disabled.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .angles import to_compass_angle
from .models import DEFAULT_ANGLE, Gradient, GradientKind

ANDROID_NS = "http://schemas.android.com/apk/res/android"
_XML_DECL = '<?xml version="1.0" encoding="utf-8"?>\n'


def _a(name: str) -> str:
    return f"android:{name}"


def _shape_root() -> ET.Element:
    return ET.Element("shape", {"xmlns:android": ANDROID_NS, _a("shape"): "rectangle"})


def _serialize(root: ET.Element) -> str:
    ET.indent(root, space="    ")
    return _XML_DECL + ET.tostring(root, encoding="unicode") + "\n"


@dataclass(frozen=True)
class AndroidShapeDescriptor:
    type: str
    angle: int | None
    start_color: str
    end_color: str

    def to_xml(self) -> str:
        root = _shape_root()
        attrs = {_a("type"): self.type}
        if self.angle is not None:
            attrs[_a("angle")] = str(self.angle)
        if self.type == GradientKind.RADIAL.value:
            attrs[_a("gradientRadius")] = "50%p"
        attrs[_a("startColor")] = self.start_color
        attrs[_a("endColor")] = self.end_color
        ET.SubElement(root, "gradient", attrs)
        return _serialize(root)


def to_android_shape(gradient: Gradient) -> AndroidShapeDescriptor:
    if len(gradient.stops) < 2:
        raise ValueError("Android shape descriptor needs a gradient with at least two stops")

    if gradient.kind is GradientKind.RADIAL:
        return AndroidShapeDescriptor(
            type=GradientKind.RADIAL.value,
            angle=None,
            start_color=gradient.start_color,
            end_color=gradient.end_color,
        )

    angle = gradient.angle_degrees if gradient.angle_degrees is not None else DEFAULT_ANGLE
    return AndroidShapeDescriptor(
        type=GradientKind.LINEAR.value,
        angle=to_compass_angle(angle),
        start_color=gradient.start_color,
        end_color=gradient.end_color,
    )


def solid_drawable_xml(color: str) -> str:
    root = _shape_root()
    ET.SubElement(root, "solid", {_a("color"): color})
    return _serialize(root)
