"""CSS gradient parsing, angle conversion, and vector synthesis for splash assets."""

from .android import AndroidShapeDescriptor, solid_drawable_xml, to_android_shape
from .angles import COMPASS_ANGLES, to_compass_angle
from .models import (
    DEFAULT_ANGLE,
    DEFAULT_FALLBACK_COLOR,
    ColorStop,
    Gradient,
    GradientKind,
    ParseFailure,
    ParseFailureReason,
    hex_to_rgb,
)
from .parser import dominant_color, parse_angle, parse_gradient
from .vector import LinearGradientShape, RadialGradientShape, SvgStop, VectorShape, build_vector

__all__ = [
    "AndroidShapeDescriptor",
    "COMPASS_ANGLES",
    "ColorStop",
    "DEFAULT_ANGLE",
    "DEFAULT_FALLBACK_COLOR",
    "Gradient",
    "GradientKind",
    "LinearGradientShape",
    "ParseFailure",
    "ParseFailureReason",
    "RadialGradientShape",
    "SvgStop",
    "VectorShape",
    "build_vector",
    "dominant_color",
    "hex_to_rgb",
    "parse_angle",
    "parse_gradient",
    "solid_drawable_xml",
    "to_android_shape",
    "to_compass_angle",
]
