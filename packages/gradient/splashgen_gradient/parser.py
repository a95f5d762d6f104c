"""CSS gradient expression parser.

Only the subset that Cordova branding configs actually carry is recognised::

    linear-gradient(64.28deg, #001833 0%, #004390 100%)
    linear-gradient(to bottom right, #001833 0%, #004390 100%)
    radial-gradient(circle, #abcdef 0%, #123456 100%)

Parsing never raises and never logs; problems come back as a ``ParseFailure``
or as ``Gradient.warnings`` for the caller to report.
"""

from __future__ import annotations

import math
import re

from .models import (
    DEFAULT_ANGLE,
    DEFAULT_FALLBACK_COLOR,
    ColorStop,
    Gradient,
    GradientKind,
    ParseFailure,
    ParseFailureReason,
)


_FUNCTION_RE = re.compile(r"(?<![\w-])(linear|radial)-gradient\s*\((.*)\)", re.IGNORECASE | re.DOTALL)
_STOP_RE = re.compile(r"#([0-9a-f]{6})([0-9a-f]{2})?\s+(\d+)%", re.IGNORECASE)
_ANGLE_RE = re.compile(r"^([+-]?(?:\d+(?:\.\d*)?|\.\d+))\s*(deg|rad|turn|grad)?$", re.IGNORECASE)
_HEX_RE = re.compile(r"#[0-9a-f]{6}", re.IGNORECASE)
_COLORISH_RE = re.compile(r"#|\brgba?\s*\(|\bhsla?\s*\(", re.IGNORECASE)

_SIDES = {"top": 0.0, "right": 90.0, "bottom": 180.0, "left": 270.0}
_CORNERS = {
    frozenset(("top", "right")): 45.0,
    frozenset(("bottom", "right")): 135.0,
    frozenset(("bottom", "left")): 225.0,
    frozenset(("top", "left")): 315.0,
}


def _split_args(body: str) -> list[str]:
    args: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(body):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            args.append(body[start:i].strip())
            start = i + 1
    args.append(body[start:].strip())
    return args


def parse_angle(token: str) -> float | None:
    """Return the angle in CSS degrees, or ``None`` if ``token`` is not an angle."""
    token = token.strip()
    match = _ANGLE_RE.match(token)
    if match:
        value = float(match.group(1))
        unit = (match.group(2) or "deg").lower()
        if unit == "rad":
            return math.degrees(value)
        if unit == "turn":
            return value * 360.0
        if unit == "grad":
            return value * 0.9
        return value

    words = token.lower().split()
    if len(words) < 2 or words[0] != "to":
        return None
    sides = words[1:]
    if len(sides) == 1:
        return _SIDES.get(sides[0])
    if len(sides) == 2:
        return _CORNERS.get(frozenset(sides))
    return None


def _extract_stops(args: list[str], warnings: list[str]) -> list[ColorStop]:
    stops: list[ColorStop] = []
    for arg in args:
        matched = False
        for match in _STOP_RE.finditer(arg):
            matched = True
            color = "#" + match.group(1).lower()
            if match.group(2):
                warnings.append(f"alpha channel dropped from {match.group(0).split()[0]}")
            percent = int(match.group(3))
            if percent > 100:
                warnings.append(f"stop position {percent}% clamped to 100%")
            stops.append(ColorStop(color=color, position=min(1.0, percent / 100.0)))
        if not matched and _COLORISH_RE.search(arg):
            warnings.append(f"ignored color stop {arg!r}: expected '#RRGGBB NN%'")
    return stops


def dominant_color(text: str | None, default: str = DEFAULT_FALLBACK_COLOR) -> str:
    """First ``#rrggbb`` found anywhere in ``text``; used for solid-color fallbacks."""
    if text:
        match = _HEX_RE.search(text)
        if match:
            return match.group(0).lower()
    return default


def parse_gradient(
    text: str | None,
    default_angle: float = DEFAULT_ANGLE,
    fallback_color: str = DEFAULT_FALLBACK_COLOR,
) -> Gradient | ParseFailure:
    if not isinstance(text, str) or not text.strip():
        return ParseFailure(ParseFailureReason.EMPTY, text or "", fallback_color)

    match = _FUNCTION_RE.search(text)
    if not match:
        return ParseFailure(ParseFailureReason.UNRECOGNIZED, text, dominant_color(text, fallback_color))

    kind = GradientKind(match.group(1).lower())
    args = _split_args(match.group(2))
    warnings: list[str] = []
    angle: float | None = None
    shape: str | None = None

    head = args[0]
    if kind is GradientKind.LINEAR:
        angle = parse_angle(head)
        if angle is None:
            # A head that is not a color stop was meant as a direction.
            if head and not _COLORISH_RE.search(head):
                warnings.append(f"unrecognized direction {head!r}; using {default_angle:g}deg")
                args = args[1:]
            angle = default_angle
        else:
            args = args[1:]
    elif head and not _COLORISH_RE.search(head):
        shape = head
        args = args[1:]

    stops = _extract_stops(args, warnings)
    if len(stops) < 2:
        return ParseFailure(ParseFailureReason.TOO_FEW_STOPS, text, dominant_color(text, fallback_color))

    return Gradient(
        kind=kind,
        stops=tuple(stops),
        angle_degrees=angle,
        shape=shape,
        warnings=tuple(warnings),
    )
