"""CSS angle to Android shape-drawable angle conversion."""

from __future__ import annotations


COMPASS_ANGLES: tuple[int, ...] = (0, 45, 90, 135, 180, 225, 270, 315)


def normalize_degrees(value: float) -> float:
    return value % 360.0


def angular_distance(a: float, b: float) -> float:
    diff = abs(a - b) % 360.0
    return min(diff, 360.0 - diff)


def to_compass_angle(css_degrees: float) -> int:
    """Map a CSS gradient angle onto one of the eight angles ``<gradient>`` accepts.

    The CSS angle is mirrored (``(360 - a) % 360``) and snapped to the nearest
    multiple of 45 by wrap-around distance. Exact ties go to the lower value.
    """
    target = (360.0 - normalize_degrees(css_degrees)) % 360.0
    # Deliberately circular: a target of 350 snaps to 0, not 315 as a plain
    # abs() difference would give for CSS angles in (0, 22.5).
    best = COMPASS_ANGLES[0]
    best_distance = angular_distance(target, best)
    for candidate in COMPASS_ANGLES[1:]:
        distance = angular_distance(target, candidate)
        if distance < best_distance:
            best = candidate
            best_distance = distance
    return best
