"""Android density buckets for splash drawables."""

from __future__ import annotations

from .models import Density
from .raster import Rasterizer


ANDROID_MASTER_SIZE = (1080, 1920)

ANDROID_DENSITIES: tuple[Density, ...] = (
    Density(bucket="mdpi", scale=0.25),
    Density(bucket="hdpi", scale=0.375),
    Density(bucket="xhdpi", scale=0.5),
    Density(bucket="xxhdpi", scale=0.75),
    Density(bucket="xxxhdpi", scale=1.0),
)


def scaled_size(width: int, height: int, scale: float) -> tuple[int, int]:
    return max(1, int(width * scale + 0.5)), max(1, int(height * scale + 0.5))


def density_sizes(
    width: int,
    height: int,
    densities: tuple[Density, ...] = ANDROID_DENSITIES,
) -> dict[str, tuple[int, int]]:
    return {d.bucket: scaled_size(width, height, d.scale) for d in densities}


def fan_out(
    rasterizer: Rasterizer,
    master_png: bytes,
    master_size: tuple[int, int],
    densities: tuple[Density, ...] = ANDROID_DENSITIES,
) -> dict[str, bytes]:
    """Resample one master render into every density bucket."""
    out: dict[str, bytes] = {}
    for bucket, (w, h) in density_sizes(master_size[0], master_size[1], densities).items():
        if (w, h) == tuple(master_size):
            out[bucket] = master_png
        else:
            out[bucket] = rasterizer.resize(master_png, w, h)
    return out
