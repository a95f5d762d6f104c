"""Renderer package: raster backends, Android density fan-out, and platform targets."""

from .densities import ANDROID_DENSITIES, ANDROID_MASTER_SIZE, density_sizes, fan_out
from .models import Density, RenderFailure, RenderOutcome, RenderResult
from .raster import (
    DEFAULT_BACKEND,
    CairoSvgRasterizer,
    PillowRasterizer,
    Rasterizer,
    RasterizeError,
    get_rasterizer,
    list_backends,
    resize_png,
    solid_png,
)
from .targets import AndroidDrawableTarget, AndroidRasterTarget, IosImagesetTarget

__all__ = [
    "ANDROID_DENSITIES",
    "ANDROID_MASTER_SIZE",
    "AndroidDrawableTarget",
    "AndroidRasterTarget",
    "CairoSvgRasterizer",
    "DEFAULT_BACKEND",
    "Density",
    "IosImagesetTarget",
    "PillowRasterizer",
    "Rasterizer",
    "RasterizeError",
    "RenderFailure",
    "RenderOutcome",
    "RenderResult",
    "density_sizes",
    "fan_out",
    "get_rasterizer",
    "list_backends",
    "resize_png",
    "solid_png",
]
