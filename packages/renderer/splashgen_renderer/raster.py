"""Raster capability: vector gradient description to PNG, plus PNG resampling."""

from __future__ import annotations

from io import BytesIO
from typing import Protocol

import numpy as np
from PIL import Image

from splashgen_gradient import LinearGradientShape, RadialGradientShape, SvgStop, VectorShape, hex_to_rgb


DEFAULT_BACKEND = "pillow"


class RasterizeError(RuntimeError):
    """The raster backend could not produce or resample an image."""


class Rasterizer(Protocol):
    name: str

    def rasterize(self, shape: VectorShape, width: int, height: int) -> bytes:
        ...

    def resize(self, source: bytes, width: int, height: int) -> bytes:
        ...


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise RasterizeError(f"Invalid output size {width}x{height}")


def encode_png(image: Image.Image) -> bytes:
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def resize_png(source: bytes, width: int, height: int) -> bytes:
    _check_size(width, height)
    try:
        with Image.open(BytesIO(source)) as img:
            resized = img.convert("RGB").resize((width, height), Image.Resampling.LANCZOS)
    except (OSError, ValueError) as exc:
        raise RasterizeError(f"Could not resample image to {width}x{height}: {exc}") from exc
    return encode_png(resized)


def solid_png(color: str, width: int, height: int) -> bytes:
    _check_size(width, height)
    return encode_png(Image.new("RGB", (width, height), hex_to_rgb(color)))


def _stop_table(stops: tuple[SvgStop, ...]) -> tuple[np.ndarray, np.ndarray]:
    # SVG rule: an offset below an earlier one is raised to the largest earlier offset.
    offsets: list[float] = []
    colors: list[tuple[int, int, int]] = []
    floor = 0.0
    for stop in stops:
        offset = min(1.0, max(floor, stop.offset / 100.0))
        offsets.append(offset)
        colors.append(hex_to_rgb(stop.color))
        floor = offset
    return np.asarray(offsets, dtype=np.float64), np.asarray(colors, dtype=np.float64)


class PillowRasterizer:
    """Evaluates the gradient at every pixel center with numpy and encodes with Pillow."""

    name = "pillow"

    def rasterize(self, shape: VectorShape, width: int, height: int) -> bytes:
        _check_size(width, height)
        if not shape.stops:
            raise RasterizeError("Gradient has no color stops")

        # Pixel centers mapped back into the shape's own coordinate space.
        xs = (np.arange(width, dtype=np.float64) + 0.5) * (shape.width / width)
        ys = (np.arange(height, dtype=np.float64) + 0.5) * (shape.height / height)
        gx = xs[np.newaxis, :]
        gy = ys[:, np.newaxis]

        if isinstance(shape, LinearGradientShape):
            dx = shape.x2 - shape.x1
            dy = shape.y2 - shape.y1
            length_sq = dx * dx + dy * dy
            if length_sq == 0:
                raise RasterizeError("Degenerate linear gradient axis")
            t = ((gx - shape.x1) * dx + (gy - shape.y1) * dy) / length_sq
        elif isinstance(shape, RadialGradientShape):
            if shape.r <= 0:
                raise RasterizeError("Degenerate radial gradient radius")
            t = np.hypot(gx - shape.cx, gy - shape.cy) / shape.r
        else:
            raise RasterizeError(f"Unsupported vector shape {type(shape).__name__}")

        t = np.clip(t, 0.0, 1.0)
        offsets, colors = _stop_table(shape.stops)
        channels = [np.interp(t, offsets, colors[:, c]) for c in range(3)]
        pixels = np.rint(np.stack(channels, axis=-1)).clip(0, 255).astype(np.uint8)
        return encode_png(Image.fromarray(pixels))

    def resize(self, source: bytes, width: int, height: int) -> bytes:
        return resize_png(source, width, height)


class CairoSvgRasterizer:
    """Renders the synthesized SVG document through cairosvg."""

    name = "cairosvg"

    def __init__(self) -> None:
        try:
            import cairosvg
        except (ImportError, OSError) as exc:
            raise RasterizeError("cairosvg backend selected but unavailable; install splashgen[svg]") from exc
        self._cairosvg = cairosvg

    def rasterize(self, shape: VectorShape, width: int, height: int) -> bytes:
        _check_size(width, height)
        try:
            rendered = self._cairosvg.svg2png(
                bytestring=shape.to_svg().encode("utf-8"),
                output_width=width,
                output_height=height,
            )
            with Image.open(BytesIO(rendered)) as img:
                image = img.convert("RGB")
        except Exception as exc:
            raise RasterizeError(f"cairosvg failed to render {width}x{height}: {exc}") from exc
        return encode_png(image)

    def resize(self, source: bytes, width: int, height: int) -> bytes:
        return resize_png(source, width, height)


_BACKENDS = {
    PillowRasterizer.name: PillowRasterizer,
    CairoSvgRasterizer.name: CairoSvgRasterizer,
}


def list_backends() -> list[str]:
    return sorted(_BACKENDS.keys())


def get_rasterizer(name: str | None = None) -> Rasterizer:
    backend = _BACKENDS.get(name or DEFAULT_BACKEND)
    if backend is None:
        raise ValueError(f"Unknown raster backend: {name}")
    return backend()
