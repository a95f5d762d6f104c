"""Per-platform render targets that turn a parsed gradient into native assets."""

from __future__ import annotations

import json
from pathlib import Path

from splashgen_gradient import Gradient, build_vector, solid_drawable_xml, to_android_shape

from .densities import ANDROID_DENSITIES, ANDROID_MASTER_SIZE, density_sizes, fan_out
from .models import Density, RenderFailure, RenderOutcome, RenderResult
from .raster import Rasterizer, RasterizeError, solid_png


IMAGESET_AUTHOR = "splashgen"
NO_BACKEND = "no raster backend available"


def _write_bytes(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def _write_text(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class AndroidRasterTarget:
    """PNG density set under ``res/drawable-<bucket>/`` resampled from one master render."""

    platform = "android"
    name = "android-raster"

    def __init__(
        self,
        rasterizer: Rasterizer | None,
        master_size: tuple[int, int] = ANDROID_MASTER_SIZE,
        filename: str = "gradient_splash",
        densities: tuple[Density, ...] = ANDROID_DENSITIES,
    ) -> None:
        self.rasterizer = rasterizer
        self.master_size = master_size
        self.filename = filename
        self.densities = densities

    def _path(self, res_dir: Path, bucket: str) -> Path:
        return res_dir / f"drawable-{bucket}" / f"{self.filename}.png"

    def render(self, gradient: Gradient, res_dir: Path) -> RenderOutcome:
        width, height = self.master_size
        if self.rasterizer is None:
            return RenderFailure(platform=self.platform, target=self.name, error=NO_BACKEND)
        try:
            master = self.rasterizer.rasterize(build_vector(gradient, width, height), width, height)
            images = fan_out(self.rasterizer, master, self.master_size, self.densities)
            files = [_write_bytes(self._path(res_dir, bucket), data) for bucket, data in images.items()]
        except (RasterizeError, OSError, ValueError) as exc:
            return RenderFailure(platform=self.platform, target=self.name, error=str(exc))
        return RenderResult(platform=self.platform, target=self.name, files=tuple(files))

    def render_solid(self, color: str, res_dir: Path) -> RenderOutcome:
        width, height = self.master_size
        try:
            files = [
                _write_bytes(self._path(res_dir, bucket), solid_png(color, w, h))
                for bucket, (w, h) in density_sizes(width, height, self.densities).items()
            ]
        except (RasterizeError, OSError, ValueError) as exc:
            return RenderFailure(platform=self.platform, target=self.name, error=str(exc))
        return RenderResult(platform=self.platform, target=self.name, files=tuple(files), fallback=True)


class AndroidDrawableTarget:
    """Two-color ``<shape>`` drawable written to ``res/drawable/<name>.xml``."""

    platform = "android"
    name = "android-drawable"

    def __init__(self, name: str = "splash_gradient") -> None:
        self.resource_name = name

    def _path(self, res_dir: Path) -> Path:
        return res_dir / "drawable" / f"{self.resource_name}.xml"

    def render(self, gradient: Gradient, res_dir: Path, fallback: bool = False) -> RenderOutcome:
        try:
            path = _write_text(self._path(res_dir), to_android_shape(gradient).to_xml())
        except (OSError, ValueError) as exc:
            return RenderFailure(platform=self.platform, target=self.name, error=str(exc))
        return RenderResult(platform=self.platform, target=self.name, files=(path,), fallback=fallback)

    def render_solid(self, color: str, res_dir: Path) -> RenderOutcome:
        try:
            path = _write_text(self._path(res_dir), solid_drawable_xml(color))
        except OSError as exc:
            return RenderFailure(platform=self.platform, target=self.name, error=str(exc))
        return RenderResult(platform=self.platform, target=self.name, files=(path,), fallback=True)


class IosImagesetTarget:
    """Single universal PNG plus ``Contents.json`` inside ``<assets>/<imageset>.imageset``."""

    platform = "ios"
    name = "ios-imageset"

    def __init__(
        self,
        rasterizer: Rasterizer | None,
        size: tuple[int, int] = (1024, 1024),
        imageset: str = "LaunchImage",
        filename: str = "LaunchImage.png",
    ) -> None:
        self.rasterizer = rasterizer
        self.size = size
        self.imageset = imageset
        self.filename = filename

    def imageset_dir(self, assets_dir: Path) -> Path:
        return assets_dir / f"{self.imageset}.imageset"

    def contents(self) -> dict:
        return {
            "images": [{"idiom": "universal", "filename": self.filename, "scale": "1x"}],
            "info": {"version": 1, "author": IMAGESET_AUTHOR},
        }

    def _write(self, assets_dir: Path, png: bytes) -> tuple[Path, ...]:
        folder = self.imageset_dir(assets_dir)
        image = _write_bytes(folder / self.filename, png)
        manifest = _write_text(folder / "Contents.json", json.dumps(self.contents(), indent=2) + "\n")
        return image, manifest

    def render(self, gradient: Gradient, assets_dir: Path) -> RenderOutcome:
        width, height = self.size
        if self.rasterizer is None:
            return RenderFailure(platform=self.platform, target=self.name, error=NO_BACKEND)
        try:
            png = self.rasterizer.rasterize(build_vector(gradient, width, height), width, height)
            files = self._write(assets_dir, png)
        except (RasterizeError, OSError, ValueError) as exc:
            return RenderFailure(platform=self.platform, target=self.name, error=str(exc))
        return RenderResult(platform=self.platform, target=self.name, files=files)

    def render_solid(self, color: str, assets_dir: Path) -> RenderOutcome:
        width, height = self.size
        try:
            files = self._write(assets_dir, solid_png(color, width, height))
        except (RasterizeError, OSError, ValueError) as exc:
            return RenderFailure(platform=self.platform, target=self.name, error=str(exc))
        return RenderResult(platform=self.platform, target=self.name, files=files, fallback=True)
