"""Gradient splash pipeline: parse once, render per platform, degrade to solid color."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from splashgen_gradient import Gradient, ParseFailure, parse_gradient
from splashgen_renderer import (
    AndroidDrawableTarget,
    AndroidRasterTarget,
    IosImagesetTarget,
    Rasterizer,
    RasterizeError,
    RenderFailure,
    RenderOutcome,
    get_rasterizer,
)

from .config import SplashgenConfig
from .logging_setup import get_logger
from .project import OutputPaths


SUPPORTED_PLATFORMS = ("android", "ios")

LOG = get_logger("pipeline")


@dataclass
class PipelineReport:
    gradient: str | None
    skipped: bool = False
    parsed: bool = False
    failure_reason: str | None = None
    fallback_color: str | None = None
    warnings: list[str] = field(default_factory=list)
    results: list[RenderOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.results)

    def to_dict(self) -> dict[str, Any]:
        return {
            "gradient": self.gradient,
            "skipped": self.skipped,
            "parsed": self.parsed,
            "failure_reason": self.failure_reason,
            "fallback_color": self.fallback_color,
            "warnings": list(self.warnings),
            "ok": self.ok,
            "results": [
                {**asdict(r), "ok": r.ok, "files": [str(p) for p in getattr(r, "files", ())]} for r in self.results
            ],
        }


class SplashPipeline:
    def __init__(self, config: SplashgenConfig | None = None, rasterizer: Rasterizer | None = None) -> None:
        self.config = config or SplashgenConfig()
        self.backend_error: str | None = None
        if rasterizer is None:
            try:
                rasterizer = get_rasterizer(self.config.render.backend)
            except (RasterizeError, ValueError) as exc:
                self.backend_error = str(exc)
                LOG.error(f"raster backend {self.config.render.backend!r} unavailable: {exc}", extra={"event": "backend_unavailable"})
        self.rasterizer = rasterizer

    def android_raster_target(self) -> AndroidRasterTarget:
        cfg = self.config.android
        return AndroidRasterTarget(
            self.rasterizer,
            master_size=(cfg.master_width, cfg.master_height),
            filename=cfg.filename,
        )

    def android_drawable_target(self) -> AndroidDrawableTarget:
        return AndroidDrawableTarget(self.config.android.drawable_name)

    def ios_target(self) -> IosImagesetTarget:
        cfg = self.config.ios
        return IosImagesetTarget(
            self.rasterizer,
            size=(cfg.size, cfg.size),
            imageset=cfg.imageset,
            filename=cfg.filename,
        )

    @staticmethod
    def _platforms(platforms: list[str]) -> list[str]:
        out: list[str] = []
        for name in platforms:
            key = name.strip().lower()
            if key not in SUPPORTED_PLATFORMS:
                LOG.warning(f"ignoring unsupported platform {name!r}", extra={"event": "platform_unsupported"})
                continue
            if key not in out:
                out.append(key)
        return out

    def _render_android(self, gradient: Gradient, res_dir: Path) -> list[RenderOutcome]:
        drawable = self.android_drawable_target()
        if self.config.android.mode == "drawable":
            return [drawable.render(gradient, res_dir)]

        result = self.android_raster_target().render(gradient, res_dir)
        if result.ok:
            return [result]
        LOG.warning(
            f"android raster render failed ({result.error}); writing two-color shape drawable",
            extra={"event": "android_raster_failed"},
        )
        return [result, drawable.render(gradient, res_dir, fallback=True)]

    def _render(self, platform: str, gradient: Gradient, out_dir: Path) -> list[RenderOutcome]:
        if platform == "android":
            return self._render_android(gradient, out_dir)
        return [self.ios_target().render(gradient, out_dir)]

    def _render_solid(self, platform: str, color: str, out_dir: Path) -> list[RenderOutcome]:
        if platform == "ios":
            return [self.ios_target().render_solid(color, out_dir)]
        results = [self.android_drawable_target().render_solid(color, out_dir)]
        if self.config.android.mode == "raster":
            results.append(self.android_raster_target().render_solid(color, out_dir))
        return results

    def _log_results(self, results: list[RenderOutcome]) -> None:
        for result in results:
            if isinstance(result, RenderFailure):
                LOG.error(
                    f"{result.platform} {result.target} failed: {result.error}",
                    extra={"event": "render_failed", "platform": result.platform, "target": result.target},
                )
            else:
                LOG.info(
                    f"{result.platform} {result.target} wrote {len(result.files)} file(s)"
                    + (" (fallback)" if result.fallback else ""),
                    extra={
                        "event": "render_done",
                        "platform": result.platform,
                        "target": result.target,
                        "fallback": result.fallback,
                    },
                )

    def run(self, gradient_text: str | None, platforms: list[str], paths: OutputPaths) -> PipelineReport:
        report = PipelineReport(gradient=gradient_text)
        if not gradient_text or not gradient_text.strip():
            LOG.info("SPLASH_GRADIENT not set, skipping", extra={"event": "gradient_missing"})
            report.skipped = True
            return report

        selected = self._platforms(platforms)
        outcome = parse_gradient(gradient_text, fallback_color=self.config.fallback.color)

        if isinstance(outcome, ParseFailure):
            report.failure_reason = outcome.reason.value
            report.fallback_color = outcome.dominant_color
            LOG.warning(
                f"invalid gradient {gradient_text!r}: {outcome.message}; using solid {outcome.dominant_color}",
                extra={"event": "gradient_invalid"},
            )
        else:
            report.parsed = True
            report.warnings = list(outcome.warnings)
            for warning in outcome.warnings:
                LOG.warning(warning, extra={"event": "gradient_warning"})

        for platform in selected:
            out_dir = paths.for_platform(platform)
            if out_dir is None:
                LOG.warning(f"no output directory for {platform}, skipping", extra={"event": "platform_missing"})
                continue
            if isinstance(outcome, ParseFailure):
                results = self._render_solid(platform, outcome.dominant_color, out_dir)
            else:
                results = self._render(platform, outcome, out_dir)
            self._log_results(results)
            report.results.extend(results)

        return report
