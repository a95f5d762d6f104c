"""Project settings schema and load/save helpers."""

from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from .logging_setup import LEVELS


CONFIG_VERSION = 1
CONFIG_FILENAME = "splashgen.json"

_BACKENDS = ("pillow", "cairosvg")
_ANDROID_MODES = ("raster", "drawable")
_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass
class RenderConfig:
    backend: str = "pillow"


@dataclass
class AndroidConfig:
    mode: str = "raster"
    master_width: int = 1080
    master_height: int = 1920
    filename: str = "gradient_splash"
    drawable_name: str = "splash_gradient"


@dataclass
class IosConfig:
    size: int = 1024
    imageset: str = "LaunchImage"
    filename: str = "LaunchImage.png"


@dataclass
class FallbackConfig:
    color: str = "#000000"


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7
    console: bool = True
    log_dir: str | None = None
    level: str = "INFO"


@dataclass
class SplashgenConfig:
    config_version: int = CONFIG_VERSION
    render: RenderConfig = field(default_factory=RenderConfig)
    android: AndroidConfig = field(default_factory=AndroidConfig)
    ios: IosConfig = field(default_factory=IosConfig)
    fallback: FallbackConfig = field(default_factory=FallbackConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def config_path(project_root: Path | None = None) -> Path:
    return (project_root or Path.cwd()) / CONFIG_FILENAME


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _normalize_render(cfg: SplashgenConfig) -> None:
    backend = str(cfg.render.backend).lower()
    cfg.render.backend = backend if backend in _BACKENDS else "pillow"


def _normalize_android(cfg: SplashgenConfig) -> None:
    defaults = AndroidConfig()
    if cfg.android.mode not in _ANDROID_MODES:
        cfg.android.mode = defaults.mode
    cfg.android.master_width = _positive_int(cfg.android.master_width, defaults.master_width)
    cfg.android.master_height = _positive_int(cfg.android.master_height, defaults.master_height)
    cfg.android.filename = str(cfg.android.filename or defaults.filename)
    cfg.android.drawable_name = str(cfg.android.drawable_name or defaults.drawable_name)


def _normalize_ios(cfg: SplashgenConfig) -> None:
    defaults = IosConfig()
    cfg.ios.size = _positive_int(cfg.ios.size, defaults.size)
    cfg.ios.imageset = str(cfg.ios.imageset or defaults.imageset)
    cfg.ios.filename = str(cfg.ios.filename or defaults.filename)


def _normalize_fallback(cfg: SplashgenConfig) -> None:
    color = str(cfg.fallback.color)
    cfg.fallback.color = color.lower() if _HEX_COLOR.match(color) else FallbackConfig().color


def _normalize_diagnostics(cfg: SplashgenConfig) -> None:
    cfg.diagnostics.keep_log_files = max(2, _positive_int(cfg.diagnostics.keep_log_files, 7))
    cfg.diagnostics.console = bool(cfg.diagnostics.console)
    level = str(cfg.diagnostics.level).upper()
    cfg.diagnostics.level = level if level in LEVELS else "INFO"


def load_config(path: Path | None = None) -> SplashgenConfig:
    path = path or config_path()
    if not path.exists():
        return SplashgenConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return SplashgenConfig()
    if not isinstance(data, dict):
        return SplashgenConfig()

    cfg = SplashgenConfig(
        config_version=CONFIG_VERSION,
        render=_merge(RenderConfig, data.get("render", {})),
        android=_merge(AndroidConfig, data.get("android", {})),
        ios=_merge(IosConfig, data.get("ios", {})),
        fallback=_merge(FallbackConfig, data.get("fallback", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
    )

    _normalize_render(cfg)
    _normalize_android(cfg)
    _normalize_ios(cfg)
    _normalize_fallback(cfg)
    _normalize_diagnostics(cfg)
    return cfg


def save_config(cfg: SplashgenConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
