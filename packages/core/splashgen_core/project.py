"""Cordova project layout: where generated splash assets go."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


ANDROID_RES = Path("platforms") / "android" / "app" / "src" / "main" / "res"
_IOS_SKIP_DIRS = {"build", "CordovaLib", "cordova", "www", "platform_www", "Pods"}


@dataclass(frozen=True)
class OutputPaths:
    android_res_dir: Path | None = None
    ios_assets_dir: Path | None = None

    def for_platform(self, platform: str) -> Path | None:
        if platform == "android":
            return self.android_res_dir
        if platform == "ios":
            return self.ios_assets_dir
        return None


def android_res_dir(project_root: Path) -> Path | None:
    if not (project_root / "platforms" / "android").is_dir():
        return None
    return project_root / ANDROID_RES


def _ios_app_dir(ios_root: Path) -> Path | None:
    for child in sorted(ios_root.iterdir()):
        if not child.is_dir() or child.name.startswith("."):
            continue
        if child.name in _IOS_SKIP_DIRS or child.suffix in (".xcodeproj", ".xcworkspace"):
            continue
        return child
    return None


def ios_assets_dir(project_root: Path) -> Path | None:
    ios_root = project_root / "platforms" / "ios"
    if not ios_root.is_dir():
        return None
    app_dir = _ios_app_dir(ios_root)
    if app_dir is None:
        return None
    for name in ("Assets.xcassets", "Images.xcassets"):
        if (app_dir / name).is_dir():
            return app_dir / name
    return app_dir / "Assets.xcassets"


def resolve_output_paths(project_root: Path, platforms: list[str]) -> OutputPaths:
    wanted = {p.strip().lower() for p in platforms}
    return OutputPaths(
        android_res_dir=android_res_dir(project_root) if "android" in wanted else None,
        ios_assets_dir=ios_assets_dir(project_root) if "ios" in wanted else None,
    )
