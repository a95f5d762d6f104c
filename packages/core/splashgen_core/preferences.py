"""Read branding preferences from a Cordova project."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path

from .logging_setup import get_logger


GRADIENT_PREFERENCE = "SPLASH_GRADIENT"
BUILD_CONFIG_PATH = Path(".cordova-app-data") / "build-config.json"

LOG = get_logger("preferences")


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _matching_value(parent: ET.Element, name: str) -> str | None:
    value = None
    for child in parent:
        if _local(child.tag) == "preference" and (child.get("name") or "").lower() == name.lower():
            value = child.get("value")
    return value


def read_preference(config_xml: Path, name: str, platform: str | None = None) -> str | None:
    """Value of ``<preference name=...>`` in ``config.xml``.

    A preference inside ``<platform name="...">`` for ``platform`` overrides the
    top-level one. Cordova compares names case-insensitively, and so do we.
    """
    if not config_xml.exists():
        return None
    try:
        root = ET.parse(config_xml).getroot()
    except ET.ParseError as exc:
        LOG.warning(f"could not parse {config_xml}: {exc}", extra={"event": "config_xml_invalid"})
        return None

    value = _matching_value(root, name)
    if platform:
        for child in root:
            if _local(child.tag) == "platform" and (child.get("name") or "").lower() == platform.lower():
                override = _matching_value(child, name)
                if override is not None:
                    value = override
    return value


def read_build_config_preference(project_root: Path, name: str) -> str | None:
    path = project_root / BUILD_CONFIG_PATH
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        LOG.warning(f"could not read {path}: {exc}", extra={"event": "build_config_invalid"})
        return None
    prefs = data.get("preferences") if isinstance(data, dict) else None
    if not isinstance(prefs, dict):
        return None
    value = prefs.get(name)
    return str(value) if value is not None else None


def resolve_gradient_preference(
    project_root: Path,
    platform: str | None = None,
    name: str = GRADIENT_PREFERENCE,
) -> str | None:
    value = read_preference(project_root / "config.xml", name, platform)
    if value is None or not value.strip():
        value = read_build_config_preference(project_root, name)
    if value is None or not value.strip():
        return None
    return value.strip()


def gradient_preferences(
    project_root: Path,
    platforms: list[str],
    name: str = GRADIENT_PREFERENCE,
) -> dict[str, str | None]:
    """Resolve ``name`` once per platform so ``<platform>`` overrides apply."""
    return {platform: resolve_gradient_preference(project_root, platform, name) for platform in platforms}
