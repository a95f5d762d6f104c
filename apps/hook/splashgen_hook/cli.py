"""CLI entrypoints: gradient inspection, single renders, and the Cordova build hook."""

from __future__ import annotations

import argparse
import json
import os
from dataclasses import asdict
from pathlib import Path

from splashgen_core import (
    SplashPipeline,
    config_path,
    gradient_preferences,
    load_config,
    resolve_output_paths,
)
from splashgen_core.logging_setup import configure_logging
from splashgen_gradient import ParseFailure, build_vector, parse_gradient, solid_drawable_xml, to_android_shape
from splashgen_renderer import RasterizeError, get_rasterizer, list_backends, solid_png


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _split_platforms(value: str | None) -> list[str]:
    if not value:
        return []
    return [p for p in value.replace(",", " ").split() if p]


def _group_by_gradient(by_platform: dict[str, str | None]) -> dict[str | None, list[str]]:
    groups: dict[str | None, list[str]] = {}
    for platform, text in by_platform.items():
        groups.setdefault(text, []).append(platform)
    return groups


def cmd_parse(args: argparse.Namespace) -> int:
    outcome = parse_gradient(args.gradient)
    if isinstance(outcome, ParseFailure):
        _print_json(
            {
                "ok": False,
                "reason": outcome.reason.value,
                "message": outcome.message,
                "dominant_color": outcome.dominant_color,
            }
        )
        return 2

    _print_json(
        {
            "ok": True,
            "kind": outcome.kind.value,
            "angle_degrees": outcome.angle_degrees,
            "shape": outcome.shape,
            "stops": [asdict(s) for s in outcome.stops],
            "warnings": list(outcome.warnings),
            "android": asdict(to_android_shape(outcome)),
        }
    )
    return 0


def cmd_descriptor(args: argparse.Namespace) -> int:
    outcome = parse_gradient(args.gradient)
    if isinstance(outcome, ParseFailure):
        print(solid_drawable_xml(outcome.dominant_color), end="")
    else:
        print(to_android_shape(outcome).to_xml(), end="")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    out = Path(args.out).expanduser()
    outcome = parse_gradient(args.gradient)
    try:
        if isinstance(outcome, ParseFailure):
            png = solid_png(outcome.dominant_color, args.width, args.height)
        else:
            rasterizer = get_rasterizer(args.backend)
            png = rasterizer.rasterize(build_vector(outcome, args.width, args.height), args.width, args.height)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(png)
    except (RasterizeError, OSError, ValueError) as exc:
        _print_json({"success": False, "error": str(exc)})
        return 2

    _print_json(
        {
            "success": True,
            "out": str(out),
            "width": args.width,
            "height": args.height,
            "fallback": isinstance(outcome, ParseFailure),
            "bytes": len(png),
        }
    )
    return 0


def cmd_hook(args: argparse.Namespace) -> int:
    root = Path(args.project_root).expanduser().resolve()
    cfg = load_config(Path(args.config).expanduser() if args.config else config_path(root))
    log_override = Path(cfg.diagnostics.log_dir).expanduser() if cfg.diagnostics.log_dir else None
    logger = configure_logging(
        keep_files=cfg.diagnostics.keep_log_files,
        console=cfg.diagnostics.console,
        directory=log_override,
        level=cfg.diagnostics.level,
    )

    platforms = [p.lower() for p in (args.platforms or _split_platforms(os.environ.get("CORDOVA_PLATFORMS")))]
    if not platforms:
        logger.info("no target platforms, nothing to do", extra={"event": "no_platforms"})
        _print_json({"skipped": True, "reason": "no platforms"})
        return 0

    if args.gradient:
        groups = {args.gradient: platforms}
    else:
        groups = _group_by_gradient(gradient_preferences(root, platforms))

    pipeline = SplashPipeline(cfg)
    paths = resolve_output_paths(root, platforms)
    reports = [pipeline.run(text, group, paths) for text, group in groups.items()]
    _print_json({"ok": all(r.ok for r in reports), "reports": [r.to_dict() for r in reports]})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="splashgen", description="Gradient splash assets for Cordova projects")
    sub = parser.add_subparsers(dest="command", required=True)

    parse_cmd = sub.add_parser("parse", help="Parse a CSS gradient and print the result")
    parse_cmd.add_argument("gradient")
    parse_cmd.set_defaults(func=cmd_parse)

    desc_cmd = sub.add_parser("descriptor", help="Print the Android shape drawable for a gradient")
    desc_cmd.add_argument("gradient")
    desc_cmd.set_defaults(func=cmd_descriptor)

    render_cmd = sub.add_parser("render", help="Render a gradient to a single PNG")
    render_cmd.add_argument("gradient")
    render_cmd.add_argument("--width", type=int, default=1024)
    render_cmd.add_argument("--height", type=int, default=1024)
    render_cmd.add_argument("--out", required=True, help="Output PNG path")
    render_cmd.add_argument("--backend", choices=list_backends(), default="pillow")
    render_cmd.set_defaults(func=cmd_render)

    hook_cmd = sub.add_parser("hook", help="Generate splash assets for a Cordova project")
    hook_cmd.add_argument("project_root", nargs="?", default=".", help="Cordova project root")
    hook_cmd.add_argument("--platforms", nargs="*", default=None, help="Defaults to $CORDOVA_PLATFORMS")
    hook_cmd.add_argument("--config", default=None, help="Settings file (default: <project_root>/splashgen.json)")
    hook_cmd.add_argument("--gradient", default=None, help="Override the SPLASH_GRADIENT preference")
    hook_cmd.set_defaults(func=cmd_hook)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command != "hook":
        configure_logging(console=False)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
