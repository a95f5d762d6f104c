from __future__ import annotations

import sys

try:
    # Normal package import path.
    from .cli import main as _cli_main
except ImportError:
    # Script entrypoint path.
    from splashgen_hook.cli import main as _cli_main

_COMMANDS = {"parse", "descriptor", "render", "hook"}


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    # Cordova runs non-JS hooks as `<script> <project_root>`.
    if not args or (args[0] not in _COMMANDS and not args[0].startswith("-")):
        return int(_cli_main(["hook", *args]))
    return int(_cli_main(args))


if __name__ == "__main__":
    raise SystemExit(main())
