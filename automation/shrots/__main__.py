"""Entry point: python -m automation.shrots [CONFIG] [--terminal] [--check]"""

from __future__ import annotations

import argparse
import sys

from colorama import Fore, Style, init

from . import storage
from .errors import ConfigError, LayoutError
from .layout import layout
from .models import Config

init()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="shrots",
        description="Keyboard shortcut cheat sheet overlay",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help=(
            "Path to a Config.toml / Config.json "
            "(default: first of ./, ~/.config/shrots/, /etc/shrots/)"
        ),
    )
    parser.add_argument(
        "--terminal",
        action="store_true",
        help="Show the cheat sheet in the terminal instead of a window",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the config and lay out the grid, then exit",
    )
    return parser.parse_args(argv)


def _fail(message: str) -> int:
    print(Fore.RED + message + Style.RESET_ALL, file=sys.stderr)
    return 1


def _summary(path: str, config: Config) -> str:
    mode = "explicit" if config.is_explicit else "auto"
    columns = len(config.columns) if config.columns is not None else config.general.columns
    g = config.general
    return (
        f"{path}\n"
        f"  mode: {mode}, {columns} column(s), {g.width}x{g.height}px, border {g.border}px\n"
        f"  {config.block_count} block(s), {config.entry_count} shortcut(s)"
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        path = storage.resolve_path(args.config)
        config = storage.load(path)
        model = config.layout_model()
        cfg = config.layout_config()
        palette = config.palette()
        # Run the geometry once so impossible layouts fail before any window opens
        layout(model, cfg)
    except (ConfigError, LayoutError) as exc:
        return _fail(str(exc))

    grid = None
    if args.terminal:
        from .app import composite

        # Cells are much coarser than pixels, so this layout can fail on its own
        try:
            grid = composite(model, cfg, palette)
        except LayoutError as exc:
            return _fail(f"Config does not fit the terminal view: {exc}")

    if args.config is None and config.is_explicit:
        print(
            Fore.YELLOW + f"Using explicit layout found at {path}; "
            "pass the config path to choose one directly." + Style.RESET_ALL,
            file=sys.stderr,
        )

    if args.check:
        print(Fore.GREEN + "Config OK: " + Style.RESET_ALL + _summary(str(path), config))
        return 0

    if grid is not None:
        from .app import CheatSheetApp

        CheatSheetApp(grid, palette).run()
    else:
        from .window import CheatSheetWindow

        CheatSheetWindow(model, cfg, palette).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
