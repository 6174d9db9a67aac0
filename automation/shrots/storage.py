"""Config discovery and loading.

The first existing file among the search paths wins.  TOML and JSON are
both accepted; the suffix picks the decoder.  Every problem is raised as
a :class:`~.errors.ConfigError` before any window is created.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path

from pydantic import ValidationError

from .errors import ConfigNotFound, ConfigParseError, MalformedPalette
from .models import MALFORMED_COLOR, Config

APP_NAME = "shrots"
CONFIG_NAMES = ("Config.toml", "Config.json")


def search_paths(app: str = APP_NAME) -> list[Path]:
    """Candidate config files, in priority order."""
    dirs = [Path.cwd(), Path.home() / ".config" / app, Path("/etc") / app]
    return [d / name for d in dirs for name in CONFIG_NAMES]


def find_config(paths: list[Path] | None = None) -> Path:
    candidates = search_paths() if paths is None else paths
    for p in candidates:
        if p.is_file():
            return p
    looked = "\n".join(f"  {p}" for p in candidates)
    raise ConfigNotFound(f"Could not find a valid configuration file. Looked in:\n{looked}")


def resolve_path(path: str | Path | None = None) -> Path:
    """Return the config file to use: *path* if given, else the first one found."""
    if path is None:
        return find_config()
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise ConfigNotFound(f"Config file not found: {p}")
    return p


def _decode(p: Path) -> object:
    try:
        raw = p.read_text(encoding="utf-8")
        if p.suffix.lower() == ".json":
            return json.loads(raw)
        return tomllib.loads(raw)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigParseError(f"{p}: {exc}") from exc


def _format_errors(exc: ValidationError) -> str:
    lines = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<root>"
        lines.append(f"  {loc}: {err['msg']}")
    return "\n".join(lines)


def load(path: str | Path | None = None) -> Config:
    """Read, decode and validate the config document."""
    p = resolve_path(path)
    data = _decode(p)
    try:
        return Config.model_validate(data)
    except ValidationError as exc:
        details = _format_errors(exc)
        if any(err["type"] == MALFORMED_COLOR for err in exc.errors()):
            raise MalformedPalette(f"{p}: malformed color\n{details}") from exc
        raise ConfigParseError(f"{p}: invalid config\n{details}") from exc
