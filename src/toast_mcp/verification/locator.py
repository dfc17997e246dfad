"""Locate the Angular wiring file and toast settings file on disk."""

from __future__ import annotations

import os
from pathlib import Path

from toast_mcp.models import ConfigFileLocations

APP_CONFIG_SUFFIX = Path("src", "app", "app.config.ts")
TOAST_CONFIG_SUFFIX = Path("src", "assets", "config", "toast-config.json")


def candidate_dirs(base_dir: Path) -> list[Path]:
    """Directories probed for an Angular project, in priority order.

    Covers running from the project itself, from a workspace holding
    ``client-app``, or from a sibling directory of either.
    """
    return [
        base_dir,
        base_dir / "client-app",
        base_dir.parent,
        base_dir.parent / "client-app",
    ]


def _search(base_dir: Path, suffix: Path) -> str | None:
    for directory in candidate_dirs(base_dir):
        candidate = directory / suffix
        if candidate.exists():
            return str(candidate)
    return None


def _resolve(path: str) -> str:
    return os.path.abspath(path)


def find_config_files(
    app_config_path: str | None = None,
    toast_config_path: str | None = None,
    *,
    base_dir: Path | None = None,
) -> ConfigFileLocations:
    """Resolve where the wiring file and settings file live.

    Explicit paths win and are resolved to absolute paths without checking
    that they exist. A path not given is searched for across
    ``candidate_dirs``; the first existing match is used, else ``None``.
    """
    if app_config_path and toast_config_path:
        return ConfigFileLocations(
            app_config_path=_resolve(app_config_path),
            toast_config_path=_resolve(toast_config_path),
        )

    base = base_dir if base_dir is not None else Path.cwd()

    found_app = _resolve(app_config_path) if app_config_path else _search(base, APP_CONFIG_SUFFIX)
    found_toast = (
        _resolve(toast_config_path) if toast_config_path else _search(base, TOAST_CONFIG_SUFFIX)
    )
    return ConfigFileLocations(app_config_path=found_app, toast_config_path=found_toast)
