"""Read the local Angular configuration files."""

from __future__ import annotations

import json
from pathlib import Path

from toast_mcp.errors import ConfigFileError


def _read_text(path: Path | str) -> str:
    # ValueError covers undecodable text and paths with embedded NUL bytes.
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise ConfigFileError(f"Cannot read {path}: {exc}") from exc


def _reject_constant(name: str) -> object:
    raise ValueError(f"{name} is not valid JSON")


def read_app_config(path: Path | str) -> str:
    """Read the wiring file (``app.config.ts``) as text."""
    return _read_text(path)


def read_toast_config(path: Path | str) -> dict[str, object]:
    """Read and parse the settings file (``toast-config.json``).

    Parsing is strict: ``NaN`` and ``Infinity`` literals are rejected, and
    the document must be a JSON object.
    """
    text = _read_text(path)
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ConfigFileError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigFileError(
            f"Invalid toast config in {path}: expected a JSON object, got {type(data).__name__}"
        )
    return data
