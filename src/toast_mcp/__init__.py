"""toast-mcp: configure and verify Angular toast notifications from your assistant."""

from __future__ import annotations

from importlib import metadata

DISTRIBUTION = "toast-mcp"


def installed_version(distribution: str = DISTRIBUTION) -> str:
    """Version recorded in the installed metadata, ``0.0.0+local`` for a bare checkout."""
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return "0.0.0+local"


__version__ = installed_version()


def main() -> None:
    """Serve the toast tools over stdio."""
    from toast_mcp.server import mcp

    mcp.run(transport="stdio")
