"""Repository browsing tools -- metadata, directory listings and file contents."""

from __future__ import annotations

from dataclasses import asdict

from mcp.server.fastmcp import Context

from toast_mcp.errors import ToastMcpError
from toast_mcp.tools._helpers import github_client


async def get_repository_info(ctx: Context) -> dict[str, object]:
    """Get basic information about the Angular Toast Notifications demo repository.

    Returns name, description, stars, forks, open issue count, primary
    language, URL, and creation/last update timestamps.
    """
    try:
        github = github_client(ctx)
        return asdict(await github.get_repository_info())
    except ToastMcpError as exc:
        return {"error": str(exc)}
    except Exception as exc:
        await ctx.error(f"Unexpected error in get_repository_info: {exc}")
        return {"error": f"Internal error: {type(exc).__name__}"}


async def list_contents(
    ctx: Context,
    path: str = "",
    branch: str = "main",
) -> list[dict[str, object]] | dict[str, object]:
    """List files and directories in the Angular Toast Notifications repository.

    Use this to browse the remote repository structure, documentation,
    sample components, and configuration files. The MCP server's own
    folder (cdd-toast) is excluded.

    Args:
        path: Path to the directory or file to list. Empty for the root.
        branch: Git branch to browse.

    Returns:
        A list of entries (name, path, type, size, url) for a directory,
        or a single entry when ``path`` is a file.
    """
    try:
        github = github_client(ctx)
        result = await github.list_contents(path, branch)
        if isinstance(result, list):
            return [asdict(entry) for entry in result]
        return asdict(result)
    except ToastMcpError as exc:
        return {"error": str(exc)}
    except Exception as exc:
        await ctx.error(f"Unexpected error in list_contents: {exc}")
        return {"error": f"Internal error: {type(exc).__name__}"}


async def get_file_contents(
    file_path: str,
    ctx: Context,
    branch: str = "main",
) -> dict[str, object]:
    """Retrieve the complete contents of a file from the repository.

    Use this to read documentation, sample components, configuration
    examples, or type definitions.

    Args:
        file_path: Relative path to the file in the repository.
        branch: Git branch to fetch from.
    """
    if not file_path:
        return {"error": "file_path must not be empty"}
    try:
        github = github_client(ctx)
        return asdict(await github.get_file_contents(file_path, branch))
    except ToastMcpError as exc:
        return {"error": str(exc)}
    except Exception as exc:
        await ctx.error(f"Unexpected error in get_file_contents: {exc}")
        return {"error": f"Internal error: {type(exc).__name__}"}
