"""Reach the lifespan adapters from a tool's FastMCP context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcp.server.fastmcp import Context

if TYPE_CHECKING:
    from toast_mcp.github.base import GitHubRepoPort
    from toast_mcp.server import AppContext


def app_context(ctx: Context) -> AppContext:
    """Return the AppContext yielded by ``app_lifespan``.

    Raises TypeError when the server was started with some other lifespan.
    """
    from toast_mcp.server import AppContext

    state = ctx.request_context.lifespan_context
    if isinstance(state, AppContext):
        return state
    raise TypeError(
        f"toast-mcp tools need the app_lifespan state, got {type(state).__name__}"
    )


def github_client(ctx: Context) -> GitHubRepoPort:
    """Shortcut for the repository adapter shared by the GitHub-backed tools."""
    return app_context(ctx).github
