"""configure_angular_app tool -- setup instructions from the remote documentation."""

from __future__ import annotations

from mcp.server.fastmcp import Context

from toast_mcp.docs.extractor import extract_configuration
from toast_mcp.errors import ToastMcpError
from toast_mcp.tools._helpers import github_client

DEFAULT_CONFIG_DOC = "doc/configuration.md"


async def configure_angular_app(
    ctx: Context,
    config_path: str = DEFAULT_CONFIG_DOC,
    branch: str = "main",
) -> dict[str, object]:
    """Fetch and analyze the toast notification configuration documentation.

    Use this tool when the user asks to: configure toast notifications, set
    up toasts, add the toast library to an Angular app, configure
    angular-toast-notifications, integrate the toast service, or set up a
    notification system.

    Args:
        config_path: Repository path of the configuration documentation.
        branch: Git branch to read the documentation from.

    Returns:
        Configuration details extracted from the documentation (ToastConfig
        interface, option descriptions, HTTP loader and JSON examples),
        step-by-step instructions, a default JSON template, usage examples
        and a link to the documentation.
    """
    try:
        github = github_client(ctx)
        try:
            doc = await github.get_file_contents(config_path, branch)
        except ToastMcpError as exc:
            return {
                "success": False,
                "error": f"Could not fetch configuration file: {exc}",
            }

        result = extract_configuration(
            doc.content,
            owner=github.owner,
            repo=github.repo,
            branch=branch,
            path=config_path,
        )
        return {"success": True, **result.to_dict()}

    except Exception as exc:
        await ctx.error(f"Unexpected error in configure_angular_app: {exc}")
        return {"success": False, "error": f"Internal error: {type(exc).__name__}"}
