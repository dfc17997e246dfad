"""verify_config tool -- validate the local Angular toast configuration."""

from __future__ import annotations

import asyncio

from mcp.server.fastmcp import Context

from toast_mcp.verification.validator import verify_config


async def verify_angular_config(
    ctx: Context,
    app_config_path: str | None = None,
    toast_config_path: str | None = None,
) -> dict[str, object]:
    """Verify that the user's existing Angular app configuration is correct.

    Use this tool when the user asks to verify configuration, check setup,
    validate configuration, review the current setup, or confirm everything
    is correct. Reads ``src/app/app.config.ts`` and
    ``src/assets/config/toast-config.json`` locally (searching the working
    directory, ``client-app``, and their parent) and validates them against
    the documented setup.

    Args:
        app_config_path: Optional custom path to app.config.ts.
        toast_config_path: Optional custom path to toast-config.json.

    Returns:
        Validation report with issues (each with a suggested fix), summary
        suggestions, a checklist of what is configured, and the file
        locations that were checked.
    """
    report = await asyncio.to_thread(verify_config, app_config_path, toast_config_path)
    if not report.success:
        await ctx.info(f"Toast configuration has {len(report.issues)} issue(s)")
    return report.to_dict()
