"""MCP server that helps configure and verify Angular toast notifications."""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from dotenv import find_dotenv, load_dotenv
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from toast_mcp.github.base import GitHubRepoPort
from toast_mcp.github.client import GitHubClient, resolve_github_token
from toast_mcp.tools.configure import configure_angular_app
from toast_mcp.tools.repository import get_file_contents, get_repository_info, list_contents
from toast_mcp.tools.verify import verify_angular_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared state across all tool invocations."""

    http_client: httpx.AsyncClient
    github: GitHubRepoPort


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Manage shared adapter lifecycle -- the composition root."""
    # Values already in the environment win over the .env file.
    load_dotenv(find_dotenv(usecwd=True))
    owner = os.environ.get("GITHUB_OWNER", "").strip()
    repo = os.environ.get("GITHUB_REPO", "").strip()
    token, token_source = resolve_github_token()

    # Never log the token itself.
    logger.info(
        "Initializing toast-mcp (owner=%s, repo=%s, token=%s)",
        owner or "NOT SET",
        repo or "NOT SET",
        token_source if token else "NOT SET",
    )

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(30.0, connect=10.0),
        follow_redirects=True,
        transport=httpx.AsyncHTTPTransport(retries=3),
    ) as http_client:
        yield AppContext(
            http_client=http_client,
            github=GitHubClient(http_client, owner=owner, repo=repo),
        )


mcp = FastMCP(
    "Angular Toast Notification Configurator",
    instructions=(
        "This server helps set up the angular-toast-notifications library in an "
        "Angular application.\n\n"
        "- To configure toasts in a project, call cdd-configure_angular_app first. "
        "It reads the library's configuration documentation and returns the "
        "interface, option descriptions, loader examples, a JSON template and "
        "step-by-step instructions.\n"
        "- After the user has edited their project, call cdd-verify_config to check "
        "src/app/app.config.ts and src/assets/config/toast-config.json. Present the "
        "issues with their fixes, errors first.\n"
        "- Use cdd-list_contents and cdd-get_file_contents to browse documentation "
        "and sample components in the repository when more context is needed."
    ),
    lifespan=app_lifespan,
)

# ─── Read-only tools ──────────────────────────────────────────
_READ_ONLY = ToolAnnotations(readOnlyHint=True)

mcp.tool(name="cdd-get_repository_info", annotations=_READ_ONLY)(get_repository_info)
mcp.tool(name="cdd-list_contents", annotations=_READ_ONLY)(list_contents)
mcp.tool(name="cdd-get_file_contents", annotations=_READ_ONLY)(get_file_contents)
mcp.tool(name="cdd-configure_angular_app", annotations=_READ_ONLY)(configure_angular_app)
mcp.tool(name="cdd-verify_config", annotations=_READ_ONLY)(verify_angular_config)
