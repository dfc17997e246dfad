"""Read-only client for the documentation repository on the GitHub REST API."""

from __future__ import annotations

import base64
import logging
import os
import subprocess
from dataclasses import dataclass
from urllib.parse import quote

import httpx

from toast_mcp.errors import GitHubApiError, RestrictedPathError
from toast_mcp.models import ContentEntry, FileContents, RepositoryInfo

logger = logging.getLogger(__name__)

_API_BASE = "https://api.github.com"
_API_VERSION = "2022-11-28"

# The MCP server's own sources live in the same repository.
_RESTRICTED_PREFIX = "cdd-toast-mcp"
_HIDDEN_PREFIX = "cdd-toast"

# ─── Auth resolution ───────────────────────────────────────

_token_resolved: bool = False
_resolved_token: str | None = None
_resolved_token_source: str = "none"  # env | gh_cli | none


def reset_token_cache() -> None:
    """Forget the resolved token (primarily for tests)."""
    global _resolved_token
    global _resolved_token_source
    global _token_resolved

    _token_resolved = False
    _resolved_token = None
    _resolved_token_source = "none"


def resolve_github_token() -> tuple[str | None, str]:
    """Resolve auth token: env first, then `gh auth token` fallback."""
    global _resolved_token
    global _resolved_token_source
    global _token_resolved

    env_token = os.environ.get("GITHUB_TOKEN", "").strip()
    if env_token:
        return env_token, "env"

    if _token_resolved:
        return _resolved_token, _resolved_token_source

    _token_resolved = True
    gh_token = _resolve_gh_cli_token()
    if gh_token:
        _resolved_token = gh_token
        _resolved_token_source = "gh_cli"
        logger.info("Using GitHub token from `gh auth token` fallback.")
        return gh_token, "gh_cli"

    _resolved_token = None
    _resolved_token_source = "none"
    logger.info(
        "No GitHub auth token found (checked GITHUB_TOKEN and `gh auth token`). "
        "Requests are anonymous and subject to low rate limits."
    )
    return None, "none"


def _resolve_gh_cli_token() -> str | None:
    """Try to read a token from local GitHub CLI auth context."""
    try:
        completed = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=2,
            check=False,
        )
    except (OSError, subprocess.SubprocessError):
        return None

    if completed.returncode != 0:
        return None
    token = completed.stdout.strip()
    return token or None


def _github_headers() -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": _API_VERSION,
    }
    token, _ = resolve_github_token()
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _is_restricted(path: str) -> bool:
    return path.lstrip("/").startswith(_RESTRICTED_PREFIX)


def _is_hidden(item: dict) -> bool:
    return item.get("name") == _HIDDEN_PREFIX or str(item.get("path", "")).startswith(
        _HIDDEN_PREFIX
    )


def _parse_entry(item: dict) -> ContentEntry:
    return ContentEntry(
        name=item.get("name", ""),
        path=item.get("path", ""),
        type=item.get("type", ""),
        size=item.get("size", 0),
        url=item.get("html_url", ""),
    )


# ─── Client ────────────────────────────────────────────────


@dataclass
class GitHubClient:
    """Async client for one GitHub repository (adapter for GitHubRepoPort)."""

    http: httpx.AsyncClient
    owner: str
    repo: str

    async def get_repository_info(self) -> RepositoryInfo:
        """Fetch ``/repos/{owner}/{repo}``."""
        data = await self._get(f"/repos/{self.owner}/{self.repo}")
        return RepositoryInfo(
            name=data.get("name", ""),
            description=data.get("description"),
            stars=data.get("stargazers_count", 0),
            forks=data.get("forks_count", 0),
            open_issues=data.get("open_issues_count", 0),
            language=data.get("language"),
            url=data.get("html_url", ""),
            created_at=data.get("created_at", ""),
            updated_at=data.get("updated_at", ""),
        )

    async def list_contents(
        self,
        path: str = "",
        branch: str = "main",
    ) -> list[ContentEntry] | ContentEntry:
        """List a repository directory, or describe a single file.

        The server's own ``cdd-toast*`` sources are hidden from listings.
        """
        data = await self._get_contents(path, branch)
        if isinstance(data, list):
            return [_parse_entry(item) for item in data if not _is_hidden(item)]
        return _parse_entry(data)

    async def get_file_contents(self, file_path: str, branch: str = "main") -> FileContents:
        """Fetch one file and decode its base64 payload as UTF-8."""
        data = await self._get_contents(file_path, branch)
        if isinstance(data, list) or data.get("type") == "dir":
            raise GitHubApiError(f"{file_path} is a directory, not a file.")

        try:
            content = base64.b64decode(data.get("content", "")).decode("utf-8")
        except (ValueError, UnicodeDecodeError) as exc:
            raise GitHubApiError(f"Could not decode {file_path} as UTF-8 text: {exc}") from exc

        return FileContents(
            path=data.get("path", file_path),
            name=data.get("name", ""),
            size=data.get("size", 0),
            content=content,
            sha=data.get("sha", ""),
            url=data.get("html_url", ""),
        )

    # ── Request helpers ──────────────────────────────────────────

    async def _get_contents(self, path: str, branch: str) -> dict | list:
        if _is_restricted(path):
            raise RestrictedPathError(f"Access to {_RESTRICTED_PREFIX} directory is restricted")
        encoded = quote(path.strip("/"))
        return await self._get(
            f"/repos/{self.owner}/{self.repo}/contents/{encoded}",
            params={"ref": branch},
        )

    async def _get(self, endpoint: str, params: dict[str, str] | None = None) -> dict | list:
        if not self.owner or not self.repo:
            raise GitHubApiError(
                "GitHub repository is not configured. Set GITHUB_OWNER and GITHUB_REPO."
            )

        try:
            response = await self.http.get(
                f"{_API_BASE}{endpoint}",
                params=params,
                headers=_github_headers(),
            )
        except httpx.HTTPError as exc:
            raise GitHubApiError(f"GitHub API Error: {exc}") from exc

        if not response.is_success:
            raise GitHubApiError(f"GitHub API Error: {_error_message(response)}")
        return response.json()


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    message = data.get("message") if isinstance(data, dict) else None
    return message or response.reason_phrase or f"HTTP {response.status_code}"
