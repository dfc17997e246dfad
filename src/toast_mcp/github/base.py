"""Port: read-only access to the documentation repository on GitHub."""

from __future__ import annotations

from typing import Protocol

from toast_mcp.models import ContentEntry, FileContents, RepositoryInfo


class GitHubRepoPort(Protocol):
    """Port for browsing a single GitHub repository."""

    owner: str
    repo: str

    async def get_repository_info(self) -> RepositoryInfo:
        """Fetch basic repository metadata."""
        ...

    async def list_contents(
        self,
        path: str = "",
        branch: str = "main",
    ) -> list[ContentEntry] | ContentEntry:
        """List a directory, or describe a single file."""
        ...

    async def get_file_contents(self, file_path: str, branch: str = "main") -> FileContents:
        """Fetch and decode one file."""
        ...
