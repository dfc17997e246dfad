"""Exception hierarchy for toast-mcp.

All exceptions inherit from ToastMcpError (single catch point).
Messages are written for LLM consumption -- clear, actionable, no stack traces.
"""

from __future__ import annotations


class ToastMcpError(Exception):
    """Base exception for all toast-mcp errors."""


class GitHubApiError(ToastMcpError):
    """Error communicating with the GitHub REST API."""


class RestrictedPathError(ToastMcpError):
    """Requested repository path is not exposed to the assistant."""


class ConfigFileError(ToastMcpError):
    """Error reading or parsing a local Angular configuration file."""
