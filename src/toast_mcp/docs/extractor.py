"""Extract toast setup instructions from the configuration documentation."""

from __future__ import annotations

import re

from toast_mcp.models import ExtractionResult

# ─── Regex patterns ──────────────────────────────────────────

_INTERFACE_RE = re.compile(r"export interface ToastConfig \{[\s\S]*?\}")

# Option bullets look like: - **`position`**: Where toasts appear ...
_DESCRIPTION_FIELDS = ("position", "duration", "maxToasts", "showProgressBar", "enableSound")

_DESCRIPTION_RES: dict[str, re.Pattern[str]] = {
    name: re.compile(rf"- \*\*`{name}`\*\*:(.*?)(?=\n\n- \*\*|\Z)", re.DOTALL)
    for name in _DESCRIPTION_FIELDS
}

_HTTP_LOADER_RE = re.compile(
    r"export const httpLoaderFactoryToast = \(httpClient: HttpClient\)[\s\S]*?\};"
)

_JSON_BLOCK_RE = re.compile(r"```json\s*\{([\s\S]*?)\}\s*```")

# ─── Static setup data ───────────────────────────────────────

SETUP_INSTRUCTIONS: tuple[str, ...] = (
    "1. Create toast-config.json in src/assets/config/",
    "2. Import ToastNotificationModule in app.config.ts",
    "3. Create httpLoaderFactoryToast function to load JSON config",
    "4. Add environment-specific overrides (production vs development)",
    "5. Register module with importProvidersFrom("
    "ToastNotificationModule.forRootWithProvider(httpLoaderFactoryToast))",
    "6. Inject ToastService in components where needed",
)

DEFAULT_CONFIGURATION: dict[str, object] = {
    "position": "top-right",
    "duration": 3000,
    "maxToasts": 5,
    "animationDuration": 300,
    "showProgressBar": True,
    "pauseOnHover": True,
    "enableSound": False,
    "defaultType": "info",
    "allowedOrigins": ["https://api.myapp.com"],
}

USAGE_EXAMPLES: dict[str, str] = {
    "basic": "this.toastService.success('Operation completed!');",
    "custom": (
        "this.toastService.show({ title: 'Success', message: 'Done!', type: ToastType.Success });"
    ),
    "withCallback": (
        "this.http.post('/api/data', data).subscribe({ "
        "next: () => this.toastService.success('Saved!'), "
        "error: () => this.toastService.error('Failed!') });"
    ),
}


def documentation_url(owner: str, repo: str, branch: str, path: str) -> str:
    """Build the GitHub blob URL for the documentation file."""
    return f"https://github.com/{owner}/{repo}/blob/{branch}/{path}"


def _match(pattern: re.Pattern[str], content: str, group: int = 0) -> str | None:
    m = pattern.search(content)
    if m is None:
        return None
    return m.group(group).strip()


def _template_copy() -> dict[str, object]:
    return {
        key: list(value) if isinstance(value, list) else value
        for key, value in DEFAULT_CONFIGURATION.items()
    }


def extract_configuration(
    content: str,
    owner: str,
    repo: str,
    branch: str,
    path: str,
) -> ExtractionResult:
    """Pull the known sections out of the toast configuration document.

    Uses targeted regexes tied to the first-party document layout rather than
    a markdown parser. Each section is optional: a missing section yields
    ``None`` and never an error. Static instructions, the default template
    and usage examples are always included.

    Args:
        content: Raw markdown text of the configuration document.
        owner: Repository owner, used only for the documentation URL.
        repo: Repository name, used only for the documentation URL.
        branch: Branch the document was read from.
        path: Repository path of the document.

    Returns:
        ExtractionResult combining extracted and static data.
    """
    descriptions = {
        name: _match(pattern, content, group=1) for name, pattern in _DESCRIPTION_RES.items()
    }

    return ExtractionResult(
        interface=_match(_INTERFACE_RE, content),
        descriptions=descriptions,
        implementation={
            "httpLoader": _match(_HTTP_LOADER_RE, content),
            "jsonConfig": _match(_JSON_BLOCK_RE, content, group=1),
        },
        instructions=list(SETUP_INSTRUCTIONS),
        configuration_template=_template_copy(),
        usage_examples=dict(USAGE_EXAMPLES),
        documentation_url=documentation_url(owner, repo, branch, path),
    )
