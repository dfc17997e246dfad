"""Domain models for toast-mcp. All frozen dataclasses -- no mutation after creation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

# ─── Enumerations ─────────────────────────────────────────────


class IssueKind(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


# ─── GitHub Models ────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RepositoryInfo:
    """Basic metadata about the documentation repository."""

    name: str
    description: str | None
    stars: int
    forks: int
    open_issues: int
    language: str | None
    url: str
    created_at: str
    updated_at: str


@dataclass(frozen=True, slots=True)
class ContentEntry:
    """A file or directory inside the repository."""

    name: str
    path: str
    type: str  # "file" or "dir"
    size: int
    url: str


@dataclass(frozen=True, slots=True)
class FileContents:
    """A decoded repository file."""

    path: str
    name: str
    size: int
    content: str
    sha: str
    url: str


# ─── Extraction Models ────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Setup instructions assembled from the configuration documentation.

    Dynamic fields are ``None`` when their section was not found in the
    document. The static fields are always populated.
    """

    interface: str | None
    descriptions: dict[str, str | None]
    implementation: dict[str, str | None]
    instructions: list[str] = field(default_factory=list)
    configuration_template: dict[str, object] = field(default_factory=dict)
    usage_examples: dict[str, str] = field(default_factory=dict)
    documentation_url: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "configuration": {
                "interface": self.interface,
                "descriptions": dict(self.descriptions),
                "implementation": dict(self.implementation),
            },
            "instructions": list(self.instructions),
            "configurationTemplate": dict(self.configuration_template),
            "usageExamples": dict(self.usage_examples),
            "documentationUrl": self.documentation_url,
        }


# ─── Validation Models ────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ConfigFileLocations:
    """Resolved locations of the wiring file and the settings file."""

    app_config_path: str | None
    toast_config_path: str | None


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A single problem found while validating the Angular configuration."""

    kind: IssueKind
    message: str
    fix: str | None = None

    def to_dict(self) -> dict[str, str]:
        result = {"type": self.kind.value, "message": self.message}
        if self.fix is not None:
            result["fix"] = self.fix
        return result


# Wire names expected by existing clients of the verify tool.
_CHECKLIST_KEYS: dict[str, str] = {
    "has_app_config": "hasAppConfig",
    "has_toast_config_json": "hasToastConfigJson",
    "has_http_loader_factory": "hasHttpLoaderFactory",
    "has_toast_module_import": "hasToastModuleImport",
    "has_provide_http_client": "hasProvideHttpClient",
    "has_toast_module_provider": "hasToastModuleProvider",
    "has_valid_toast_config_schema": "hasValidToastConfigSchema",
}


@dataclass(frozen=True, slots=True)
class Checklist:
    """Presence flags, one per structural expectation."""

    has_app_config: bool = False
    has_toast_config_json: bool = False
    has_http_loader_factory: bool = False
    has_toast_module_import: bool = False
    has_provide_http_client: bool = False
    has_toast_module_provider: bool = False
    has_valid_toast_config_schema: bool = False

    def to_dict(self) -> dict[str, bool]:
        return {wire: getattr(self, attr) for attr, wire in _CHECKLIST_KEYS.items()}


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Outcome of verifying a local Angular project's toast configuration."""

    success: bool
    issues: list[ValidationIssue] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    checklist: Checklist = field(default_factory=Checklist)
    app_config_location: str = ""
    toast_config_location: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "success": self.success,
            "issues": [issue.to_dict() for issue in self.issues],
            "suggestions": list(self.suggestions),
            "checklist": self.checklist.to_dict(),
            "details": {
                "appConfigLocation": self.app_config_location,
                "toastConfigLocation": self.toast_config_location,
            },
        }
