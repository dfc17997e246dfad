"""Check registry for the Angular wiring file and the toast settings file.

Every check is independent: all of them run on every verification and
report in the order they are declared here.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from toast_mcp.models import IssueKind, ValidationIssue

LIBRARY_PACKAGE = "angular-toast-notifications"
MODULE_NAME = "ToastNotificationModule"
FACTORY_NAME = "httpLoaderFactoryToast"

REQUIRED_FIELDS: tuple[str, ...] = (
    "position",
    "duration",
    "maxToasts",
    "showProgressBar",
    "enableSound",
    "defaultType",
)

VALID_POSITIONS: tuple[str, ...] = (
    "top-left",
    "top-right",
    "top-center",
    "bottom-left",
    "bottom-right",
    "bottom-center",
)


def _named_import(name: str, package: str) -> re.Pattern[str]:
    return re.compile(
        rf"import\s*{{\s*[^}}]*{name}[^}}]*}}\s*from\s*['\"]{re.escape(package)}['\"]"
    )


# ─── Wiring file (app.config.ts) ─────────────────────────────


@dataclass(frozen=True, slots=True)
class WiringCheck:
    """A presence check against the text of ``app.config.ts``.

    ``checklist_field`` names the Checklist flag that mirrors the match
    result, or ``None`` when the check only reports issues.
    """

    id: str
    pattern: re.Pattern[str]
    kind: IssueKind
    message: str
    fix: str
    checklist_field: str | None = None

    def run(self, text: str) -> tuple[bool, ValidationIssue | None]:
        if self.pattern.search(text):
            return True, None
        return False, ValidationIssue(kind=self.kind, message=self.message, fix=self.fix)


WIRING_CHECKS: tuple[WiringCheck, ...] = (
    WiringCheck(
        id="toast-module-import",
        pattern=_named_import(MODULE_NAME, LIBRARY_PACKAGE),
        kind=IssueKind.ERROR,
        message=f"{MODULE_NAME} is not imported",
        fix=f"Add: import {{ {MODULE_NAME} }} from '{LIBRARY_PACKAGE}';",
        checklist_field="has_toast_module_import",
    ),
    WiringCheck(
        id="toast-config-import",
        pattern=_named_import("ToastConfig", LIBRARY_PACKAGE),
        kind=IssueKind.WARNING,
        message="ToastConfig type is not imported",
        fix=f"Add: import {{ ToastConfig }} from '{LIBRARY_PACKAGE}';",
    ),
    WiringCheck(
        id="http-client-import",
        pattern=_named_import("HttpClient", "@angular/common/http"),
        kind=IssueKind.ERROR,
        message="HttpClient is not imported",
        fix="Add: import { HttpClient } from '@angular/common/http';",
    ),
    WiringCheck(
        id="provide-http-client",
        # Feature arguments such as withInterceptorsFromDi() are allowed.
        pattern=re.compile(r"provideHttpClient\("),
        kind=IssueKind.ERROR,
        message="provideHttpClient() is not registered in providers",
        fix="Add provideHttpClient() to the providers array in appConfig",
        checklist_field="has_provide_http_client",
    ),
    WiringCheck(
        id="http-loader-factory",
        pattern=re.compile(rf"export\s+const\s+{FACTORY_NAME}\s*="),
        kind=IssueKind.ERROR,
        message=f"{FACTORY_NAME} function is not defined",
        fix=f"Create the {FACTORY_NAME} factory function to load toast configuration from JSON",
        checklist_field="has_http_loader_factory",
    ),
    WiringCheck(
        id="toast-module-provider",
        pattern=re.compile(rf"{MODULE_NAME}\.forRootWithProvider\(\s*{FACTORY_NAME}\s*\)"),
        kind=IssueKind.ERROR,
        message=f"{MODULE_NAME} is not properly configured with provider",
        fix=(
            f"Add: importProvidersFrom({MODULE_NAME}.forRootWithProvider({FACTORY_NAME})) "
            "to providers"
        ),
        checklist_field="has_toast_module_provider",
    ),
)


# ─── Settings file (toast-config.json) ───────────────────────


def _is_number(value: object) -> bool:
    # JSON true/false decode to bool, which is an int subclass.
    return isinstance(value, int | float) and not isinstance(value, bool)


def missing_fields(settings: dict[str, object]) -> list[str]:
    """Return required settings keys absent from ``settings``, in declared order."""
    return [name for name in REQUIRED_FIELDS if name not in settings]


def check_required_fields(settings: dict[str, object]) -> ValidationIssue | None:
    missing = missing_fields(settings)
    if not missing:
        return None
    return ValidationIssue(
        kind=IssueKind.WARNING,
        message=f"toast-config.json is missing fields: {', '.join(missing)}",
        fix=(
            "Add the missing fields to your toast-config.json. "
            f"Required fields: {', '.join(REQUIRED_FIELDS)}"
        ),
    )


def check_position(settings: dict[str, object]) -> ValidationIssue | None:
    position = settings.get("position")
    if not position or position in VALID_POSITIONS:
        return None
    return ValidationIssue(
        kind=IssueKind.ERROR,
        message=f"Invalid position value: {position}",
        fix=f"Set position to one of: {', '.join(VALID_POSITIONS)}",
    )


def check_duration(settings: dict[str, object]) -> ValidationIssue | None:
    if "duration" not in settings or _is_number(settings["duration"]):
        return None
    return ValidationIssue(
        kind=IssueKind.ERROR,
        message="duration must be a number (milliseconds)",
        fix="Update duration to a numeric value (e.g., 3000)",
    )


def check_max_toasts(settings: dict[str, object]) -> ValidationIssue | None:
    if "maxToasts" not in settings or _is_number(settings["maxToasts"]):
        return None
    return ValidationIssue(
        kind=IssueKind.ERROR,
        message="maxToasts must be a number",
        fix="Update maxToasts to a numeric value (e.g., 5)",
    )


SETTINGS_CHECKS: tuple[Callable[[dict[str, object]], ValidationIssue | None], ...] = (
    check_required_fields,
    check_position,
    check_duration,
    check_max_toasts,
)
