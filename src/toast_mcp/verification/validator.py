"""Validate a local Angular project's toast notification configuration."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from toast_mcp.errors import ConfigFileError
from toast_mcp.models import (
    Checklist,
    IssueKind,
    ValidationIssue,
    ValidationReport,
)
from toast_mcp.verification.checks import SETTINGS_CHECKS, WIRING_CHECKS, missing_fields
from toast_mcp.verification.locator import (
    APP_CONFIG_SUFFIX,
    TOAST_CONFIG_SUFFIX,
    find_config_files,
)
from toast_mcp.verification.reader import read_app_config, read_toast_config

logger = logging.getLogger(__name__)

SUCCESS_SUGGESTION = (
    "✓ Your configuration looks great! "
    "The Toast Notification Module is properly configured."
)


def summarize(issues: list[ValidationIssue]) -> list[str]:
    """Turn the issue list into summary suggestions, errors before warnings."""
    if not issues:
        return [SUCCESS_SUGGESTION]

    errors = sum(1 for issue in issues if issue.kind is IssueKind.ERROR)
    warnings = sum(1 for issue in issues if issue.kind is IssueKind.WARNING)

    suggestions: list[str] = []
    if errors:
        suggestions.append(
            f"Found {errors} error(s) that need to be fixed for the toast notifications "
            "to work correctly. Please review the errors above and apply the suggested fixes."
        )
    if warnings:
        suggestions.append(
            f"Found {warnings} warning(s) that may improve your configuration. "
            "Review them and apply the suggested fixes."
        )
    return suggestions


def check_app_config(text: str) -> tuple[dict[str, bool], list[ValidationIssue]]:
    """Run every wiring check against ``app.config.ts`` text.

    Returns the checklist flags set by the checks and the issues found.
    """
    flags: dict[str, bool] = {}
    issues: list[ValidationIssue] = []
    for check in WIRING_CHECKS:
        passed, issue = check.run(text)
        if check.checklist_field is not None:
            flags[check.checklist_field] = passed
        if issue is not None:
            issues.append(issue)
    return flags, issues


def check_toast_config(
    settings: dict[str, object],
) -> tuple[dict[str, bool], list[ValidationIssue]]:
    """Run every settings check against parsed ``toast-config.json``."""
    flags = {"has_valid_toast_config_schema": not missing_fields(settings)}
    issues = [issue for check in SETTINGS_CHECKS if (issue := check(settings)) is not None]
    return flags, issues


def verify_config(
    app_config_path: str | None = None,
    toast_config_path: str | None = None,
    *,
    base_dir: Path | None = None,
) -> ValidationReport:
    """Verify the wiring file and settings file of a local Angular app.

    Never raises. File-level failures (missing file, unreadable file,
    invalid JSON) set ``success=False``; content problems are reported as
    issues without changing ``success``.
    """
    checklist = Checklist()
    app_location = f"{APP_CONFIG_SUFFIX.as_posix()} (not found)"
    toast_location = f"{TOAST_CONFIG_SUFFIX.as_posix()} (not found)"

    try:
        base = base_dir if base_dir is not None else Path.cwd()
        locations = find_config_files(app_config_path, toast_config_path, base_dir=base)
        app_location = locations.app_config_path or app_location
        toast_location = locations.toast_config_path or toast_location

        success = True
        issues: list[ValidationIssue] = []
        app_path = locations.app_config_path or str(base / APP_CONFIG_SUFFIX)
        toast_path = locations.toast_config_path or str(base / TOAST_CONFIG_SUFFIX)

        app_text: str | None = None
        try:
            app_text = read_app_config(app_path)
            checklist = replace(checklist, has_app_config=True)
        except ConfigFileError as exc:
            logger.debug("Wiring file unavailable: %s", exc)
            success = False
            issues.append(
                ValidationIssue(
                    kind=IssueKind.ERROR,
                    message=f"app.config.ts not found at {app_path}",
                    fix=f"Create the file at {app_path} with proper Angular configuration",
                )
            )

        settings: dict[str, object] | None = None
        try:
            settings = read_toast_config(toast_path)
            checklist = replace(checklist, has_toast_config_json=True)
        except ConfigFileError as exc:
            logger.debug("Settings file unavailable: %s", exc)
            success = False
            issues.append(
                ValidationIssue(
                    kind=IssueKind.ERROR,
                    message=f"toast-config.json not found or invalid JSON at {toast_path}",
                    fix=f"Create the file at {toast_path} with valid ToastConfig JSON structure",
                )
            )

        if app_text is not None:
            flags, found = check_app_config(app_text)
            checklist = replace(checklist, **flags)
            issues.extend(found)

        if settings is not None:
            flags, found = check_toast_config(settings)
            checklist = replace(checklist, **flags)
            issues.extend(found)

        return ValidationReport(
            success=success,
            issues=issues,
            suggestions=summarize(issues),
            checklist=checklist,
            app_config_location=app_location,
            toast_config_location=toast_location,
        )

    except Exception as exc:
        logger.exception("Unexpected error while verifying toast configuration")
        return ValidationReport(
            success=False,
            issues=[
                ValidationIssue(
                    kind=IssueKind.ERROR,
                    message=str(exc) or "Unknown error during verification",
                )
            ],
            checklist=checklist,
            app_config_location=app_location,
            toast_config_location=toast_location,
        )
