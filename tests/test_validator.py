"""Tests for verification/validator.py -- the full verification report."""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from sample_project import BARE_APP_CONFIG, VALID_TOAST_CONFIG, write_project

from toast_mcp.models import Checklist, IssueKind, ValidationIssue
from toast_mcp.verification.validator import SUCCESS_SUGGESTION, summarize, verify_config


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    ws = tmp_path / "workspace"
    ws.mkdir()
    return ws


def _without(*names: str) -> dict[str, object]:
    return {k: v for k, v in VALID_TOAST_CONFIG.items() if k not in names}


class TestMissingFiles:
    def test_neither_file_present(self, workspace: Path) -> None:
        report = verify_config(base_dir=workspace)

        assert report.success is False
        assert len(report.issues) == 2
        assert all(issue.kind is IssueKind.ERROR for issue in report.issues)
        assert report.checklist == Checklist()
        assert not any(report.checklist.to_dict().values())

    def test_missing_file_messages_use_default_paths(self, workspace: Path) -> None:
        report = verify_config(base_dir=workspace)

        app_path = workspace / "src" / "app" / "app.config.ts"
        toast_path = workspace / "src" / "assets" / "config" / "toast-config.json"
        assert report.issues[0].message == f"app.config.ts not found at {app_path}"
        assert report.issues[0].fix == (
            f"Create the file at {app_path} with proper Angular configuration"
        )
        assert report.issues[1].message == (
            f"toast-config.json not found or invalid JSON at {toast_path}"
        )

    def test_details_fall_back_to_not_found(self, workspace: Path) -> None:
        report = verify_config(base_dir=workspace)

        assert report.app_config_location == "src/app/app.config.ts (not found)"
        assert report.toast_config_location == "src/assets/config/toast-config.json (not found)"

    def test_missing_settings_still_checks_wiring(self, workspace: Path) -> None:
        write_project(workspace, toast_config=None)

        report = verify_config(base_dir=workspace)

        assert report.success is False
        assert len(report.issues) == 1
        assert report.checklist.has_app_config is True
        assert report.checklist.has_toast_module_provider is True
        assert report.checklist.has_toast_config_json is False

    def test_invalid_json(self, workspace: Path) -> None:
        write_project(workspace, toast_config="{ not json")

        report = verify_config(base_dir=workspace)

        assert report.success is False
        assert report.checklist.has_toast_config_json is False
        assert "invalid JSON" in report.issues[0].message

    def test_json_array_is_invalid(self, workspace: Path) -> None:
        write_project(workspace, toast_config="[1, 2, 3]")

        report = verify_config(base_dir=workspace)

        assert report.success is False
        assert report.checklist.has_toast_config_json is False

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_literals_are_invalid_json(self, workspace: Path, literal: str) -> None:
        settings = dict(VALID_TOAST_CONFIG)
        del settings["duration"]
        body = json.dumps(settings)[:-1] + f', "duration": {literal}}}'
        write_project(workspace, toast_config=body)

        report = verify_config(base_dir=workspace)

        assert report.success is False
        assert len(report.issues) == 1
        assert report.issues[0].kind is IssueKind.ERROR
        assert "not found or invalid JSON" in report.issues[0].message
        assert report.checklist.has_toast_config_json is False
        assert report.checklist.has_valid_toast_config_schema is False

    def test_unreadable_wiring_path_still_checks_settings(self, workspace: Path) -> None:
        write_project(workspace / "app", app_config=None, toast_config=VALID_TOAST_CONFIG)
        toast = workspace / "app" / "src" / "assets" / "config" / "toast-config.json"

        report = verify_config("bad\x00path.ts", str(toast), base_dir=workspace)

        assert report.success is False
        assert len(report.issues) == 1
        assert report.issues[0].message.startswith("app.config.ts not found at ")
        assert report.checklist.has_app_config is False
        assert report.checklist.has_toast_config_json is True
        assert report.checklist.has_valid_toast_config_schema is True


class TestCompleteConfiguration:
    def test_everything_passes(self, workspace: Path) -> None:
        write_project(workspace, toast_config=VALID_TOAST_CONFIG)

        report = verify_config(base_dir=workspace)

        assert report.success is True
        assert report.issues == []
        assert all(report.checklist.to_dict().values())
        assert report.suggestions == [SUCCESS_SUGGESTION]

    def test_details_record_found_paths(self, workspace: Path) -> None:
        write_project(workspace, toast_config=VALID_TOAST_CONFIG)

        report = verify_config(base_dir=workspace)

        assert report.app_config_location == str(workspace / "src" / "app" / "app.config.ts")
        assert report.toast_config_location == str(
            workspace / "src" / "assets" / "config" / "toast-config.json"
        )

    def test_explicit_paths(self, workspace: Path) -> None:
        write_project(workspace / "elsewhere", toast_config=VALID_TOAST_CONFIG)
        app = workspace / "elsewhere" / "src" / "app" / "app.config.ts"
        toast = workspace / "elsewhere" / "src" / "assets" / "config" / "toast-config.json"

        report = verify_config(str(app), str(toast), base_dir=workspace)

        assert report.success is True
        assert report.app_config_location == os.path.abspath(app)

    def test_empty_settings_object_is_checked(self, workspace: Path) -> None:
        write_project(workspace, toast_config={})

        report = verify_config(base_dir=workspace)

        assert report.success is True
        assert report.checklist.has_toast_config_json is True
        assert report.checklist.has_valid_toast_config_schema is False
        assert [issue.kind for issue in report.issues] == [IssueKind.WARNING]


class TestContentIssues:
    def test_missing_settings_fields(self, workspace: Path) -> None:
        write_project(workspace, toast_config=_without("enableSound", "defaultType"))

        report = verify_config(base_dir=workspace)

        warnings = [issue for issue in report.issues if issue.kind is IssueKind.WARNING]
        assert len(report.issues) == 1
        assert len(warnings) == 1
        assert "enableSound" in warnings[0].message
        assert "defaultType" in warnings[0].message
        assert report.checklist.has_valid_toast_config_schema is False
        # Content issues do not flip success.
        assert report.success is True
        flags = report.checklist.to_dict()
        del flags["hasValidToastConfigSchema"]
        assert all(flags.values())

    def test_invalid_position_does_not_short_circuit(self, workspace: Path) -> None:
        settings = dict(VALID_TOAST_CONFIG, position="middle", duration="fast")
        write_project(workspace, toast_config=settings)

        report = verify_config(base_dir=workspace)

        messages = [issue.message for issue in report.issues]
        assert messages == [
            "Invalid position value: middle",
            "duration must be a number (milliseconds)",
        ]
        assert report.checklist.has_valid_toast_config_schema is True

    def test_bare_wiring_file(self, workspace: Path) -> None:
        write_project(workspace, app_config=BARE_APP_CONFIG, toast_config=VALID_TOAST_CONFIG)

        report = verify_config(base_dir=workspace)

        assert report.success is True
        assert [issue.kind for issue in report.issues] == [
            IssueKind.ERROR,
            IssueKind.WARNING,
            IssueKind.ERROR,
            IssueKind.ERROR,
            IssueKind.ERROR,
            IssueKind.ERROR,
        ]
        checklist = report.checklist
        assert checklist.has_app_config is True
        assert checklist.has_toast_module_import is False
        assert checklist.has_provide_http_client is False
        assert checklist.has_http_loader_factory is False
        assert checklist.has_toast_module_provider is False
        assert report.suggestions == [
            "Found 5 error(s) that need to be fixed for the toast notifications to work "
            "correctly. Please review the errors above and apply the suggested fixes.",
            "Found 1 warning(s) that may improve your configuration. "
            "Review them and apply the suggested fixes.",
        ]

    def test_empty_wiring_file_is_still_checked(self, workspace: Path) -> None:
        write_project(workspace, app_config="", toast_config=VALID_TOAST_CONFIG)

        report = verify_config(base_dir=workspace)

        assert report.checklist.has_app_config is True
        assert len(report.issues) == 6

    def test_wiring_issues_precede_settings_issues(self, workspace: Path) -> None:
        write_project(
            workspace,
            app_config=BARE_APP_CONFIG,
            toast_config=dict(VALID_TOAST_CONFIG, maxToasts="5"),
        )

        report = verify_config(base_dir=workspace)

        assert report.issues[0].message == "ToastNotificationModule is not imported"
        assert report.issues[-1].message == "maxToasts must be a number"


class TestUnexpectedErrors:
    def test_internal_error_becomes_report(self, workspace: Path) -> None:
        write_project(workspace, toast_config=VALID_TOAST_CONFIG)

        with patch(
            "toast_mcp.verification.validator.check_app_config",
            side_effect=RuntimeError("boom"),
        ):
            report = verify_config(base_dir=workspace)

        assert report.success is False
        assert len(report.issues) == 1
        assert report.issues[0].kind is IssueKind.ERROR
        assert report.issues[0].message == "boom"
        assert report.issues[0].fix is None
        assert report.checklist.has_app_config is True
        assert report.app_config_location.endswith("app.config.ts")

    def test_locator_failure_becomes_report(self) -> None:
        with patch(
            "toast_mcp.verification.validator.find_config_files",
            side_effect=OSError("cwd vanished"),
        ):
            report = verify_config()

        assert report.success is False
        assert report.issues[0].message == "cwd vanished"
        assert report.app_config_location == "src/app/app.config.ts (not found)"


class TestSummarize:
    def test_no_issues(self) -> None:
        assert summarize([]) == [SUCCESS_SUGGESTION]

    def test_warnings_only(self) -> None:
        issues = [ValidationIssue(kind=IssueKind.WARNING, message="w")]
        suggestions = summarize(issues)
        assert len(suggestions) == 1
        assert suggestions[0].startswith("Found 1 warning(s)")

    def test_info_issues_not_counted(self) -> None:
        issues = [ValidationIssue(kind=IssueKind.INFO, message="fyi")]
        assert summarize(issues) == []

    def test_errors_before_warnings(self) -> None:
        issues = [
            ValidationIssue(kind=IssueKind.WARNING, message="w"),
            ValidationIssue(kind=IssueKind.ERROR, message="e1"),
            ValidationIssue(kind=IssueKind.ERROR, message="e2"),
        ]
        suggestions = summarize(issues)
        assert suggestions[0].startswith("Found 2 error(s)")
        assert suggestions[1].startswith("Found 1 warning(s)")
