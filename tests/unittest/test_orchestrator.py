# AGPL-3.0 License

"""
Unit tests for the rule engine.
"""

import pytest

from fakes import FOLDER, FakeGitProvider, added, sizes_for
from signin_gate.algo.types import ChangeKind, ChangeRecord
from signin_gate.checks.orchestrator import EmptyChangeSet, RuleEngine
from signin_gate.git_providers.git_provider import HostUnavailable


async def evaluate(records, sizes=None):
    provider = FakeGitProvider(records=records, sizes=sizes if sizes is not None else sizes_for(records))
    return await RuleEngine(provider).run(7)


@pytest.mark.asyncio
class TestRuleEngine:

    async def test_valid_contribution_passes(self, valid_records):
        report = await evaluate(valid_records)

        assert report.passed
        assert report.errors == ()
        summary = report.summary
        assert summary.folder == FOLDER
        assert summary.date_part == "2025-10-03"
        assert summary.identifier_part == "liaoweichieh"
        assert summary.file_count == 3
        assert summary.has_required_file
        assert (summary.png_count, summary.css_count) == (1, 1)

    async def test_index_only_passes(self):
        report = await evaluate([added(f"students/{FOLDER}/index.html")])
        assert report.passed

    async def test_non_added_change_fails_naming_path(self, valid_records):
        path = f"students/{FOLDER}/index.html"
        records = [ChangeRecord(path=path, change_kind=ChangeKind.MODIFIED, content_ref="m")] + valid_records[1:]

        report = await evaluate(records)

        assert not report.passed
        assert report.errors == (f"Only additions are allowed, found modified: {path}",)

    async def test_unknown_host_status_is_quoted(self):
        path = f"students/{FOLDER}/index.html"
        report = await evaluate([ChangeRecord(path=path, change_kind="copied", content_ref="c")])

        assert report.errors == (f"Only additions are allowed, found copied: {path}",)

    async def test_subfolder_is_structural_violation_and_run_continues(self, valid_records):
        nested = added(f"students/{FOLDER}/img/photo.png", sha="nested")
        records = valid_records + [nested]

        report = await evaluate(records, sizes=dict(sizes_for(valid_records), nested=500000))

        assert len(report.errors) == 2
        assert report.errors[0].startswith("Subfolders or wrong path depth are not allowed: ")
        assert nested.path in report.errors[0]
        # size check still ran over the nested file
        assert report.errors[1].startswith(f"File too large: {nested.path}")

    async def test_two_folders_single_violation(self):
        records = [
            added("students/2025-10-03-alice/index.html"),
            added("students/2025-10-03-bob/index.html"),
        ]

        report = await evaluate(records)

        folder_errors = [e for e in report.errors if e.startswith("A pull request may add exactly one personal folder")]
        assert len(folder_errors) == 1
        assert "2025-10-03-alice" in folder_errors[0]
        assert "2025-10-03-bob" in folder_errors[0]
        # the first folder is used for the remaining checks
        assert report.summary.folder == "2025-10-03-alice"
        assert "Change outside the target folder students/2025-10-03-alice/: students/2025-10-03-bob/index.html" in report.errors

    async def test_invalid_month_reports_only_date(self):
        folder = "2025-13-01-liaoweichieh"
        report = await evaluate([added(f"students/{folder}/index.html")])

        assert report.errors == ("Invalid date (expected YYYY-MM-DD): 2025-13-01",)
        assert not report.summary.date_valid
        assert report.summary.identifier_valid

    async def test_uppercase_identifier_reports_only_identifier(self):
        folder = "2025-10-03-LiaoWeiChieh"
        report = await evaluate([added(f"students/{folder}/index.html")])

        assert report.errors == (
            "Identifier may only contain lowercase letters, digits and hyphens: LiaoWeiChieh",
        )
        assert report.summary.date_valid

    async def test_second_png_flagged(self):
        records = [
            added(f"students/{FOLDER}/index.html"),
            added(f"students/{FOLDER}/a.png"),
            added(f"students/{FOLDER}/b.png"),
        ]

        report = await evaluate(records)

        assert len(report.errors) == 1
        assert report.errors[0].endswith("b.png")
        assert report.summary.png_count == 2

    async def test_script_is_rejected(self, valid_records):
        report = await evaluate(valid_records + [added(f"students/{FOLDER}/script.js")])

        assert len(report.errors) == 1
        assert "script.js" in report.errors[0]

    async def test_size_boundary(self):
        at_limit = added(f"students/{FOLDER}/index.html", sha="ok")
        over = added(f"students/{FOLDER}/a.png", sha="over")

        report = await evaluate([at_limit, over], sizes={"ok": 102400, "over": 102401})

        assert report.errors == (
            f"File too large: {over.path} (102401 bytes) exceeds the 100 KB limit",
        )

    async def test_missing_index_reported_once(self):
        report = await evaluate([added(f"students/{FOLDER}/style.css")])

        missing = [e for e in report.errors if e.startswith("Missing required file")]
        assert missing == [f"Missing required file: students/{FOLDER}/index.html"]
        assert not report.summary.has_required_file

    async def test_messages_follow_step_order(self):
        readme = ChangeRecord(path="README.md", change_kind=ChangeKind.MODIFIED, content_ref="r")
        records = [readme, added("students/2025-10-03-abc/index.html")]

        report = await evaluate(records)

        assert report.errors == (
            "Changes outside students/ are not allowed: README.md",
            "Only additions are allowed, found modified: README.md",
            "Subfolders or wrong path depth are not allowed: README.md (only students/<folder>/<file>)",
            "Change outside the target folder students/2025-10-03-abc/: README.md",
        )

    async def test_no_folder_claimed_still_completes_report(self):
        report = await evaluate([added("README.md")])

        assert not report.passed
        assert "A pull request may add exactly one personal folder; found: (none)" in report.errors
        assert report.summary.folder == ""
        assert report.errors[-1] == "Missing required file: students//index.html"

    async def test_evaluation_is_repeatable(self, valid_records):
        records = valid_records + [
            added("students/other-folder/x.gif"),
            ChangeRecord(path="docs/a.md", change_kind=ChangeKind.REMOVED, content_ref=None),
        ]
        sizes = sizes_for(records)

        first = await evaluate(records, sizes)
        second = await evaluate(records, sizes)

        assert first.errors == second.errors
        assert first.passed == second.passed is False

    async def test_empty_change_set_is_fatal(self):
        with pytest.raises(EmptyChangeSet):
            await evaluate([])

    async def test_fetch_failure_propagates(self):
        provider = FakeGitProvider(fetch_error=HostUnavailable("boom"))

        with pytest.raises(HostUnavailable):
            await RuleEngine(provider).run(7)
