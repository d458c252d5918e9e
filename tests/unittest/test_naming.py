# AGPL-3.0 License

"""
Unit tests for folder naming rules.
"""

import pytest

from signin_gate.checks.naming import FolderClaim, check_folder_name, is_valid_date, is_valid_identifier


class TestFolderClaim:

    def test_split(self):
        claim = FolderClaim.from_name("2025-10-03-liao-wei-chieh")
        assert claim.date_part == "2025-10-03"
        assert claim.identifier_part == "liao-wei-chieh"
        assert claim.part_count == 6

    def test_short_name(self):
        claim = FolderClaim.from_name("liaoweichieh")
        assert claim.date_part == "liaoweichieh"
        assert claim.identifier_part == ""


class TestDateAndIdentifier:

    @pytest.mark.parametrize("value", ["2025-10-03", "2025-01-31", "2025-02-31", "2025-12-01"])
    def test_valid_dates(self, value):
        assert is_valid_date(value)

    @pytest.mark.parametrize("value", ["2025-13-01", "2025-00-10", "2025-10-00", "2025-10-32", "25-10-03", "2025-1-3", ""])
    def test_invalid_dates(self, value):
        assert not is_valid_date(value)

    def test_identifier(self):
        assert is_valid_identifier("liaoweichieh")
        assert is_valid_identifier("liao-wei-2")
        assert not is_valid_identifier("LiaoWeiChieh")
        assert not is_valid_identifier("liao_wei")
        assert not is_valid_identifier("")


class TestCheckFolderName:

    def test_valid(self):
        assert check_folder_name(FolderClaim.from_name("2025-10-03-liaoweichieh"), ()) == ()

    def test_bad_month_only_reports_date(self):
        errors = check_folder_name(FolderClaim.from_name("2025-13-01-liaoweichieh"), ())
        assert errors == ("Invalid date (expected YYYY-MM-DD): 2025-13-01",)

    def test_uppercase_only_reports_identifier(self):
        errors = check_folder_name(FolderClaim.from_name("2025-10-03-LiaoWeiChieh"), ())
        assert len(errors) == 1
        assert "LiaoWeiChieh" in errors[0]

    def test_too_few_parts_still_checks_date_and_identifier(self):
        errors = check_folder_name(FolderClaim.from_name("2025-10-03"), ())
        assert len(errors) == 2
        assert "YYYY-MM-DD-identifier" in errors[0]
        assert errors[1].startswith("Identifier may only contain")
