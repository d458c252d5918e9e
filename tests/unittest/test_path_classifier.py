# AGPL-3.0 License

"""
Unit tests for path classification.
"""

from fakes import added

from signin_gate.checks.path_classifier import (
    check_path_structure,
    claimed_folders,
    classify_path,
    filenames_in_folder,
)


class TestClassifyPath:

    def test_well_formed(self):
        assert classify_path("students/2025-10-03-abc/index.html") == ("2025-10-03-abc", "index.html")

    def test_too_shallow(self):
        assert classify_path("students/index.html") is None
        assert classify_path("README.md") is None

    def test_subdirectory(self):
        assert classify_path("students/2025-10-03-abc/img/a.png") is None

    def test_wrong_root(self):
        assert classify_path("teachers/2025-10-03-abc/index.html") is None


class TestCheckPathStructure:

    def test_reports_each_bad_path_and_keeps_prior_errors(self):
        records = [
            added("students/2025-10-03-abc/index.html"),
            added("students/2025-10-03-abc/img/a.png"),
            added("students/loose.html"),
        ]

        errors = check_path_structure(records, ("earlier",))

        assert errors[0] == "earlier"
        assert len(errors) == 3
        assert "students/2025-10-03-abc/img/a.png" in errors[1]
        assert "students/loose.html" in errors[2]

    def test_claimed_folders_first_seen_order(self):
        records = [
            added("students/b-folder/index.html"),
            added("students/a-folder/index.html"),
            added("students/b-folder/style.css"),
            added("README.md"),
        ]
        assert claimed_folders(records) == ["b-folder", "a-folder"]

    def test_filenames_only_direct_children(self):
        records = [
            added("students/f/index.html"),
            added("students/f/sub/deep.png"),
            added("students/g/style.css"),
        ]
        assert filenames_in_folder(records, "f") == ["index.html"]
