# AGPL-3.0 License

"""
Maps changed-file paths onto the students/<folder>/<file> layout.
"""

from typing import Iterable, Optional

from signin_gate.algo.types import ChangeRecord
from signin_gate.checks.check_result import Errors
from signin_gate.checks.policy import CONTRIBUTION_ROOT, PATH_DEPTH


def classify_path(path: str) -> Optional[tuple[str, str]]:
    """
    Split a path into ``(folder, filename)``.

    Returns None unless the path is exactly ``<root>/<folder>/<file>``.
    """
    parts = path.split("/")
    if len(parts) != PATH_DEPTH:
        return None
    if parts[0] != CONTRIBUTION_ROOT:
        return None
    return parts[1], parts[2]


def check_path_structure(records: Iterable[ChangeRecord], errors: Errors) -> Errors:
    """Flag every record whose path is not a well-formed folder/file pair."""
    found = []
    for record in records:
        if classify_path(record.path) is None:
            found.append(
                f"Subfolders or wrong path depth are not allowed: {record.path} "
                f"(only {CONTRIBUTION_ROOT}/<folder>/<file>)"
            )
    return errors + tuple(found)


def claimed_folders(records: Iterable[ChangeRecord]) -> list[str]:
    """Distinct folder names of the well-formed records, in first-seen order."""
    folders: dict[str, None] = {}
    for record in records:
        classified = classify_path(record.path)
        if classified is not None:
            folders.setdefault(classified[0], None)
    return list(folders)


def filenames_in_folder(records: Iterable[ChangeRecord], folder: str) -> list[str]:
    """Filenames directly inside ``folder``, in record order."""
    names = []
    for record in records:
        classified = classify_path(record.path)
        if classified is not None and classified[0] == folder:
            names.append(classified[1])
    return names
