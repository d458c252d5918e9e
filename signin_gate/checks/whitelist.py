# AGPL-3.0 License

"""
Filename whitelist for the contribution folder.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable

from signin_gate.checks.check_result import Errors
from signin_gate.checks.policy import CONTRIBUTION_ROOT, OPTIONAL_EXTENSIONS, REQUIRED_FILENAME


def extension_of(filename: str) -> str:
    """Lowercased text after the last dot, or "" when there is none."""
    _, dot, ext = filename.rpartition(".")
    return ext.lower() if dot else ""


@dataclass(frozen=True)
class FileWhitelistState:
    """Running tally of the filenames seen so far. Counts never go down."""
    has_required_file: bool = False
    optional_counts: dict[str, int] = field(
        default_factory=lambda: {ext: 0 for ext in OPTIONAL_EXTENSIONS}
    )

    def with_required_file(self) -> "FileWhitelistState":
        return replace(self, has_required_file=True)

    def with_optional(self, ext: str) -> "FileWhitelistState":
        counts = dict(self.optional_counts)
        counts[ext] = counts.get(ext, 0) + 1
        return replace(self, optional_counts=counts)

    def count(self, ext: str) -> int:
        return self.optional_counts.get(ext, 0)


def _allowed_summary() -> str:
    optional = " / ".join(f"{limit} .{ext}" for ext, limit in OPTIONAL_EXTENSIONS.items())
    return f"only {REQUIRED_FILENAME} plus optionally {optional} are allowed"


def check_filenames(
    filenames: Iterable[str], folder: str, errors: Errors
) -> tuple[FileWhitelistState, Errors]:
    """
    Classify each filename and tally the folder contents.

    An optional file over its cap is flagged when it is seen; earlier files of
    the same type stay unflagged. A missing required file is flagged once,
    after all names were processed.
    """
    state = FileWhitelistState()
    found = []

    for name in filenames:
        if name == REQUIRED_FILENAME:
            state = state.with_required_file()
            continue

        ext = extension_of(name)
        if ext in OPTIONAL_EXTENSIONS:
            state = state.with_optional(ext)
            limit = OPTIONAL_EXTENSIONS[ext]
            if state.count(ext) > limit:
                found.append(
                    f"At most {limit} {ext.upper()} file(s) allowed "
                    f"(found #{state.count(ext)}): {name}"
                )
            continue

        found.append(f"File name or extension not allowed: {name} ({_allowed_summary()})")

    if not state.has_required_file:
        found.append(f"Missing required file: {CONTRIBUTION_ROOT}/{folder}/{REQUIRED_FILENAME}")

    return state, errors + tuple(found)
