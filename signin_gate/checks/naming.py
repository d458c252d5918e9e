# AGPL-3.0 License

"""
Folder naming rules: ``YYYY-MM-DD-identifier``.
"""

import re
from dataclasses import dataclass

from signin_gate.checks.check_result import Errors

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
IDENTIFIER_PATTERN = re.compile(r"[a-z0-9-]+")

MIN_NAME_PARTS = 4
EXAMPLE_FOLDER = "2025-10-03-liaoweichieh"


@dataclass(frozen=True)
class FolderClaim:
    name: str
    date_part: str
    identifier_part: str

    @classmethod
    def from_name(cls, name: str) -> "FolderClaim":
        parts = name.split("-")
        return cls(
            name=name,
            date_part="-".join(parts[:3]),
            identifier_part="-".join(parts[3:]),
        )

    @property
    def part_count(self) -> int:
        return len(self.name.split("-"))


def is_valid_date(value: str) -> bool:
    """
    Strict YYYY-MM-DD with month 1-12 and day 1-31.

    Days are not checked against the month, so 2025-02-31 is accepted.
    """
    if not DATE_PATTERN.fullmatch(value):
        return False
    _, month, day = (int(part) for part in value.split("-"))
    return 1 <= month <= 12 and 1 <= day <= 31


def is_valid_identifier(value: str) -> bool:
    return IDENTIFIER_PATTERN.fullmatch(value) is not None


def check_folder_name(claim: FolderClaim, errors: Errors) -> Errors:
    """
    Validate the folder name.

    The part count, the date and the identifier are three independent
    checks; each one that fails adds its own violation.
    """
    found = []
    if claim.part_count < MIN_NAME_PARTS:
        found.append(
            f"Sign-in folder must be named YYYY-MM-DD-identifier, "
            f"e.g. {EXAMPLE_FOLDER}; got: {claim.name}"
        )
    if not is_valid_date(claim.date_part):
        found.append(f"Invalid date (expected YYYY-MM-DD): {claim.date_part}")
    if not is_valid_identifier(claim.identifier_part):
        found.append(
            f"Identifier may only contain lowercase letters, digits and hyphens: {claim.identifier_part}"
        )
    return errors + tuple(found)
