# AGPL-3.0 License

"""
Validation report data structures.
"""

from dataclasses import dataclass, field

# Violations in the order they were recorded.
Errors = tuple[str, ...]


@dataclass(frozen=True)
class ReportSummary:
    """
    Facts about the claimed folder, shown in the pull request comment.

    Attributes:
        folder: Chosen folder name ("" when no folder was claimed)
        date_part: First three hyphen-separated parts of the folder name
        identifier_part: Remaining parts of the folder name
        date_valid: Whether ``date_part`` satisfies the date grammar
        identifier_valid: Whether ``identifier_part`` satisfies the identifier grammar
        file_count: Number of changed files in the pull request
        has_required_file: Whether index.html was found in the folder
        png_count: PNG files seen in the folder (may exceed the cap)
        css_count: CSS files seen in the folder (may exceed the cap)
    """
    folder: str
    date_part: str
    identifier_part: str
    date_valid: bool
    identifier_valid: bool
    file_count: int
    has_required_file: bool
    png_count: int = 0
    css_count: int = 0


@dataclass(frozen=True)
class ValidationReport:
    """
    Result of one evaluation run.

    Attributes:
        passed: True iff no violation was recorded
        errors: Violations, ordered by the step that recorded them
        summary: Folder facts for the report table
    """
    summary: ReportSummary
    errors: Errors = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def __str__(self) -> str:
        status = "✓ PASSED" if self.passed else "✗ FAILED"
        return f"{status}: {self.summary.folder or '(no folder)'} ({len(self.errors)} error(s))"
