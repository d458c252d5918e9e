# AGPL-3.0 License

"""
Markdown rendering of a validation report for the pull request comment.
"""

from typing import Optional

from signin_gate.checks.check_result import ValidationReport
from signin_gate.checks.policy import MAX_FILE_SIZE_LABEL, OPTIONAL_EXTENSIONS, REQUIRED_FILENAME
from signin_gate.config_loader import get_settings

OK = "✅"
FAIL = "❌"


def _mark(ok: bool) -> str:
    return OK if ok else FAIL


def _cell(text: str) -> str:
    """Escape table separators so user-supplied names stay in one cell."""
    return text.replace("|", "\\|").replace("\n", " ")


def _code_cell(text: str) -> str:
    # a backtick inside the name needs a double-backtick fence
    if "`" in text:
        return f"`` {_cell(text)} ``"
    return f"`{_cell(text)}`"


def _summary_table(report: ValidationReport) -> list[str]:
    summary = report.summary
    passed = report.passed
    lines = [
        "| Item | Result |",
        "|------|--------|",
    ]
    if summary.folder:
        lines.append(f"| Folder name | {_code_cell(summary.folder)} |")
    if summary.date_part:
        lines.append(f"| Date | {_cell(summary.date_part)} {_mark(passed or summary.date_valid)} |")
    if summary.identifier_part:
        lines.append(f"| Identifier | {_cell(summary.identifier_part)} {_mark(passed or summary.identifier_valid)} |")
    lines.append(f"| File count | {summary.file_count} |")
    lines.append(
        f"| {REQUIRED_FILENAME} | {OK + ' present' if summary.has_required_file else FAIL + ' missing'} |"
    )
    png_ok = summary.png_count <= OPTIONAL_EXTENSIONS["png"]
    css_ok = summary.css_count <= OPTIONAL_EXTENSIONS["css"]
    lines.append(f"| PNG images | {summary.png_count} {_mark(passed or png_ok)} |")
    lines.append(f"| CSS files | {summary.css_count} {_mark(passed or css_ok)} |")
    if passed:
        lines.append(f"| File size | all ≤ {MAX_FILE_SIZE_LABEL} {OK} |")
    return lines


def render_comment(report: ValidationReport, footer: Optional[str] = None) -> str:
    """
    Build the comment body.

    Failures list every violation in recorded order, then the summary table
    and a short "how to fix" section. Success shows the table only.
    """
    settings = get_settings()
    if footer is None:
        footer = settings.comment.footer

    lines = []
    if report.passed:
        lines.append(f"## {OK} Sign-in check passed!")
        lines.append("")
        lines.append("### 📋 Results")
        lines.append("")
        lines.extend(_summary_table(report))
    else:
        lines.append(f"## {FAIL} Sign-in check failed")
        lines.append("")
        lines.append("### 🚨 Errors")
        lines.append("")
        for index, error in enumerate(report.errors, 1):
            lines.append(f"{index}. {FAIL} {error}")
        lines.append("")
        lines.append("### 📋 Details")
        lines.append("")
        lines.extend(_summary_table(report))
        lines.append("")
        lines.append("### 💡 How to fix")
        lines.append("")
        lines.append("Fix the errors listed above and push again to this branch.")
        lines.append("The check runs again automatically after every push.")
        lines.append("")
        lines.append(f"If anything is unclear, see the FAQ in [README.md]({settings.comment.readme_url}).")

    lines.append("")
    lines.append("---")
    lines.append(footer)
    return "\n".join(lines)
