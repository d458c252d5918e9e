# AGPL-3.0 License

"""
Sign-in rule engine.

Each check is a pure function taking the run's inputs plus the errors
recorded so far and returning the extended error tuple. ``RuleEngine``
chains them in a fixed order.
"""

from signin_gate.checks.check_result import Errors, ReportSummary, ValidationReport
from signin_gate.checks.naming import FolderClaim, check_folder_name
from signin_gate.checks.orchestrator import EmptyChangeSet, RuleEngine
from signin_gate.checks.path_classifier import check_path_structure, classify_path
from signin_gate.checks.scope import check_containment, check_scope_and_mutation, check_single_folder
from signin_gate.checks.size import check_file_sizes
from signin_gate.checks.whitelist import FileWhitelistState, check_filenames

__all__ = [
    "EmptyChangeSet",
    "Errors",
    "FileWhitelistState",
    "FolderClaim",
    "ReportSummary",
    "RuleEngine",
    "ValidationReport",
    "check_containment",
    "check_file_sizes",
    "check_filenames",
    "check_folder_name",
    "check_path_structure",
    "check_scope_and_mutation",
    "check_single_folder",
    "classify_path",
]
