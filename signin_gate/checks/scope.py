# AGPL-3.0 License

"""
Checks that keep a pull request inside one contribution folder.
"""

from typing import Iterable, Sequence

from signin_gate.algo.types import ChangeRecord
from signin_gate.checks.check_result import Errors
from signin_gate.checks.policy import CONTRIBUTION_ROOT


def check_scope_and_mutation(records: Iterable[ChangeRecord], errors: Errors) -> Errors:
    """
    Every record must live under the contribution root and be an addition.

    Both conditions are checked per record, so one record can yield two
    violations.
    """
    found = []
    root_prefix = f"{CONTRIBUTION_ROOT}/"
    for record in records:
        if not record.path.startswith(root_prefix):
            found.append(f"Changes outside {root_prefix} are not allowed: {record.path}")
        if not record.is_addition:
            found.append(f"Only additions are allowed, found {record.kind_label}: {record.path}")
    return errors + tuple(found)


def check_single_folder(folders: Sequence[str], errors: Errors) -> Errors:
    if len(folders) == 1:
        return errors
    listed = ", ".join(folders) if folders else "(none)"
    return errors + (f"A pull request may add exactly one personal folder; found: {listed}",)


def check_containment(records: Iterable[ChangeRecord], folder: str, errors: Errors) -> Errors:
    """
    Re-check that every record sits inside the chosen folder.

    Records already flagged by earlier steps are flagged again here.
    """
    prefix = f"{CONTRIBUTION_ROOT}/{folder}/"
    found = [
        f"Change outside the target folder {prefix}: {record.path}"
        for record in records
        if not record.path.startswith(prefix)
    ]
    return errors + tuple(found)
