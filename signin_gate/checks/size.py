# AGPL-3.0 License

"""
Per-file size ceiling, measured from host blob metadata.
"""

from typing import Iterable

from signin_gate.algo.types import ChangeRecord
from signin_gate.checks.check_result import Errors
from signin_gate.checks.policy import MAX_FILE_SIZE_BYTES, MAX_FILE_SIZE_LABEL
from signin_gate.git_providers.git_provider import GitProvider, HostUnavailable
from signin_gate.log import get_logger


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


async def check_file_sizes(
    records: Iterable[ChangeRecord], git_provider: GitProvider, errors: Errors
) -> Errors:
    """
    Look up every record's blob size on the head repository.

    Lookups run one at a time. A missing content reference, a failed lookup
    and a non-numeric size each add their own violation and the loop moves on.
    """
    found = []
    for record in records:
        if not record.content_ref:
            found.append(f"Cannot determine the content SHA of {record.path}")
            continue

        try:
            size = await git_provider.get_blob_size(record.content_ref)
        except HostUnavailable as e:
            get_logger().warning(f"Blob lookup failed for {record.path}: {e}")
            found.append(f"Could not look up the size of {record.path}")
            continue

        if not _is_number(size):
            found.append(f"Cannot determine the size of {record.path}")
            continue

        if size > MAX_FILE_SIZE_BYTES:
            found.append(
                f"File too large: {record.path} ({size} bytes) exceeds the {MAX_FILE_SIZE_LABEL} limit"
            )
    return errors + tuple(found)
