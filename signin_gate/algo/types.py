# AGPL-3.0 License

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ChangeKind(str, Enum):
    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"
    RENAMED = "renamed"
    COPIED = "copied"
    CHANGED = "changed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class ChangeRecord:
    """
    One file touched by the pull request.

    ``change_kind`` keeps the host's raw status string when it is not one of
    the known ``ChangeKind`` values, so the violation message can quote it.
    """
    path: str
    change_kind: ChangeKind | str
    content_ref: Optional[str] = None

    @property
    def kind_label(self) -> str:
        if isinstance(self.change_kind, ChangeKind):
            return self.change_kind.value
        return str(self.change_kind)

    @property
    def is_addition(self) -> bool:
        return self.change_kind == ChangeKind.ADDED

    @classmethod
    def from_github(cls, entry: dict) -> "ChangeRecord":
        """
        Build a record from one entry of the GitHub "list pull request files" response.

        Raises TypeError or KeyError when the entry is not an object with a
        string ``filename``.
        """
        if not isinstance(entry, dict):
            raise TypeError(f"Expected a file object, got {type(entry).__name__}")
        path = entry["filename"]
        if not isinstance(path, str):
            raise TypeError(f"Expected a string filename, got {type(path).__name__}")
        status = entry.get("status", "")
        try:
            change_kind = ChangeKind(status)
        except ValueError:
            change_kind = status
        return cls(
            path=path,
            change_kind=change_kind,
            content_ref=entry.get("sha") or None,
        )
