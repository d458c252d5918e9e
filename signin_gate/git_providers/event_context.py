# AGPL-3.0 License

"""
Pull request trigger context, read from the CI event payload.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TriggerContextError(Exception):
    """The run cannot start: event payload or credentials are missing."""


@dataclass(frozen=True)
class PullRequestEvent:
    number: int
    base_owner: str
    base_repo: str
    head_owner: str
    head_repo: str
    event_name: str = ""

    @property
    def base_full_name(self) -> str:
        return f"{self.base_owner}/{self.base_repo}"

    @property
    def head_full_name(self) -> str:
        return f"{self.head_owner}/{self.head_repo}"

    @classmethod
    def from_payload(cls, payload: dict, event_name: str = "") -> "PullRequestEvent":
        pr = payload.get("pull_request") if isinstance(payload, dict) else None
        try:
            number = int(pr["number"])
            base_full_name = pr["base"]["repo"]["full_name"]
            head_full_name = pr["head"]["repo"]["full_name"]
        except (KeyError, TypeError, ValueError) as e:
            raise TriggerContextError("Cannot read pull_request info (base/head repo)") from e

        if not number:
            raise TriggerContextError("Cannot read pull_request info (base/head repo)")

        base_owner, base_repo = _split_full_name(base_full_name)
        head_owner, head_repo = _split_full_name(head_full_name)
        return cls(
            number=number,
            base_owner=base_owner,
            base_repo=base_repo,
            head_owner=head_owner,
            head_repo=head_repo,
            event_name=event_name,
        )


def _split_full_name(full_name) -> tuple[str, str]:
    owner, sep, name = str(full_name or "").partition("/")
    if not sep or not owner or not name:
        raise TriggerContextError(f"Invalid repository name in event payload: {full_name!r}")
    return owner, name


def load_event(event_path: Optional[str] = None, event_name: Optional[str] = None) -> PullRequestEvent:
    """Load the pull request event from ``GITHUB_EVENT_PATH`` (or an explicit path)."""
    event_path = event_path or os.environ.get("GITHUB_EVENT_PATH")
    if not event_path:
        raise TriggerContextError("Missing GITHUB_EVENT_PATH")
    if event_name is None:
        event_name = os.environ.get("GITHUB_EVENT_NAME", "")

    try:
        payload = json.loads(Path(event_path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise TriggerContextError(f"Cannot read event payload {event_path}: {e}") from e

    return PullRequestEvent.from_payload(payload, event_name=event_name)


def load_token(token: Optional[str] = None) -> str:
    token = token or os.environ.get("GITHUB_TOKEN")
    if not token:
        raise TriggerContextError("Missing GITHUB_TOKEN")
    return token
