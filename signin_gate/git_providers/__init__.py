# AGPL-3.0 License

from signin_gate.git_providers.event_context import (
    PullRequestEvent,
    TriggerContextError,
    load_event,
    load_token,
)
from signin_gate.git_providers.git_provider import GitProvider, HostUnavailable
from signin_gate.git_providers.github_provider import GithubProvider

__all__ = [
    "GitProvider",
    "GithubProvider",
    "HostUnavailable",
    "PullRequestEvent",
    "TriggerContextError",
    "load_event",
    "load_token",
]
