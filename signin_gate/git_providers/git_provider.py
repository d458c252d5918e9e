# AGPL-3.0 License

from abc import ABC, abstractmethod
from typing import Any

from signin_gate.algo.types import ChangeRecord


class HostUnavailable(Exception):
    """A request to the hosting platform failed."""


class GitProvider(ABC):
    """
    The three host capabilities the gate needs.

    Implementations talk to a real host; tests substitute an in-memory fake.
    """

    @abstractmethod
    async def get_pr_files(self, pr_number: int) -> list[ChangeRecord]:
        """Return every file changed by the pull request."""
        pass

    @abstractmethod
    async def get_blob_size(self, content_ref: str) -> Any:
        """
        Return the byte size the host reports for a blob.

        The value is returned as the host sent it; callers validate that it
        is numeric.
        """
        pass

    @abstractmethod
    async def publish_comment(self, pr_number: int, body: str) -> None:
        pass
