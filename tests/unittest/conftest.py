# AGPL-3.0 License

import pytest

from fakes import FOLDER, added
from signin_gate.git_providers.event_context import PullRequestEvent


@pytest.fixture
def valid_records():
    return [
        added(f"students/{FOLDER}/index.html"),
        added(f"students/{FOLDER}/style.css"),
        added(f"students/{FOLDER}/avatar.png"),
    ]


@pytest.fixture
def pr_event():
    return PullRequestEvent(
        number=7,
        base_owner="classroom",
        base_repo="signin",
        head_owner="student",
        head_repo="signin",
        event_name="pull_request",
    )
