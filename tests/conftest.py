import pytest

from summit.exceptions import NoTagsFoundError, TagNotFoundError
from summit.llm_client import LLMClient


class FakeRepo:
    """In-memory stand-in for :class:`summit.git.GitRepository`."""

    def __init__(self, tags=("v1.2.3",), commits=None):
        self.tags = list(tags)
        self.commits = {} if commits is None else commits
        self.calls = []

    def list_tags(self):
        self.calls.append("list_tags")
        return list(self.tags)

    def latest_tag(self):
        self.calls.append("latest_tag")
        if not self.tags:
            raise NoTagsFoundError("No tags found in the repository.")
        return self.tags[-1]

    def resolve_since_tag(self, tag):
        self.calls.append("resolve_since_tag")
        if tag not in self.tags:
            raise TagNotFoundError(f"Tag not found: {tag}")
        return tag

    def commit_messages(self, since, until="HEAD"):
        self.calls.append(("commit_messages", since))
        return list(self.commits.get(since, []))


class RecordingClient(LLMClient):
    def __init__(self, reply="## [v1.2.4] - 2024-05-17\n### Bug Fixes\n- Fixed things\n"):
        self.reply = reply
        self.requests = []

    def _chat(self, messages, model):
        self.requests.append((messages, model))
        return self.reply


@pytest.fixture
def fake_repo():
    return FakeRepo(
        tags=["v1.0.0", "v1.2.3"],
        commits={
            "v1.2.3": ["fix: crash on start"],
            "v1.0.0": ["fix: crash on start", "feat: add export", "chore: bump deps"],
        },
    )


@pytest.fixture
def llm():
    return RecordingClient()
