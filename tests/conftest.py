import json
import os

import pytest

from required_labels.utils import common
from required_labels.utils.models import ExistingComment


class FakeIssueHost:
    """In-memory IssueHost that records every call."""

    def __init__(self, labels=None, comments=None):
        self.labels = list(labels or [])
        self.comments = {c.id: c.body for c in (comments or [])}
        self.calls = []
        self._next_id = 1000

    def list_labels(self):
        self.calls.append(("list_labels",))
        return list(self.labels)

    def list_comments(self):
        self.calls.append(("list_comments",))
        return [ExistingComment(id=cid, body=body) for cid, body in self.comments.items()]

    def create_comment(self, body):
        self._next_id += 1
        self.calls.append(("create_comment", body))
        self.comments[self._next_id] = body
        return self._next_id

    def update_comment(self, comment_id, body):
        self.calls.append(("update_comment", comment_id, body))
        self.comments[comment_id] = body

    def delete_comment(self, comment_id):
        self.calls.append(("delete_comment", comment_id))
        del self.comments[comment_id]

    def call_names(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def fake_host():
    return FakeIssueHost


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("INPUT_") or key.startswith("GITHUB_") or key == "RUNNER_DEBUG":
            monkeypatch.delenv(key, raising=False)
    common.set_verbose_enabled(False)
    yield
    common.set_verbose_enabled(False)


@pytest.fixture
def action_env(monkeypatch, tmp_path):
    """Workflow environment for a pull_request event on mheap/missing-repo#28."""
    event_path = tmp_path / "event.json"
    event_path.write_text(
        json.dumps({"action": "opened", "pull_request": {"number": 28, "labels": []}}),
        encoding="utf-8",
    )
    output_path = tmp_path / "github_output"
    output_path.write_text("", encoding="utf-8")

    monkeypatch.setenv("GITHUB_WORKFLOW", "demo-workflow")
    monkeypatch.setenv("GITHUB_JOB", "demo-job")
    monkeypatch.setenv("GITHUB_ACTION", "required-labels")
    monkeypatch.setenv("GITHUB_REPOSITORY", "mheap/missing-repo")
    monkeypatch.setenv("GITHUB_EVENT_NAME", "pull_request")
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(event_path))
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_path))
    monkeypatch.setenv("GITHUB_TOKEN", "mock-token-here-abc")
    monkeypatch.setenv(
        "INPUT_MESSAGE",
        "Label error. Requires {{errorString}} {{count}} of: {{ provided }}. Found: {{ applied }}",
    )

    def set_inputs(**inputs):
        for name, value in inputs.items():
            monkeypatch.setenv(f"INPUT_{name.upper()}", value)

    set_inputs.outputs = lambda: read_outputs(output_path)
    return set_inputs


def read_outputs(path):
    outputs = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        if "=" in line:
            key, value = line.split("=", 1)
            outputs[key] = value
    return outputs
