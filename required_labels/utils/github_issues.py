#
# Copyright 2026 ABSA Group Limited
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""GitHub Issues operations used by the check – labels on the target issue/PR
and create/edit/delete of its comments, via PyGithub.

Every PyGithub or transport failure is re-raised as ``UpstreamError``; there
are no retries here.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeVar

import requests
from github import Auth, Github, GithubException
from github.Issue import Issue
from github.IssueComment import IssueComment

from .common import vprint
from .errors import UpstreamError
from .models import ExistingComment

T = TypeVar("T")


class IssueHost(Protocol):
    """Label/comment operations on a single issue or pull request."""

    def list_labels(self) -> list[str]: ...

    def list_comments(self) -> list[ExistingComment]: ...

    def create_comment(self, body: str) -> int: ...

    def update_comment(self, comment_id: int, body: str) -> None: ...

    def delete_comment(self, comment_id: int) -> None: ...


def _call(operation: str, fn: Callable[[], T]) -> T:
    try:
        return fn()
    except GithubException as exc:
        message = exc.data.get("message") if isinstance(exc.data, dict) else None
        raise UpstreamError(operation, str(message or exc), status=exc.status) from exc
    except requests.RequestException as exc:
        raise UpstreamError(operation, str(exc)) from exc


class GithubIssueHost:
    """``IssueHost`` backed by the GitHub REST API."""

    def __init__(self, gh: Github, repo: str, number: int) -> None:
        self.gh = gh
        self.repo = repo
        self.number = number
        self._issue: Issue | None = None
        self._comments: dict[int, IssueComment] = {}

    @classmethod
    def from_token(cls, token: str, repo: str, number: int) -> GithubIssueHost:
        return cls(Github(auth=Auth.Token(token)), repo, number)

    @property
    def issue(self) -> Issue:
        if self._issue is None:
            self._issue = _call(
                f"Load {self.repo}#{self.number}",
                lambda: self.gh.get_repo(self.repo).get_issue(self.number),
            )
        return self._issue

    def list_labels(self) -> list[str]:
        labels = _call(
            f"List labels on {self.repo}#{self.number}",
            lambda: [label.name for label in self.issue.get_labels()],
        )
        vprint(f"Applied labels on #{self.number}: {labels}")
        return labels

    def list_comments(self) -> list[ExistingComment]:
        comments = _call(
            f"List comments on {self.repo}#{self.number}",
            lambda: list(self.issue.get_comments()),
        )
        self._comments = {c.id: c for c in comments}
        return [ExistingComment(id=c.id, body=c.body or "") for c in comments]

    def _comment(self, comment_id: int) -> IssueComment:
        cached = self._comments.get(comment_id)
        if cached is not None:
            return cached
        return _call(
            f"Load comment {comment_id} on {self.repo}#{self.number}",
            lambda: self.issue.get_comment(comment_id),
        )

    def create_comment(self, body: str) -> int:
        created = _call(
            f"Create comment on {self.repo}#{self.number}",
            lambda: self.issue.create_comment(body),
        )
        self._comments[created.id] = created
        return created.id

    def update_comment(self, comment_id: int, body: str) -> None:
        comment = self._comment(comment_id)
        _call(
            f"Update comment {comment_id} on {self.repo}#{self.number}",
            lambda: comment.edit(body),
        )

    def delete_comment(self, comment_id: int) -> None:
        comment = self._comment(comment_id)
        _call(
            f"Delete comment {comment_id} on {self.repo}#{self.number}",
            lambda: comment.delete(),
        )
        self._comments.pop(comment_id, None)
