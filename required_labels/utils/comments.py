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

"""Status comment reconciliation.

With ``CommentPolicy.UPSERT`` the check owns at most one comment per
issue/PR, recognised by the ``CommentMarker`` at the start of its body:

  failing run, owned comment present  -> update it in place
  failing run, no owned comment       -> create one
  passing run, owned comment present  -> delete it
  passing run, no owned comment       -> nothing

Owned comments beyond the first (left behind by racing runs) are deleted on
every UPSERT run, so the target always ends with 0 or 1 owned comments.

``CommentPolicy.APPEND`` posts the plain message as a fresh comment on every
failing run and never lists, edits or deletes. It does not use the marker.
``CommentPolicy.OFF`` touches nothing.

Listing and acting are separate API calls with no lock in between; two
concurrent runs against the same target can still race.
"""

from __future__ import annotations

from collections.abc import Iterable

from .common import vprint
from .errors import RequiredLabelsError
from .github_issues import IssueHost
from .models import CommentAction, CommentActionKind, CommentMarker, CommentPolicy, ExistingComment, Verdict


def find_owned_comments(comments: Iterable[ExistingComment], marker: CommentMarker) -> list[ExistingComment]:
    return [comment for comment in comments if marker.owns(comment.body)]


def plan_comment_action(
    comment_policy: CommentPolicy,
    verdict: Verdict,
    marker: CommentMarker,
    message: str | None,
    existing: Iterable[ExistingComment] = (),
) -> CommentAction:
    """Decide what to do with the status comment; pure, no host calls."""
    if comment_policy is CommentPolicy.OFF:
        return CommentAction(CommentActionKind.NOOP)

    if comment_policy is CommentPolicy.APPEND:
        if verdict.passed:
            return CommentAction(CommentActionKind.NOOP)
        return CommentAction(CommentActionKind.CREATE, body=message or "")

    owned = find_owned_comments(existing, marker)
    stale = tuple(c.id for c in owned[1:])

    if verdict.passed:
        if not owned:
            return CommentAction(CommentActionKind.NOOP)
        return CommentAction(CommentActionKind.DELETE, comment_id=owned[0].id, stale_ids=stale)

    body = marker.tag(message or "")
    if not owned:
        return CommentAction(CommentActionKind.CREATE, body=body)
    return CommentAction(CommentActionKind.UPDATE, comment_id=owned[0].id, body=body, stale_ids=stale)


def _require_id(action: CommentAction) -> int:
    if action.comment_id is None:
        raise RequiredLabelsError(f"Comment action {action.kind.value} has no comment id")
    return action.comment_id


def apply_comment_action(host: IssueHost, action: CommentAction) -> int | None:
    """Execute *action* against *host*; returns the id of the comment that now carries the status."""
    result: int | None = None

    if action.kind is CommentActionKind.CREATE:
        result = host.create_comment(action.body or "")
        print(f"Created status comment {result}")
    elif action.kind is CommentActionKind.UPDATE:
        result = _require_id(action)
        host.update_comment(result, action.body or "")
        print(f"Updated status comment {result}")
    elif action.kind is CommentActionKind.DELETE:
        comment_id = _require_id(action)
        host.delete_comment(comment_id)
        print(f"Deleted resolved status comment {comment_id}")
    else:
        vprint("No status comment change needed")

    for stale_id in action.stale_ids:
        host.delete_comment(stale_id)
        print(f"Deleted duplicate status comment {stale_id}")

    return result


def reconcile_comment(
    host: IssueHost,
    comment_policy: CommentPolicy,
    verdict: Verdict,
    marker: CommentMarker,
    message: str | None,
    *,
    dry_run: bool = False,
) -> CommentAction:
    existing: list[ExistingComment] = []
    if comment_policy is CommentPolicy.UPSERT:
        existing = host.list_comments()
        vprint(f"Loaded {len(existing)} existing comments")

    action = plan_comment_action(comment_policy, verdict, marker, message, existing)

    if dry_run:
        print(f"[dry-run] Would {action.kind.value} status comment"
              + (f" {action.comment_id}" if action.comment_id is not None else "")
              + (f" and delete duplicates {list(action.stale_ids)}" if action.stale_ids else ""))
        return action

    apply_comment_action(host, action)
    return action
