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

"""Validate action inputs and workflow environment into a ``RunConfig``.

Everything here raises ``ConfigError`` and runs before any API call.

Inputs
------
mode          (required)  exactly | minimum | maximum
count         (required)  non-negative integer
labels        (required)  comma/newline separated; newline only with use_regex
use_regex                 boolean, default false
add_comment               boolean, default false
comment_mode              upsert | append, default upsert
exit_type                 success | failure, default failure
message                   failure message template
token                     falls back to GITHUB_TOKEN
"""

from __future__ import annotations

import os

from .actions import event_issue_number, get_input, load_event
from .common import parse_bool, split_list
from .errors import ConfigError
from .matcher import compile_patterns
from .models import CommentMarker, CommentPolicy, ExitType, Mode, Policy, RunConfig, allowed_values
from .templates import DEFAULT_MESSAGE_TEMPLATE


def _parse_mode(raw: str) -> Mode:
    try:
        return Mode(raw)
    except ValueError:
        raise ConfigError(f"Unknown mode input [{raw}]. Must be one of: {allowed_values(Mode)}") from None


def _parse_exit_type(raw: str) -> ExitType:
    try:
        return ExitType(raw or ExitType.FAILURE)
    except ValueError:
        raise ConfigError(
            f"Unknown exit_code input [{raw}]. Must be one of: {allowed_values(ExitType)}"
        ) from None


def _parse_count(raw: str) -> int:
    try:
        count = int(raw, 10)
    except ValueError:
        raise ConfigError(f"Invalid count input [{raw}]. Must be a non-negative integer") from None
    if count < 0:
        raise ConfigError(f"Invalid count input [{raw}]. Must be a non-negative integer")
    return count


def _parse_flag(name: str, raw: str) -> bool:
    value = parse_bool(raw)
    if value is None:
        raise ConfigError(f"Invalid {name} input [{raw}]. Must be one of: true, false")
    return value


def _parse_comment_policy(add_comment: bool, raw: str) -> CommentPolicy:
    allowed = [p.value for p in CommentPolicy if p is not CommentPolicy.OFF]
    if raw and raw not in allowed:
        raise ConfigError(f"Unknown comment_mode input [{raw}]. Must be one of: {', '.join(allowed)}")
    if not add_comment:
        return CommentPolicy.OFF
    return CommentPolicy(raw or CommentPolicy.UPSERT)


def comment_marker_from_env() -> CommentMarker:
    return CommentMarker.for_identity(
        os.environ.get("GITHUB_WORKFLOW", ""),
        os.environ.get("GITHUB_JOB", ""),
        os.environ.get("GITHUB_ACTION", ""),
    )


def load_config(*, repo: str | None = None, number: int | None = None) -> RunConfig:
    """Build the run configuration from ``INPUT_*`` and ``GITHUB_*`` variables.

    *repo* / *number* override ``GITHUB_REPOSITORY`` and the event payload.
    """
    raw_mode = get_input("mode", required=True)
    raw_count = get_input("count", required=True)
    raw_labels = get_input("labels", required=True)

    mode = _parse_mode(raw_mode)
    exit_type = _parse_exit_type(get_input("exit_type"))
    count = _parse_count(raw_count)
    use_regex = _parse_flag("use_regex", get_input("use_regex"))
    add_comment = _parse_flag("add_comment", get_input("add_comment"))
    comment_policy = _parse_comment_policy(add_comment, get_input("comment_mode"))

    policy = Policy(
        mode=mode,
        count=count,
        patterns=tuple(split_list(raw_labels, newline_only=use_regex)),
        patterns_are_regex=use_regex,
    )
    if use_regex:
        compile_patterns(policy.patterns)

    if number is None:
        number = event_issue_number(load_event())

    return RunConfig(
        policy=policy,
        exit_type=exit_type,
        comment_policy=comment_policy,
        message=get_input("message") or DEFAULT_MESSAGE_TEMPLATE,
        token=get_input("token") or os.environ.get("GITHUB_TOKEN") or None,
        repo=repo or os.environ.get("GITHUB_REPOSITORY") or None,
        number=number,
        marker=comment_marker_from_env(),
    )
