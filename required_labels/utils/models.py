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

"""Data models shared by the matcher, evaluator, reconciler and runner."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .errors import ConfigError


class Mode(StrEnum):
    EXACTLY = "exactly"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"

    @property
    def error_string(self) -> str:
        """Human wording used in failure messages (``{{ errorString }}``)."""
        return _ERROR_STRINGS[self]


_ERROR_STRINGS: dict[Mode, str] = {
    Mode.EXACTLY: "exactly",
    Mode.MINIMUM: "at least",
    Mode.MAXIMUM: "at most",
}


class ExitType(StrEnum):
    SUCCESS = "success"
    FAILURE = "failure"


class CommentPolicy(StrEnum):
    """How the status comment is maintained on a failing/passing run."""
    OFF = "off"
    APPEND = "append"      # always post a new comment on failure
    UPSERT = "upsert"      # keep exactly one marker-tagged comment


class CommentActionKind(StrEnum):
    NOOP = "noop"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


def allowed_values(enum_cls: type[StrEnum]) -> str:
    return ", ".join(member.value for member in enum_cls)


@dataclass(frozen=True)
class Policy:
    mode: Mode
    count: int
    patterns: tuple[str, ...]
    patterns_are_regex: bool = False

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "mode", Mode(self.mode))
        except ValueError:
            raise ConfigError(
                f"Unknown mode input [{self.mode}]. Must be one of: {allowed_values(Mode)}"
            ) from None
        if self.count < 0:
            raise ConfigError(f"Invalid count input [{self.count}]. Must be a non-negative integer")
        cleaned = tuple(p.strip() for p in self.patterns if p and p.strip())
        if not cleaned:
            raise ConfigError("No labels provided. Supply at least one label pattern")
        object.__setattr__(self, "patterns", cleaned)


@dataclass(frozen=True)
class Verdict:
    passed: bool
    error_kind: str | None = None


@dataclass(frozen=True)
class CommentMarker:
    """Invisible tag prefixed to every comment body this check owns."""
    token: str

    @classmethod
    def for_identity(cls, workflow: str, job: str, action: str) -> CommentMarker:
        return cls(f"<!-- {workflow}/{job}/{action} -->\n")

    def tag(self, message: str) -> str:
        return f"{self.token}{message}"

    def owns(self, body: str | None) -> bool:
        return (body or "").startswith(self.token)


@dataclass(frozen=True)
class ExistingComment:
    id: int
    body: str


@dataclass(frozen=True)
class CommentAction:
    kind: CommentActionKind
    comment_id: int | None = None
    body: str | None = None
    stale_ids: tuple[int, ...] = ()


@dataclass
class CheckResult:
    """Terminal outcome of one policy check."""
    verdict: Verdict
    matched: list[str]
    applied: list[str]
    message: str | None = None
    comment_action: CommentAction = field(
        default_factory=lambda: CommentAction(CommentActionKind.NOOP)
    )

    @property
    def status(self) -> str:
        return "success" if self.verdict.passed else "failure"


@dataclass(frozen=True)
class RunConfig:
    policy: Policy
    exit_type: ExitType
    comment_policy: CommentPolicy
    message: str
    marker: CommentMarker
    token: str | None = None
    repo: str | None = None
    number: int | None = None
