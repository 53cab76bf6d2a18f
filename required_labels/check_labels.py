#!/usr/bin/env python3
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

"""Check that the labels applied to an issue or pull request satisfy a policy.

The policy is "exactly / at least / at most N of these labels", configured via
action inputs (see ``utils/config.py``). On failure the rendered message is
reported as an error (or a warning with ``exit_type: success``) and, when
``add_comment`` is enabled, a status comment on the issue/PR is kept in sync.

Step outputs:

  status   success | failure
  labels   comma-joined matched labels (success only)

Usage (inside a workflow step, inputs come from ``INPUT_*``):
  required-labels

Usage (locally):
  INPUT_MODE=minimum INPUT_COUNT=1 INPUT_LABELS=bug,enhancement GITHUB_TOKEN=... \\
    python3 -m required_labels.check_labels --repo owner/repo --number 42 --dry-run
"""

from __future__ import annotations

import argparse

from .utils import actions
from .utils.comments import reconcile_comment
from .utils.common import parse_runner_debug, set_verbose_enabled, vprint
from .utils.config import load_config
from .utils.errors import ConfigError, RequiredLabelsError
from .utils.github_issues import GithubIssueHost, IssueHost
from .utils.matcher import match_labels
from .utils.models import CheckResult, CommentPolicy, ExitType, RunConfig
from .utils.policy import evaluate
from .utils.templates import render_failure_message


def check_policy(host: IssueHost, config: RunConfig, *, dry_run: bool = False) -> CheckResult:
    """Fetch labels, evaluate the policy and reconcile the status comment."""
    policy = config.policy

    applied = host.list_labels()
    matched = match_labels(applied, policy)
    verdict = evaluate(len(matched), policy.mode, policy.count)
    vprint(f"Matched {len(matched)} label(s) for {policy.mode.value} {policy.count}: {matched}")

    result = CheckResult(verdict=verdict, matched=matched, applied=applied)
    if not verdict.passed:
        result.message = render_failure_message(config.message, policy, verdict, applied)

    if config.comment_policy is not CommentPolicy.OFF:
        result.comment_action = reconcile_comment(
            host,
            config.comment_policy,
            verdict,
            config.marker,
            result.message,
            dry_run=dry_run,
        )

    return result


def report(result: CheckResult, exit_type: ExitType) -> int:
    """Publish step outputs / annotations and return the process exit code."""
    actions.set_output("status", result.status)

    if result.verdict.passed:
        actions.set_output("labels", ",".join(result.matched))
        print(f"Label policy satisfied: {', '.join(result.matched) or '(none)'}")
        return 0

    message = result.message or ""
    if exit_type is ExitType.SUCCESS:
        actions.warning(message)
        return 0

    actions.error(message)
    return 1


def build_host(config: RunConfig) -> GithubIssueHost:
    if not config.token:
        raise ConfigError("Input required and not supplied: token (or GITHUB_TOKEN)")
    if not config.repo:
        raise ConfigError("GitHub repository unknown. Set GITHUB_REPOSITORY or pass --repo owner/repo")
    if config.number is None:
        raise ConfigError("Issue/PR number unknown. Run on an issue or pull_request event or pass --number")
    return GithubIssueHost.from_token(config.token, config.repo, config.number)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Verify that the labels on an issue or pull request satisfy the configured policy",
    )
    p.add_argument("--repo", help="GitHub repository in owner/repo format (default: GITHUB_REPOSITORY)")
    p.add_argument("--number", type=int, help="Issue or pull request number (default: from the event payload)")
    p.add_argument("--dry-run", action="store_true", help="Evaluate and print the comment action without changing comments")
    p.add_argument("--verbose", action="store_true", help="Verbose logging (also enabled by RUNNER_DEBUG=1)")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    set_verbose_enabled(bool(args.verbose) or parse_runner_debug())

    try:
        config = load_config(repo=args.repo, number=args.number)
        host = build_host(config)
        result = check_policy(host, config, dry_run=args.dry_run)
    except RequiredLabelsError as exc:
        actions.error(str(exc))
        raise SystemExit(1)

    raise SystemExit(report(result, config.exit_type))


if __name__ == "__main__":
    main()
