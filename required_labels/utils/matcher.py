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

"""Match applied labels against the required label patterns.

Exact mode reports the *patterns* that were found (keeping the caller's
spelling), regex mode reports the *applied labels* that matched any pattern.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .errors import ConfigError
from .models import Policy


def compile_patterns(patterns: Sequence[str]) -> list[re.Pattern[str]]:
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern, re.IGNORECASE))
        except re.error as exc:
            raise ConfigError(f"Invalid regular expression in labels input [{pattern}]: {exc}") from exc
    return compiled


def match_exact(applied: Sequence[str], patterns: Sequence[str]) -> list[str]:
    applied_lower = {label.lower() for label in applied}
    return [pattern for pattern in patterns if pattern.lower() in applied_lower]


def match_regex(applied: Sequence[str], patterns: Sequence[str]) -> list[str]:
    compiled = compile_patterns(patterns)
    return [label for label in applied if any(rx.search(label) for rx in compiled)]


def match_labels(applied: Sequence[str], policy: Policy) -> list[str]:
    """Return the matched subset of *applied* for *policy*."""
    if policy.patterns_are_regex:
        return match_regex(applied, policy.patterns)
    return match_exact(applied, policy.patterns)
