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

"""Failure message template and ``{{ placeholder }}`` rendering."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from .models import Policy, Verdict


DEFAULT_MESSAGE_TEMPLATE = (
    "Label error. Requires {{ errorString }} {{ count }} of: {{ provided }}. Found: {{ applied }}"
)

# Unknown placeholder names render as "" rather than failing the run.
PLACEHOLDER_RE = re.compile(r"\{\{\s*(.*?)\s*\}\}")


def render_template(template: str, values: dict[str, Any]) -> str:
    """Replace ``{{ key }}`` placeholders in *template* with values from *values*."""
    def repl(match: re.Match[str]) -> str:
        v = values.get(match.group(1))
        if v is None:
            return ""
        return str(v)

    return PLACEHOLDER_RE.sub(repl, template)


def message_values(policy: Policy, verdict: Verdict, applied: Sequence[str]) -> dict[str, Any]:
    return {
        "mode": policy.mode.value,
        "count": policy.count,
        "errorString": verdict.error_kind,
        "provided": ", ".join(policy.patterns),
        "applied": ", ".join(applied),
    }


def render_failure_message(
    template: str, policy: Policy, verdict: Verdict, applied: Sequence[str]
) -> str:
    return render_template(template, message_values(policy, verdict, applied))
