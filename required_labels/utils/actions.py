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

"""GitHub Actions runtime plumbing – step inputs, step outputs, workflow
command annotations and the triggering event payload.

See: https://docs.github.com/actions/using-workflows/workflow-commands-for-github-actions
"""

from __future__ import annotations

import json
import os
import sys
import uuid
from pathlib import Path
from typing import Any

from .errors import ConfigError


def get_input(name: str, *, required: bool = False) -> str:
    """Read action input *name* from ``INPUT_<NAME>``, trimmed."""
    env_name = "INPUT_" + name.replace(" ", "_").upper()
    value = (os.environ.get(env_name) or "").strip()
    if required and not value:
        raise ConfigError(f"Input required and not supplied: {name}")
    return value


def escape_command(value: str | None) -> str:
    if value is None:
        return ""
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _command(level: str, message: str) -> None:
    print(f"::{level}::{escape_command(message)}")
    sys.stdout.flush()


def warning(message: str) -> None:
    _command("warning", message)


def error(message: str) -> None:
    _command("error", message)


def set_output(name: str, value: str) -> None:
    """Append ``name=value`` to ``$GITHUB_OUTPUT``; printed when running outside Actions."""
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        print(f"output {name}={value}")
        return

    with open(output_path, "a", encoding="utf-8") as f:
        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            f.write(f"{name}={value}\n")


def load_event() -> dict[str, Any]:
    event_path = os.environ.get("GITHUB_EVENT_PATH")
    if not event_path:
        return {}
    try:
        return json.loads(Path(event_path).read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError) as exc:
        print(f"WARN: failed to read event payload {event_path}: {exc}", file=sys.stderr)
        return {}


def event_issue_number(event: dict[str, Any]) -> int | None:
    """Return the issue/PR number the event refers to, if any."""
    for key in ("pull_request", "issue"):
        obj = event.get(key)
        if isinstance(obj, dict) and obj.get("number") is not None:
            return int(obj["number"])
    if event.get("number") is not None:
        return int(event["number"])
    return None
