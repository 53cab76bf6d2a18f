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

"""Shared low-level utilities – logging control and input list/boolean parsing."""

from __future__ import annotations

import os
import re

_verbose_enabled = False

_TRUE_VALUES = {"true", "yes", "y", "on", "1"}
_FALSE_VALUES = {"false", "no", "n", "off", "0", ""}


def parse_runner_debug() -> bool:
    raw = os.getenv("RUNNER_DEBUG")
    if raw is None or raw == "":
        return False
    if raw not in {"0", "1"}:
        raise SystemExit("ERROR: RUNNER_DEBUG must be '0' or '1' when set")
    return raw == "1"


def set_verbose_enabled(value: bool) -> None:
    global _verbose_enabled
    _verbose_enabled = bool(value)


def vprint(msg: str) -> None:
    if _verbose_enabled:
        print(msg)


def parse_bool(raw: str | None) -> bool | None:
    """Parse a workflow input boolean; ``None`` when the value is not recognised."""
    value = (raw or "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


def split_list(raw: str | None, *, newline_only: bool = False) -> list[str]:
    """Split a multi-value input into trimmed, non-blank items.

    Items are separated by newlines and, unless *newline_only* is set, by
    commas as well. Regular expressions may legitimately contain commas
    (``\\d{1,2}``), so regex pattern lists are split on newlines only.
    """
    separator = r"\r?\n" if newline_only else r"[,\r\n]"
    return [item.strip() for item in re.split(separator, raw or "") if item.strip()]
