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

"""Exceptions raised by the label policy check.

A failing policy is not an exception: it is a ``Verdict`` with
``passed=False`` and is routed through the configured exit type.
"""


class RequiredLabelsError(Exception):
    """Base class for every fatal error of a check run."""


class ConfigError(RequiredLabelsError):
    """Invalid or missing configuration, detected before any network call."""


class UpstreamError(RequiredLabelsError):
    """A label/comment host call failed (auth, not found, rate limit, transport)."""

    def __init__(self, operation: str, detail: str, status: int | None = None) -> None:
        self.operation = operation
        self.detail = detail
        self.status = status
        prefix = f"{operation} failed"
        if status is not None:
            prefix += f" (HTTP {status})"
        super().__init__(f"{prefix}: {detail}")
