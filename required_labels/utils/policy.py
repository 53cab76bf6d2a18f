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

"""Mode/count decision over the matched label subset."""

from __future__ import annotations

from .models import Mode, Verdict


def evaluate(matched_count: int, mode: Mode, count: int) -> Verdict:
    if mode is Mode.EXACTLY:
        passed = matched_count == count
    elif mode is Mode.MINIMUM:
        passed = matched_count >= count
    else:
        passed = matched_count <= count

    if passed:
        return Verdict(passed=True)
    return Verdict(passed=False, error_kind=mode.error_string)
