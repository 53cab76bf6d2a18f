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


"""Label policy check utilities.

Modules
-------
common          Shared low-level utilities (verbose logging, list/boolean input parsing).
errors          ``ConfigError`` / ``UpstreamError`` exception hierarchy.
models          Policy, verdict, comment marker and comment action dataclasses.
matcher         Exact (case-insensitive) and regex label matching.
policy          ``exactly`` / ``minimum`` / ``maximum`` count evaluation.
templates       Failure message template and ``{{ placeholder }}`` rendering.
comments        Marker-based status comment reconciliation (upsert / append).
github_issues   PyGithub-backed label and comment operations on one issue/PR.
actions         GitHub Actions inputs, outputs, annotations and event payload.
config          Input validation into a ``RunConfig``.
"""
