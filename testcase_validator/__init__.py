# Copyright 2026 TIER IV, inc.
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

"""Validation of Markdown test cases: front matter schema, ids and steps."""

__version__ = "0.1.0"

from .linter import (  # noqa: E402
    IssueKind,
    LintIssue,
    LintResult,
    RunResult,
    SchemaLinter,
    lint_files,
    validate_document,
    validate_documents,
)

__all__ = [
    'IssueKind',
    'LintIssue',
    'LintResult',
    'RunResult',
    'SchemaLinter',
    'lint_files',
    'validate_document',
    'validate_documents',
]
