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

"""Linter for numbered steps written in the Markdown body.

A body step is a numbered list item (``1. Do thing``). Each one must be
immediately followed by an expectation line (``**Expected:** Thing done``).
"""

import re
from typing import List

from ..models.document import LINE_BREAK
from .report import IssueKind, LintIssue

# "1. Do thing" or "  12. Do thing"
STEP_LINE = re.compile(r"^\s*[0-9]+\.\s+\S")
EXPECTED_LINE = re.compile(r"^\s*\*\*Expected:\*\*\s+\S")


class BodyLinter:
    """Linter for body step formatting."""

    def __init__(self, require_steps: bool = False):
        """Initialize the body linter.

        Args:
            require_steps: Report a body without any numbered step
        """
        self.require_steps = require_steps

    def lint(self, body: str) -> List[LintIssue]:
        """Lint a document body.

        Returns:
            Issues with 1-based line numbers relative to the body
        """
        lines = LINE_BREAK.split(body)
        issues: List[LintIssue] = []
        step_count = 0

        for index, line in enumerate(lines):
            if not STEP_LINE.match(line):
                continue
            step_count += 1
            following = lines[index + 1] if index + 1 < len(lines) else ""
            if not EXPECTED_LINE.match(following):
                issues.append(
                    LintIssue(
                        IssueKind.BODY_FORMAT,
                        'Step is not followed by "**Expected:** ..." on the next line',
                        line=index + 1,
                    )
                )

        if self.require_steps and step_count == 0:
            issues.append(LintIssue(IssueKind.MISSING_STEPS, 'No numbered steps found (e.g., "1. ...")'))

        return issues

    def is_valid(self, body: str) -> bool:
        return not self.lint(body)
