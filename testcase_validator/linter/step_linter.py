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

"""Linter for numbered steps declared in front matter.

Steps are a list of single-entry objects keyed by their number, with an
optional expectation::

    steps:
      - 1: Open the login page
        expected: The form is shown
      - 2: Submit valid credentials

Structure is checked entry by entry and the first malformed entry ends the
check. Well-formed steps must then be numbered 1..n in any order.
"""

import re
from typing import Any, List, Optional, Sequence, Tuple

from ..file_io.source_location import join_pointer
from ..models.test_case import Step
from .report import IssueKind, LintIssue

_STEP_NUMBER = re.compile(r"[0-9]+")

STEPS_POINTER = "/steps"


def _structure_issue(message: str, index: int) -> LintIssue:
    return LintIssue(IssueKind.STEP_STRUCTURE, message, location=join_pointer(STEPS_POINTER, index))


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def parse_steps(raw_steps: Sequence[Any]) -> Tuple[List[Step], Optional[LintIssue]]:
    """Convert step entries into :class:`Step` objects.

    Returns the steps parsed so far and the first structural issue, if any.
    """
    steps: List[Step] = []
    for index, entry in enumerate(raw_steps):
        if not isinstance(entry, dict):
            return steps, _structure_issue('Each entry in "steps" must be an object', index)

        keys = [key for key in entry if isinstance(key, str) and _STEP_NUMBER.fullmatch(key)]
        if len(keys) != 1:
            return steps, _structure_issue('Each step must have exactly one numeric key (e.g., "1")', index)

        action = entry[keys[0]]
        if _is_blank(action):
            return steps, _structure_issue("Each step's numeric key must map to a non-empty action", index)

        # expected is optional, but never empty
        expected = entry.get("expected")
        if "expected" in entry and _is_blank(expected):
            return steps, _structure_issue('If present, "expected" must be a non-empty string', index)

        steps.append(Step(number=int(keys[0]), action=action, expected=expected))
    return steps, None


def check_step_sequence(steps: Sequence[Step]) -> Optional[LintIssue]:
    """Check that step numbers are exactly 1..n, with no gaps or duplicates."""
    numbers = sorted(step.number for step in steps)
    if numbers == list(range(1, len(numbers) + 1)):
        return None
    found = ", ".join(str(number) for number in numbers)
    return LintIssue(
        IssueKind.STEP_SEQUENCE,
        f"Step numbers must be sequential starting at 1 (found {found})",
        location=STEPS_POINTER,
    )


def lint_front_matter_steps(raw_steps: Any) -> List[LintIssue]:
    """Lint the value of the ``steps`` field.

    Anything other than a list has nothing to check and passes.
    """
    if not isinstance(raw_steps, list):
        return []

    steps, issue = parse_steps(raw_steps)
    if issue is None:
        issue = check_step_sequence(steps)
    return [issue] if issue is not None else []
