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

"""Error reporting for the linter."""

from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional


class IssueKind(str, Enum):
    """Categories of findings reported for a test case."""

    FRONT_MATTER = "front_matter"
    SCHEMA_VIOLATION = "schema_violation"
    IDENTITY_MISMATCH = "identity_mismatch"
    STEP_STRUCTURE = "step_structure"
    STEP_SEQUENCE = "step_sequence"
    BODY_FORMAT = "body_format"
    MISSING_STEPS = "missing_steps"


@dataclass(frozen=True)
class LintIssue:
    kind: IssueKind
    message: str
    line: Optional[int] = None  # 1-based
    location: Optional[str] = None  # JSON pointer into the metadata, "" is the root
    extra: Optional[Dict[str, Any]] = None

    def with_line(self, line: Optional[int]) -> "LintIssue":
        return replace(self, line=line)

    def to_dict(self) -> Dict[str, Any]:
        data = {key: value for key, value in asdict(self).items() if value is not None}
        data['kind'] = self.kind.value
        return data


class LintResult:
    """Container for linting results for a single file."""

    def __init__(self, file_path: str):
        """Initialize lint result.

        Args:
            file_path: Path of the test case being linted
        """
        self.file_path = file_path
        self.issues: List[LintIssue] = []

    def add_issue(self, issue: LintIssue) -> None:
        self.issues.append(issue)

    def extend(self, issues: Iterable[LintIssue]) -> None:
        self.issues.extend(issues)

    @property
    def passed(self) -> bool:
        return not self.issues

    def issues_of(self, *kinds: IssueKind) -> List[LintIssue]:
        return [issue for issue in self.issues if issue.kind in kinds]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': self.file_path,
            'passed': self.passed,
            'errors': [issue.to_dict() for issue in self.issues],
        }

    def __repr__(self) -> str:
        return f"LintResult({self.file_path!r}, issues={len(self.issues)})"


class RunResult:
    """Aggregated outcome of a validation run, in document order."""

    def __init__(self, results: Optional[Iterable[LintResult]] = None):
        self.results: List[LintResult] = list(results or [])

    def append(self, result: LintResult) -> None:
        self.results.append(result)

    @property
    def passed(self) -> bool:
        # An empty corpus passes
        return all(result.passed for result in self.results)

    @property
    def failed_results(self) -> List[LintResult]:
        return [result for result in self.results if not result.passed]

    @property
    def issue_count(self) -> int:
        return sum(len(result.issues) for result in self.results)

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'files': len(self.results),
            'errors': self.issue_count,
            'passed': self.passed,
            'results': [result.to_dict() for result in self.results],
        }

    def __iter__(self) -> Iterator[LintResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)
