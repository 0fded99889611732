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

"""File naming linter: the file name must carry the test case id."""

from pathlib import PurePath
from typing import List, Union

from .report import IssueKind, LintIssue


def filename_matches_id(file_path: Union[str, PurePath], case_id: str) -> bool:
    """``feature-001.md`` and ``feature-001-login.md`` both match ``feature-001``."""
    base_name = PurePath(file_path).stem
    return base_name == case_id or base_name.startswith(f"{case_id}-")


def lint_filename_matches_id(file_path: Union[str, PurePath], case_id: str) -> List[LintIssue]:
    if filename_matches_id(file_path, case_id):
        return []
    return [
        LintIssue(
            IssueKind.IDENTITY_MISMATCH,
            f'Filename should equal the id or start with it (expected starts with "{case_id}")',
            location="/id",
        )
    ]
