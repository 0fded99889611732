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

"""Linter package for Markdown test case validation."""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..exceptions import FrontMatterError
from ..file_io.source_location import join_pointer, lookup_source
from ..models.document import Document, load_document
from ..models.test_case import CaseFields
from .body_linter import BodyLinter
from .identity_linter import lint_filename_matches_id
from .report import IssueKind, LintIssue, LintResult, RunResult
from .schema_linter import SchemaLinter
from .step_linter import lint_front_matter_steps

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

logger = logging.getLogger(__name__)


def _locate(issues: Iterable[LintIssue], document: Document) -> List[LintIssue]:
    """Attach front matter line numbers to metadata issues."""
    located = []
    for issue in issues:
        pointer = issue.location
        if issue.extra and 'additionalProperty' in issue.extra:
            pointer = join_pointer(pointer, issue.extra['additionalProperty'])
        loc = lookup_source(document.source_map, pointer)
        located.append(issue.with_line(loc.line) if loc.line is not None else issue)
    return located


def _lint_body(body: str, line_offset: int, require_steps: bool) -> List[LintIssue]:
    """Run the body check and report file line numbers."""
    issues = []
    for issue in BodyLinter(require_steps=require_steps).lint(body):
        if issue.line is not None:
            issue = issue.with_line(issue.line + line_offset)
        issues.append(issue)
    return issues


def validate_document(
    document: Document,
    schema_linter: SchemaLinter,
    *,
    require_steps: bool = False,
    run_all_checks: bool = False,
) -> LintResult:
    """Run every check on one test case.

    A schema failure skips the id and steps checks unless ``run_all_checks``
    is set. The body check always runs.
    """
    result = LintResult(document.path)

    schema_issues = schema_linter.lint(document.metadata)
    result.extend(_locate(schema_issues, document))

    if schema_issues and not run_all_checks:
        logger.debug(f"{document.path}: schema invalid, skipping id and steps checks")
    else:
        fields = CaseFields.from_metadata(document.metadata)
        if fields.case_id is not None:
            result.extend(_locate(lint_filename_matches_id(document.path, fields.case_id), document))
        if fields.has_steps:
            result.extend(_locate(lint_front_matter_steps(fields.raw_steps), document))

    result.extend(_lint_body(document.body, document.body_line_offset, require_steps))

    logger.debug(f"{document.path}: {'passed' if result.passed else f'{len(result.issues)} issue(s)'}")
    return result


def validate_documents(
    documents: Iterable[Document],
    schema_linter: SchemaLinter,
    *,
    require_steps: bool = False,
    run_all_checks: bool = False,
) -> RunResult:
    """Validate documents in the given order; no document stops the run."""
    return RunResult(
        validate_document(
            document,
            schema_linter,
            require_steps=require_steps,
            run_all_checks=run_all_checks,
        )
        for document in documents
    )


def lint_files(
    file_paths: Iterable[Union[str, Path]],
    schema_linter: SchemaLinter,
    *,
    require_steps: bool = False,
    run_all_checks: bool = False,
) -> RunResult:
    """Read and validate a list of Markdown test cases.

    Args:
        file_paths: Test case files, in report order
        schema_linter: Linter holding the compiled front matter schema

    Returns:
        RunResult with one LintResult per file

    Raises:
        CorpusError: If a file cannot be read
    """
    run_result = RunResult()

    for file_path in file_paths:
        try:
            document = load_document(file_path)
        except FrontMatterError as e:
            result = LintResult(str(file_path))
            result.add_issue(LintIssue(IssueKind.FRONT_MATTER, str(e)))
            result.extend(_lint_body(e.body, e.body_line_offset, require_steps))
            run_result.append(result)
            continue

        run_result.append(
            validate_document(
                document,
                schema_linter,
                require_steps=require_steps,
                run_all_checks=run_all_checks,
            )
        )

    return run_result
