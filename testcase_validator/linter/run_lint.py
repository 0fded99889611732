#!/usr/bin/env python3
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

"""CLI entry point for validating Markdown test cases."""

import argparse
import json
import logging
import sys
from typing import List, Optional, TextIO

from ..config import ValidatorConfig
from ..exceptions import ValidatorError
from ..file_io.source_location import SourceLocation, format_source
from . import SchemaLinter, lint_files
from .discovery import find_markdown_files
from .report import IssueKind, LintIssue, RunResult

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "All test cases passed validation."

# Schema or corpus could not be loaded
EXIT_FATAL = 2


def _schema_line(issue: LintIssue) -> str:
    where = issue.location or "(root)"
    extra = ""
    if issue.extra and 'additionalProperty' in issue.extra:
        extra = f" [additionalProperty={issue.extra['additionalProperty']}]"
    return f"{where} {issue.message}{extra}"


def print_human(run_result: RunResult, out: TextIO, err: TextIO) -> None:
    """Print diagnostics as ``path[:line] - message`` lines."""
    for result in run_result:
        schema_issues = result.issues_of(IssueKind.SCHEMA_VIOLATION)
        if schema_issues:
            print(f"{result.file_path} - Front matter schema errors:", file=err)
            for issue in schema_issues:
                print(f"  {_schema_line(issue)}", file=err)

        for issue in result.issues:
            if issue.kind is IssueKind.SCHEMA_VIOLATION:
                continue
            where = format_source(SourceLocation(file_path=result.file_path, line=issue.line))
            print(f"{where} - {issue.message}", file=err)

    if run_result.passed:
        print(SUCCESS_MESSAGE, file=out)


def print_json(run_result: RunResult, out: TextIO) -> None:
    print(json.dumps(run_result.to_dict(), indent=2), file=out)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


def print_github_actions(run_result: RunResult, out: TextIO) -> None:
    for result in run_result:
        for issue in result.issues:
            message = _schema_line(issue) if issue.kind is IssueKind.SCHEMA_VIOLATION else issue.message
            file_path = _escape_property(result.file_path)
            print(f"::error file={file_path},line={issue.line or 1}::{_escape_data(message)}", file=out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='testcase-validator',
        description='Validate Markdown test cases against the front matter schema and step conventions',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        help='Test case files or directories (default: the configured corpus directory)',
    )
    parser.add_argument(
        '--schema',
        default=None,
        help='JSON Schema for the front matter (default: schema/testcase.schema.json)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--require-steps',
        action='store_true',
        default=None,
        help='Fail test cases whose body has no numbered steps',
    )
    parser.add_argument(
        '--all-checks',
        dest='run_all_checks',
        action='store_true',
        default=None,
        help='Run id and steps checks even when the schema check fails',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level, e.g. DEBUG (default: WARNING)',
    )
    return parser


def run(
    argv: Optional[List[str]] = None,
    *,
    config: Optional[ValidatorConfig] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    configure_logging: bool = False,
) -> int:
    """Validate the corpus and return the process exit code."""
    out = out or sys.stdout
    err = err or sys.stderr
    args = build_parser().parse_args(argv)

    config = (config or ValidatorConfig.from_env()).override(
        schema_path=args.schema,
        require_steps=args.require_steps,
        run_all_checks=args.run_all_checks,
        log_level=args.log_level,
    )
    if configure_logging:
        config.set_logging()

    try:
        schema_linter = SchemaLinter.from_path(config.schema_path)
        files = find_markdown_files(args.paths or [config.corpus_dir])
        run_result = lint_files(
            files,
            schema_linter,
            require_steps=config.require_steps,
            run_all_checks=config.run_all_checks,
        )
    except ValidatorError as e:
        print(f"Error: {e}", file=err)
        return EXIT_FATAL

    logger.info(f"Validated {len(run_result)} test case(s), {run_result.issue_count} issue(s)")

    if args.format == 'json':
        print_json(run_result, out)
    elif args.format == 'github-actions':
        print_github_actions(run_result, out)
    else:
        print_human(run_result, out, err)

    return run_result.exit_code


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the validator CLI."""
    sys.exit(run(argv, configure_logging=True))


if __name__ == '__main__':
    main()
