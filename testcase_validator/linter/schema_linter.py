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

"""Front matter schema linter.

Validates test case metadata against the JSON Schema and reports every
violation, not only the first one.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Union

from jsonschema.exceptions import ValidationError

from ..file_io.source_location import to_json_pointer
from ..models.json_schema_loader import compile_schema, load_schema
from .report import IssueKind, LintIssue

ADDITIONAL_PROPERTY_MESSAGE = "must NOT have additional properties"


def _unexpected_properties(error: ValidationError) -> List[str]:
    """Names rejected by an ``additionalProperties: false`` rule."""
    if error.validator_value is not False or not isinstance(error.instance, dict):
        return []

    declared = error.schema.get("properties", {})
    patterns = error.schema.get("patternProperties", {})
    return [
        name
        for name in error.instance
        if name not in declared and not any(re.search(pattern, name) for pattern in patterns)
    ]


class SchemaLinter:
    """Linter for front matter schema conformance."""

    def __init__(self, schema: Dict[str, Any]):
        """Initialize the schema linter.

        Args:
            schema: JSON Schema dictionary, already checked by the loader
        """
        self.schema = schema
        self._validator = compile_schema(schema)

    @classmethod
    def from_path(cls, schema_path: Union[str, Path]) -> "SchemaLinter":
        return cls(load_schema(schema_path))

    def lint(self, metadata: Any) -> List[LintIssue]:
        """Validate metadata and return one issue per violation."""
        if not isinstance(metadata, dict):
            return [LintIssue(IssueKind.SCHEMA_VIOLATION, "must be object", location="")]

        issues: List[LintIssue] = []
        for error in self._validator.iter_errors(metadata):
            location = to_json_pointer(error.absolute_path)

            if error.validator == "additionalProperties":
                unexpected = _unexpected_properties(error)
                if unexpected:
                    issues.extend(
                        LintIssue(
                            IssueKind.SCHEMA_VIOLATION,
                            ADDITIONAL_PROPERTY_MESSAGE,
                            location=location,
                            extra={"additionalProperty": name},
                        )
                        for name in unexpected
                    )
                    continue

            issues.append(LintIssue(IssueKind.SCHEMA_VIOLATION, error.message, location=location))
        return issues

    def is_valid(self, metadata: Any) -> bool:
        return not self.lint(metadata)
