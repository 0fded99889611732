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

"""JSON Schema loader for test case front matter validation."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from jsonschema.exceptions import SchemaError
from jsonschema.protocols import Validator
from jsonschema.validators import Draft202012Validator, validator_for

from ..exceptions import SchemaLoadError

logger = logging.getLogger(__name__)

# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, Dict[str, Any]] = {}

DEFAULT_SCHEMA_NAME = "testcase.schema.json"


def get_default_schema_path() -> Path:
    """Get the path to the reference schema shipped with the package."""
    return Path(__file__).parent.parent / "schema" / DEFAULT_SCHEMA_NAME


def load_schema(schema_path: Union[str, Path]) -> Dict[str, Any]:
    """Load and check a JSON Schema file.

    The schema is checked against the dialect it declares in ``$schema``
    (2020-12 when absent).

    Args:
        schema_path: Path to the schema file

    Returns:
        Schema dictionary

    Raises:
        SchemaLoadError: If the file is missing, is not JSON, or is not a valid schema
    """
    path = Path(schema_path)
    cache_key = str(path.resolve())
    if cache_key in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[cache_key]

    if not path.is_file():
        raise SchemaLoadError(f"Schema file not found: {path}")

    logger.debug(f"Loading schema file: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(
            f"Invalid JSON in schema file {path}: {e.msg} (line {e.lineno}, column {e.colno})"
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaLoadError(f"Failed to read schema file {path}: {e}") from e

    if not isinstance(schema, dict):
        raise SchemaLoadError(f"Schema root must be an object: {path}")

    try:
        validator_for(schema, default=Draft202012Validator).check_schema(schema)
    except SchemaError as e:
        raise SchemaLoadError(f"Invalid JSON Schema in {path}: {e.message}") from e

    _SCHEMA_CACHE[cache_key] = schema
    return schema


def compile_schema(schema: Dict[str, Any]) -> Validator:
    """Build a validator for ``schema`` with format assertions enabled."""
    validator_cls = validator_for(schema, default=Draft202012Validator)
    return validator_cls(schema, format_checker=validator_cls.FORMAT_CHECKER)


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()
