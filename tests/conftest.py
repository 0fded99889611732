"""Shared fixtures for the test case validator tests."""

import json

import pytest

from testcase_validator.linter.schema_linter import SchemaLinter
from testcase_validator.models import json_schema_loader


TEST_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "required": ["id", "title"],
    "properties": {
        "id": {"type": "string", "pattern": "^[a-z]+-[0-9]{3}$"},
        "title": {"type": "string", "minLength": 1},
        "priority": {"type": "string", "enum": ["low", "medium", "high"]},
        "created": {"type": "string", "format": "date"},
        "estimate": {"type": "number"},
        "tags": {"type": "array", "items": {"type": "string"}},
        "steps": {
            "type": "array",
            "items": {
                "type": "object",
                "patternProperties": {"^[0-9]+$": {"type": "string"}},
            },
        },
    },
}


@pytest.fixture(autouse=True)
def _clear_schema_cache():
    json_schema_loader.clear_cache()
    yield
    json_schema_loader.clear_cache()


@pytest.fixture
def schema():
    return json.loads(json.dumps(TEST_SCHEMA))


@pytest.fixture
def schema_linter(schema):
    return SchemaLinter(schema)


@pytest.fixture
def permissive_linter():
    """Accepts any metadata mapping, so only the structural checks report."""
    return SchemaLinter({"$schema": "https://json-schema.org/draft/2020-12/schema"})


@pytest.fixture
def schema_file(tmp_path, schema):
    path = tmp_path / "schema" / "testcase.schema.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(schema, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def write_case(tmp_path):
    """Write a Markdown test case below ``tmp_path/test-cases``."""

    def _write(relative_path, text):
        path = tmp_path / "test-cases" / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
