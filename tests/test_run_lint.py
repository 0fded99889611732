"""Tests for the command line interface."""

import io
import json
import logging

import pytest

from testcase_validator.config import ValidatorConfig
from testcase_validator.linter.run_lint import EXIT_FATAL, SUCCESS_MESSAGE, main, run


GOOD_CASE = "---\nid: login-001\ntitle: Login\n---\n1. Open the page\n**Expected:** Page shown\n"
BAD_SCHEMA_CASE = "---\nid: login-001\ncolor: red\n---\n"
BAD_BODY_CASE = "---\nid: login-002\ntitle: Logout\n---\n\n1. Click logout\nnothing\n"


@pytest.fixture
def workspace(tmp_path, monkeypatch, schema_file):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "test-cases").mkdir()
    return tmp_path


def run_cli(*argv, config=None):
    out, err = io.StringIO(), io.StringIO()
    code = run(list(argv), config=config or ValidatorConfig(), out=out, err=err)
    return code, out.getvalue(), err.getvalue()


class TestHumanOutput:

    def test_all_pass(self, workspace, write_case):
        write_case("login-001.md", GOOD_CASE)
        code, out, err = run_cli()
        assert code == 0
        assert out == SUCCESS_MESSAGE + "\n"
        assert err == ""

    def test_empty_corpus_passes(self, workspace):
        code, out, err = run_cli()
        assert code == 0
        assert out.strip() == SUCCESS_MESSAGE

    def test_schema_errors_are_grouped(self, workspace, write_case):
        write_case("login-001.md", BAD_SCHEMA_CASE)
        code, out, err = run_cli()
        assert code == 1
        assert out == ""
        assert err.splitlines() == [
            "test-cases/login-001.md - Front matter schema errors:",
            "  (root) must NOT have additional properties [additionalProperty=color]",
            "  (root) 'title' is a required property",
        ]

    def test_body_error_has_file_line(self, workspace, write_case):
        write_case("login-002-logout.md", BAD_BODY_CASE)
        code, _, err = run_cli()
        assert code == 1
        assert err.strip() == (
            'test-cases/login-002-logout.md:6 - Step is not followed by "**Expected:** ..." on the next line'
        )

    def test_every_document_is_reported(self, workspace, write_case):
        write_case("login-001.md", BAD_SCHEMA_CASE)
        write_case("login-002.md", BAD_BODY_CASE)
        write_case("login-003.md", GOOD_CASE)
        code, out, err = run_cli()
        assert code == 1
        assert "test-cases/login-001.md - Front matter schema errors:" in err
        assert "test-cases/login-002.md:6 - " in err
        # login-003 carries id login-001
        assert 'test-cases/login-003.md:2 - Filename should equal the id or start with it' in err

    def test_explicit_paths(self, workspace, write_case):
        good = write_case("login-001.md", GOOD_CASE)
        write_case("login-002.md", BAD_BODY_CASE)
        code, out, _ = run_cli(str(good))
        assert code == 0
        assert out.strip() == SUCCESS_MESSAGE

    def test_require_steps_flag(self, workspace, write_case):
        write_case("login-001.md", "---\nid: login-001\ntitle: Login\n---\nNo steps.\n")
        assert run_cli()[0] == 0
        code, _, err = run_cli("--require-steps")
        assert code == 1
        assert 'No numbered steps found' in err

    def test_all_checks_flag(self, workspace, write_case):
        write_case("other.md", "---\nid: login-001\ncolor: red\ntitle: T\n---\n")
        _, _, err = run_cli()
        assert "Filename should equal" not in err
        _, _, err = run_cli("--all-checks")
        assert "Filename should equal" in err


class TestFatalErrors:

    def test_missing_schema(self, tmp_path, monkeypatch, write_case):
        monkeypatch.chdir(tmp_path)
        write_case("login-001.md", GOOD_CASE)
        code, out, err = run_cli()
        assert code == EXIT_FATAL
        assert out == ""
        assert err.startswith("Error: Schema file not found")

    def test_missing_corpus(self, tmp_path, monkeypatch, schema_file):
        monkeypatch.chdir(tmp_path)
        code, _, err = run_cli()
        assert code == EXIT_FATAL
        assert "does not exist" in err

    def test_schema_option(self, workspace, write_case):
        other = workspace / "other.schema.json"
        other.write_text(json.dumps({"type": "object"}), encoding="utf-8")
        write_case("login-001.md", BAD_SCHEMA_CASE)
        assert run_cli()[0] == 1
        assert run_cli("--schema", str(other))[0] == 0


class TestMachineOutput:

    def test_json(self, workspace, write_case):
        write_case("login-001.md", BAD_SCHEMA_CASE)
        write_case("login-001-ok.md", GOOD_CASE)
        code, out, err = run_cli("--format", "json")
        assert code == 1
        assert err == ""
        data = json.loads(out)
        assert data["files"] == 2
        assert data["passed"] is False
        first = data["results"][0]
        assert first["file"] == "test-cases/login-001-ok.md"
        assert first["passed"] is True
        extras = [error.get("extra") for error in data["results"][1]["errors"]]
        assert {"additionalProperty": "color"} in extras

    def test_github_actions(self, workspace, write_case):
        write_case("login-002.md", BAD_BODY_CASE)
        code, out, _ = run_cli("--format", "github-actions")
        assert code == 1
        assert out.strip() == (
            '::error file=test-cases/login-002.md,line=6::'
            'Step is not followed by "**Expected:** ..." on the next line'
        )

    def test_github_actions_escapes_multiline_messages(self, workspace, write_case):
        write_case("login-001.md", "---\nid: [oops\n---\n")
        code, out, _ = run_cli("--format", "github-actions")
        assert code == 1
        lines = out.splitlines()
        assert len(lines) == 1
        assert lines[0].startswith("::error file=test-cases/login-001.md,line=1::Front matter is not valid YAML")
        assert "%0A" in lines[0]


class TestMain:

    def test_exit_code(self, workspace, write_case, monkeypatch):
        for name in ("SCHEMA", "CORPUS_DIR", "LOG_LEVEL", "PRINT_LEVEL", "REQUIRE_STEPS", "ALL_CHECKS"):
            monkeypatch.delenv(f"TESTCASE_VALIDATOR_{name}", raising=False)
        write_case("login-002.md", BAD_BODY_CASE)
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            with pytest.raises(SystemExit) as excinfo:
                main([])
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
        assert excinfo.value.code == 1
