"""Tests for environment driven configuration."""

import logging

from testcase_validator.config import ValidatorConfig


class TestValidatorConfig:

    def test_defaults(self, monkeypatch):
        for name in ("SCHEMA", "CORPUS_DIR", "LOG_LEVEL", "PRINT_LEVEL", "REQUIRE_STEPS", "ALL_CHECKS"):
            monkeypatch.delenv(f"TESTCASE_VALIDATOR_{name}", raising=False)
        config = ValidatorConfig.from_env()
        assert config == ValidatorConfig()
        assert config.corpus_dir == "test-cases"
        assert config.schema_path.replace("\\", "/") == "schema/testcase.schema.json"
        assert config.require_steps is False

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("TESTCASE_VALIDATOR_SCHEMA", "/etc/cases.schema.json")
        monkeypatch.setenv("TESTCASE_VALIDATOR_CORPUS_DIR", "docs/cases")
        monkeypatch.setenv("TESTCASE_VALIDATOR_REQUIRE_STEPS", "yes")
        monkeypatch.setenv("TESTCASE_VALIDATOR_ALL_CHECKS", "1")
        monkeypatch.setenv("TESTCASE_VALIDATOR_LOG_LEVEL", "debug")
        config = ValidatorConfig.from_env()
        assert config.schema_path == "/etc/cases.schema.json"
        assert config.corpus_dir == "docs/cases"
        assert config.require_steps is True
        assert config.run_all_checks is True
        assert config.log_level == "debug"

    def test_override_skips_none(self):
        config = ValidatorConfig(corpus_dir="cases").override(corpus_dir=None, require_steps=True)
        assert config.corpus_dir == "cases"
        assert config.require_steps is True

    def test_set_logging(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            logger = ValidatorConfig(log_level="DEBUG", print_level="ERROR").set_logging()
            assert logger.name == "testcase_validator"
            assert root.level == logging.DEBUG
            assert [handler.level for handler in root.handlers] == [logging.DEBUG, logging.ERROR]
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
