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

"""Configuration management for the test case validator."""

import os
import logging
from dataclasses import dataclass, replace
from typing import Any

from .utils.logging_utils import DEFAULT_FORMAT, configure_split_stream_logging, parse_level

ENV_PREFIX = "TESTCASE_VALIDATOR_"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(ENV_PREFIX + name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ValidatorConfig:
    """Configuration for a validation run."""
    schema_path: str = os.path.join("schema", "testcase.schema.json")
    corpus_dir: str = "test-cases"
    log_level: str = "WARNING"
    print_level: str = "WARNING"
    require_steps: bool = False
    run_all_checks: bool = False

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        defaults = cls()
        return cls(
            schema_path=os.getenv(ENV_PREFIX + 'SCHEMA', defaults.schema_path),
            corpus_dir=os.getenv(ENV_PREFIX + 'CORPUS_DIR', defaults.corpus_dir),
            log_level=os.getenv(ENV_PREFIX + 'LOG_LEVEL', defaults.log_level),
            print_level=os.getenv(ENV_PREFIX + 'PRINT_LEVEL', defaults.print_level),
            require_steps=_env_flag('REQUIRE_STEPS'),
            run_all_checks=_env_flag('ALL_CHECKS'),
        )

    def override(self, **changes: Any) -> 'ValidatorConfig':
        """Return a copy with every non-None value in ``changes`` applied."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = parse_level(self.log_level)
        stderr_level = parse_level(self.print_level)

        formatter = logging.Formatter(DEFAULT_FORMAT)
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('testcase_validator')
