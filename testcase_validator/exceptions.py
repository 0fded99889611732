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

"""Custom exceptions for the test case validator."""


class ValidatorError(Exception):
    """Base exception for validator related errors."""
    pass


class SchemaLoadError(ValidatorError):
    """Exception raised when the front matter schema cannot be loaded."""
    pass


class CorpusError(ValidatorError):
    """Exception raised when the test case corpus cannot be discovered or read."""
    pass


class FrontMatterError(ValidatorError):
    """Exception raised when a document's front matter cannot be parsed.

    ``body`` and ``body_line_offset`` hold the Markdown body when the split
    itself succeeded, so the body can still be checked.
    """

    def __init__(self, message: str, *, body: str = "", body_line_offset: int = 0):
        super().__init__(message)
        self.body = body
        self.body_line_offset = body_line_offset
