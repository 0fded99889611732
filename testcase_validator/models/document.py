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

"""Test case documents: reading, front matter parsing and normalisation."""

from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import frontmatter
import yaml

from ..exceptions import CorpusError, FrontMatterError
from ..file_io.source_location import build_source_map

logger = logging.getLogger(__name__)

# Any line-ending convention
LINE_BREAK = re.compile(r"\r\n|\r|\n")

_YAML_HANDLER = frontmatter.YAMLHandler()


@dataclass(frozen=True)
class Document:
    """A Markdown test case split into metadata and body."""

    path: str
    metadata: Dict[str, Any]
    body: str
    # Number of file lines before the first body line
    body_line_offset: int = 0
    source_map: Dict[str, int] = field(default_factory=dict, compare=False, repr=False)


def _json_key(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def to_json_compatible(value: Any) -> Any:
    """Normalise YAML-loaded data into JSON-like values.

    Mapping keys become strings and dates become ISO-8601 strings, so that
    ``- 1: Open the page`` yields the step key ``"1"``.
    """
    if isinstance(value, Mapping):
        return {_json_key(key): to_json_compatible(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_compatible(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return [to_json_compatible(item) for item in sorted(value, key=repr)]
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return value


def _strip_delimiter_break(content: str) -> str:
    match = LINE_BREAK.match(content)
    return content[match.end():] if match else content


def _count_line_breaks(text: str) -> int:
    return len(LINE_BREAK.findall(text))


def split_front_matter(raw: str) -> Tuple[Optional[str], str, int, int]:
    """Split raw text into (header, body, header_line_offset, body_line_offset).

    ``header`` is None when the text does not start with a ``---`` block.
    The offsets count the file lines preceding the header and the body.
    """
    if not _YAML_HANDLER.detect(raw):
        return None, raw, 0, 0

    try:
        header, content = _YAML_HANDLER.split(raw)
    except ValueError:
        # Opening delimiter without a closing one
        return None, raw, 0, 0

    opening = _YAML_HANDLER.FM_BOUNDARY.match(raw)
    header_offset = _count_line_breaks(raw[: opening.end()]) if opening else 0
    body = _strip_delimiter_break(content)
    body_offset = _count_line_breaks(raw[: len(raw) - len(body)])
    return header, body, header_offset, body_offset


def parse_front_matter(raw: str) -> Tuple[Dict[str, Any], str]:
    """Parse raw document text into ``(metadata, body)``.

    Raises:
        FrontMatterError: If the header is not valid YAML or not a mapping
    """
    header, body, _, _ = split_front_matter(raw)
    return _load_header(header), body


def _load_header(header: Optional[str]) -> Dict[str, Any]:
    if header is None:
        return {}

    try:
        data = _YAML_HANDLER.load(header)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Front matter is not valid YAML: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise FrontMatterError(f"Front matter must be a mapping, got {type(data).__name__}")
    return to_json_compatible(data)


def parse_document(path: Union[str, Path], raw: str) -> Document:
    """Build a :class:`Document` from its storage path and raw text.

    Raises:
        FrontMatterError: With ``body`` and ``body_line_offset`` set
    """
    header, body, header_offset, body_offset = split_front_matter(raw)
    try:
        metadata = _load_header(header)
    except FrontMatterError as exc:
        exc.body = body
        exc.body_line_offset = body_offset
        raise
    source_map = build_source_map(header, line_offset=header_offset) if header else {}
    return Document(
        path=str(path),
        metadata=metadata,
        body=body,
        body_line_offset=body_offset,
        source_map=source_map,
    )


def read_document_text(path: Union[str, Path]) -> str:
    """Read a corpus file as UTF-8.

    Raises:
        CorpusError: If the file cannot be read or decoded
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusError(f"Failed to read test case {path}: {exc}") from exc


def load_document(path: Union[str, Path]) -> Document:
    logger.debug(f"Loading test case: {path}")
    return parse_document(path, read_document_text(path))
