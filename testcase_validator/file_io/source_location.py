from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Union

import yaml


JsonPointer = str


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[str] = None
    pointer: Optional[JsonPointer] = None
    line: Optional[int] = None  # 1-based


def json_pointer_escape(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


def to_json_pointer(parts: Iterable[Union[str, int]]) -> JsonPointer:
    """Join path tokens into a JSON pointer; the empty pointer is the root."""
    return "".join(f"/{json_pointer_escape(str(part))}" for part in parts)


def join_pointer(base: Optional[JsonPointer], token: Union[str, int]) -> JsonPointer:
    return f"{base or ''}/{json_pointer_escape(str(token))}"


def build_source_map(content: str, *, line_offset: int = 0) -> Dict[JsonPointer, int]:
    """Map JSON pointers inside a YAML document to 1-based line numbers.

    This uses PyYAML's node tree (yaml.compose) so locations are tracked
    without changing the data returned by safe_load. ``line_offset`` shifts
    every line, for YAML embedded after other content in a file.
    """
    source_map: Dict[JsonPointer, int] = {}

    try:
        root = yaml.compose(content, Loader=yaml.SafeLoader)
    except yaml.YAMLError:
        return source_map

    if root is None:
        return source_map

    def _walk(node: yaml.nodes.Node, path: JsonPointer) -> None:
        # PyYAML marks are 0-based
        source_map[path] = node.start_mark.line + 1 + line_offset

        if isinstance(node, yaml.nodes.MappingNode):
            for key_node, value_node in node.value:
                key = getattr(key_node, "value", None)
                if key is None:
                    continue
                _walk(value_node, join_pointer(path, key))
        elif isinstance(node, yaml.nodes.SequenceNode):
            for idx, item_node in enumerate(node.value):
                _walk(item_node, join_pointer(path, idx))

    _walk(root, "")
    return source_map


def lookup_source(
    source_map: Optional[Dict[JsonPointer, int]],
    pointer: Optional[JsonPointer],
    *,
    file_path: Optional[str] = None,
) -> SourceLocation:
    """Resolve a pointer, falling back to its closest mapped ancestor."""
    if not source_map or pointer is None:
        return SourceLocation(file_path=file_path, pointer=pointer)

    candidate = pointer
    while candidate:
        if candidate in source_map:
            return SourceLocation(file_path=file_path, pointer=pointer, line=source_map[candidate])
        candidate = candidate.rsplit("/", 1)[0]

    return SourceLocation(file_path=file_path, pointer=pointer)


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc or loc.file_path is None:
        return ""
    if loc.line is not None:
        return f"{loc.file_path}:{loc.line}"
    return loc.file_path
