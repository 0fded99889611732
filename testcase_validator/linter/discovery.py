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

"""Discovery of Markdown test case files."""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..exceptions import CorpusError

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def find_markdown_files(paths: Iterable[Union[str, Path]]) -> List[Path]:
    """Find all Markdown test cases in the given files and directories.

    Directories are searched recursively. Dotfiles and anything below a
    dot-directory are skipped.

    Raises:
        CorpusError: If a path does not exist
    """
    markdown_files = set()

    for path_like in paths:
        path = Path(path_like)

        if not path.exists():
            raise CorpusError(f"Path does not exist: {path}")

        if path.is_file():
            if path.suffix == MARKDOWN_SUFFIX:
                markdown_files.add(path)
            else:
                logger.warning(f"Skipping file that is not Markdown: {path}")
        elif path.is_dir():
            for candidate in path.rglob(f"*{MARKDOWN_SUFFIX}"):
                if candidate.is_file() and not _is_hidden(candidate, path):
                    markdown_files.add(candidate)
        else:
            raise CorpusError(f"Path is neither file nor directory: {path}")

    found = sorted(markdown_files)
    logger.debug(f"Discovered {len(found)} test case file(s)")
    return found
