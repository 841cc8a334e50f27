# src/rebrand/core/ignore.py
from pathlib import Path
from typing import List, Optional

import pathspec

from rebrand.config import DEFAULT_IGNORE_PATTERNS, IGNORE_FILE_NAME
from rebrand.errors import RebrandError


def load_ignore_spec(root_dir: Path, extra_patterns: Optional[List[str]] = None) -> pathspec.PathSpec:
    """
    Builds the ignore PathSpec for a tree.

    Rules are the built-in defaults, then the root's .renameignore (if any),
    then `extra_patterns`. Later rules win, so a "!pattern" line in
    .renameignore can re-include something the defaults exclude.
    """
    lines = list(DEFAULT_IGNORE_PATTERNS)

    ignore_file = root_dir / IGNORE_FILE_NAME
    if ignore_file.exists():
        with open(ignore_file, "r", encoding="utf-8") as f:
            lines.extend(f.read().splitlines())

    if extra_patterns:
        lines.extend(extra_patterns)

    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", lines)
    except ValueError as e:
        raise RebrandError(f"Error parsing ignore rules: {e}") from e


def is_ignored(rel_path: Path, spec: pathspec.PathSpec, is_directory: bool = False) -> bool:
    """Checks a path relative to the tree root against the ignore rules."""
    path_str = rel_path.as_posix()
    if is_directory and not path_str.endswith("/"):
        # Directory-only patterns like "dist/" need the trailing slash to match.
        path_str += "/"
    return spec.match_file(path_str)
