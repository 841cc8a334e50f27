# src/rebrand/core/scanner.py
import os
from pathlib import Path
from typing import Iterator, Optional

import pathspec

from rebrand.config import BINARY_EXTENSIONS, TEXT_SNIFF_BYTES
from rebrand.core.ignore import is_ignored


def is_probably_text(data: bytes) -> bool:
    """
    Best-effort text check: no NUL byte in the first few bytes.

    Binary formats whose header happens to contain no NUL byte pass as text.
    Those are expected to be caught by BINARY_EXTENSIONS instead.
    """
    return b"\0" not in data[:TEXT_SNIFF_BYTES]


def read_text_file(path: Path) -> Optional[str]:
    """
    Returns the file's text, or None if it looks binary.

    Bytes that are not valid UTF-8 are kept as surrogate escapes so that
    write_text_file() puts them back unchanged. OSError propagates.
    """
    data = path.read_bytes()
    if not is_probably_text(data):
        return None
    return data.decode("utf-8", errors="surrogateescape")


def write_text_file(path: Path, content: str) -> None:
    path.write_bytes(content.encode("utf-8", errors="surrogateescape"))


class ProjectScanner:
    def __init__(self, root_dir: Path, ignore_spec: pathspec.PathSpec):
        self.root_dir = root_dir
        self.ignore_spec = ignore_spec

    def _has_binary_extension(self, path: Path) -> bool:
        return path.suffix.lower() in BINARY_EXTENSIONS

    def scan(self) -> Iterator[Path]:
        """
        Walks the tree, pruning ignored directories, and yields candidate
        file paths in a stable (sorted) order.
        """
        for root, dirs, files in os.walk(self.root_dir):
            root_path = Path(root)

            # Prune in place so os.walk never descends into ignored directories.
            dirs[:] = sorted(
                d for d in dirs
                if not is_ignored((root_path / d).relative_to(self.root_dir), self.ignore_spec, is_directory=True)
            )

            for f in sorted(files):
                file_abs_path = root_path / f
                rel_path = file_abs_path.relative_to(self.root_dir)

                if is_ignored(rel_path, self.ignore_spec):
                    continue
                if self._has_binary_extension(file_abs_path):
                    continue
                # Symlinks are skipped, never read or written through.
                if file_abs_path.is_symlink() or not file_abs_path.is_file():
                    continue

                yield file_abs_path

