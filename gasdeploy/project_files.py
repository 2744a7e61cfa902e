"""
project_files.py

Responsibility: read the project's source-like files from the project root.

Only files directly in the root are read (no recursion), in sorted name
order so prompts built from them are stable between runs.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

DEFAULT_EXTENSIONS: tuple[str, ...] = (".gs", ".js", ".html", ".json")


def collect_project_files(
    root: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> Mapping[str, str]:
    """
    Return a read-only mapping of file name -> UTF-8 content.

    Bytes that are not valid UTF-8 are replaced with U+FFFD.
    """
    root_path = Path(root)
    allowed = set(extensions)
    files: dict[str, str] = {}
    for path in sorted(root_path.iterdir(), key=lambda p: p.name):
        if path.is_file() and path.suffix in allowed:
            files[path.name] = path.read_text(encoding="utf-8", errors="replace")
    return MappingProxyType(files)
