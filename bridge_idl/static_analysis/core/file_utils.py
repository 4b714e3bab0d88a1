"""
File system utilities for the interface analyzer.

This module provides functionality for finding TypeScript declaration sources in a
directory tree and loading them as source units.
"""

import os
from pathlib import Path
from typing import Generator, Iterable, List, Sequence

from bridge_idl.static_analysis.model.model import Blob

DEFAULT_EXTENSIONS = ('.d.ts',)


def _has_extension(file_path: Path, extensions: Sequence[str]) -> bool:
    # '.d.ts' is a compound suffix, so match on the name instead of Path.suffix
    name = file_path.name.lower()
    return any(name.endswith(extension.lower()) for extension in extensions)


def find_source_files(
    root_dirs: List[str],
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    exclude: Iterable[str] = (),
) -> Generator[Path, None, None]:
    """
    Find all source files with specified extensions in a directory tree.

    Args:
        root_dirs: Root directories to search in
        extensions: File name suffixes to include
        exclude: Directory or file names to skip

    Yields:
        Path objects for each matching source file, sorted per directory
    """
    excluded = set(exclude)
    for root_dir in root_dirs:
        root_path = Path(root_dir)

        if not root_path.exists():
            raise FileNotFoundError(f"Directory not found: {root_dir}")

        if not root_path.is_dir():
            raise NotADirectoryError(f"Not a directory: {root_dir}")

        for root, dirs, files in os.walk(root_dir):
            dirs[:] = sorted(d for d in dirs if d not in excluded)
            for file in sorted(files):
                if file in excluded:
                    continue
                file_path = Path(root) / file
                if _has_extension(file_path, extensions):
                    yield file_path


def get_blob_filename(file_path: Path, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> str:
    """
    Get the logical module name of a source file, without its source suffix.

    Args:
        file_path: Path to the source file
        extensions: Known source suffixes, longest match is removed

    Returns:
        File name without suffix, e.g. `element` for `element.d.ts`
    """
    name = file_path.name
    for extension in sorted(extensions, key=len, reverse=True):
        if name.lower().endswith(extension.lower()):
            return name[:-len(extension)]
    return file_path.stem


def load_blob(file_path: Path, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> Blob:
    """
    Read a source file into a Blob.

    Args:
        file_path: Path to the source file
        extensions: Known source suffixes

    Returns:
        Blob with the file content
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        raw = f.read()
    return Blob(source_file=str(file_path), filename=get_blob_filename(file_path, extensions), raw=raw)
