"""Query document discovery."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from gqlcontext.constants.discovery import DOCUMENT_SUFFIXES

logger = logging.getLogger(__name__)


def discover_documents(
    root: Path,
    document_globs: tuple[str, ...],
    max_file_kb: int,
    *,
    exclude: Iterable[Path] = (),
) -> list[Path]:
    """Discover GraphQL documents under *root* by configured glob patterns.

    Files in *exclude* (typically the schema SDL files) and files larger than
    *max_file_kb* are skipped.
    """
    discovered: set[Path] = set()
    size_limit_bytes = max_file_kb * 1024
    resolved_root = root.resolve()
    excluded = {path.resolve() for path in exclude}

    for pattern in document_globs:
        for path in root.glob(pattern):
            if not path.is_file() or path.suffix not in DOCUMENT_SUFFIXES:
                continue
            resolved = path.resolve()
            if resolved in excluded:
                continue
            try:
                if path.stat().st_size > size_limit_bytes:
                    logger.warning("Skipping %s: larger than %d KB", path, max_file_kb)
                    continue
            except OSError:
                continue
            discovered.add(resolved)

    documents = sorted(discovered, key=lambda path: stable_path_key(path, resolved_root))
    logger.debug("Discovered %d document(s) under %s", len(documents), resolved_root)
    return documents


def stable_path_key(file_path: Path, root: Path) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()
