"""Enumerate package directories under a workspace root."""

from collections.abc import Iterable
from pathlib import Path


def discover_package_dirs(
    root: Path,
    manifest_names: Iterable[str],
    exclude_dirs: Iterable[str] = (),
) -> list[Path]:
    """Return every directory under ``root`` holding one of ``manifest_names``.

    The result is sorted so that discovery order, and with it the conflict
    report, is reproducible between runs.
    """
    root = root.resolve()
    names = set(manifest_names)
    excluded = set(exclude_dirs)
    found: set[Path] = set()
    for name in names:
        for path in root.rglob(name):
            if not path.is_file():
                continue
            relative_parts = path.relative_to(root).parts[:-1]
            if any(part in excluded for part in relative_parts):
                continue
            found.add(path.parent)
    return sorted(found)
