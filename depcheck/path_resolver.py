"""Path normalization and containment checks used by the checker."""

import os
from urllib.parse import unquote, urlparse


class PathResolver:
    """Turns manifest paths into absolute, normalized strings.

    Targets are compared textually, so every path entering the ledger goes
    through :meth:`absolute`. Symlinks are deliberately left unresolved.
    """

    def __init__(self, cwd: str | None = None) -> None:
        """Resolve relative paths against ``cwd`` (defaults to the process cwd)."""
        self.cwd = cwd

    def join(self, *parts: str) -> str:
        """Join path segments."""
        return os.path.join(*parts)

    def normalize(self, path: str) -> str:
        """Collapse ``.``/``..`` segments and redundant separators."""
        return os.path.normpath(path)

    def absolute(self, base: str, path: str | None = None) -> str:
        """Return ``path`` made absolute against ``base``, normalized."""
        joined = base if path is None else os.path.join(base, path)
        if not os.path.isabs(joined):
            joined = os.path.join(self.cwd or os.getcwd(), joined)
        return os.path.normpath(joined)

    def is_absolute(self, path: str) -> bool:
        """Return True for absolute paths."""
        return os.path.isabs(path)

    def is_within(self, parent: str, child: str) -> bool:
        """Return True if ``child`` lies strictly below ``parent``."""
        parent = self.absolute(parent)
        child = self.absolute(child)
        if parent == child:
            return False
        try:
            return os.path.commonpath([parent, child]) == parent
        except ValueError:
            # Different drives on Windows.
            return False

    def escapes(self, path: str) -> bool:
        """Return True if a relative ``path`` climbs above its starting directory.

        Absolute paths never escape; they are taken as pinned locations.
        """
        if os.path.isabs(path):
            return False
        return os.path.normpath(path).split(os.sep)[0] == os.pardir

    def from_uri(self, value: str) -> str:
        """Convert a ``file:`` URI or a percent-encoded path to a plain path."""
        if value.startswith("file:"):
            parsed = urlparse(value)
            return unquote(parsed.path)
        return unquote(value)
