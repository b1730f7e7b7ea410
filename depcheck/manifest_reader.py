"""Reading of canonical and resolution manifests from package directories."""

import logging
from pathlib import Path
from typing import Any

import yaml

from depcheck.errors import MalformedManifestError

logger = logging.getLogger(__name__)


class ManifestReader:
    """Locates and loads the two manifest kinds in a package directory."""

    def __init__(
        self,
        canonical_name: str = "pubspec.yaml",
        resolution_name: str = ".packages",
    ) -> None:
        """Configure the file names looked up in each directory."""
        self.canonical_name = canonical_name
        self.resolution_name = resolution_name

    def canonical_path(self, directory: str) -> str:
        """Path of the canonical manifest for ``directory``."""
        return str(Path(directory) / self.canonical_name)

    def resolution_path(self, directory: str) -> str:
        """Path of the resolution manifest for ``directory``."""
        return str(Path(directory) / self.resolution_name)

    def has_canonical(self, directory: str) -> bool:
        """Return True if ``directory`` carries a canonical manifest."""
        return Path(self.canonical_path(directory)).is_file()

    def has_resolution(self, directory: str) -> bool:
        """Return True if ``directory`` carries a resolution manifest."""
        return Path(self.resolution_path(directory)).is_file()

    def read_resolution(self, directory: str) -> str:
        """Return the raw text of the resolution manifest."""
        return _read_utf8(self.resolution_path(directory))

    def load_canonical(self, directory: str) -> Any:
        """Parse the canonical manifest as YAML.

        An unparsable document is reported as malformed rather than surfacing
        the YAML error, since the manifest cannot name its package either way.
        """
        path = self.canonical_path(directory)
        raw = _read_utf8(path)
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            logger.debug("YAML error in %s: %s", path, exc)
            raise MalformedManifestError(path, "It is not valid YAML.") from exc


def _read_utf8(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        logger.debug("Decode error in %s: %s", path, exc)
        raise MalformedManifestError(path, "It is not valid UTF-8.") from exc
