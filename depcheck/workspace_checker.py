"""Workspace-wide check that every package name resolves to one location."""

import logging
from collections.abc import Iterable
from os import PathLike

from depcheck.conflict_detector import compute_conflicts
from depcheck.conflict_report import build_conflict_report, render_conflict_report
from depcheck.dependency_ledger import DependencyLedger
from depcheck.errors import ConflictError, MalformedManifestError
from depcheck.load_config import DEFAULT_CONFIG
from depcheck.manifest_reader import ManifestReader
from depcheck.parse_resolution_manifest import parse_resolution_manifest
from depcheck.path_resolver import PathResolver

logger = logging.getLogger(__name__)


class WorkspaceConsistencyChecker:
    """Scans package directories into a ledger and validates it.

    A run is all-or-nothing: it returns the package map when every name has a
    single target, and raises otherwise.
    """

    def __init__(
        self,
        path_resolver: PathResolver,
        manifest_reader: ManifestReader,
        *,
        vendor_pinned: Iterable[str] = (),
        primary_root: str | None = None,
        library_dir: str = "lib",
        generic_remediation: str = DEFAULT_CONFIG["remediation"]["generic"],
        primary_root_remediation: str = DEFAULT_CONFIG["remediation"]["primary_root"],
    ) -> None:
        """Wire the collaborators and policy for a check."""
        self.path_resolver = path_resolver
        self.manifest_reader = manifest_reader
        self.vendor_pinned = frozenset(vendor_pinned)
        self.primary_root = (
            path_resolver.absolute(primary_root) if primary_root else None
        )
        self.library_dir = library_dir
        self.generic_remediation = generic_remediation
        self.primary_root_remediation = primary_root_remediation
        self.last_ledger: DependencyLedger | None = None

    def check(self, directories: Iterable[str | PathLike[str]]) -> dict[str, str]:
        """Check ``directories`` in order and return the package map."""
        ledger = DependencyLedger()
        self.last_ledger = ledger
        count = 0
        for directory in directories:
            self.scan_directory(ledger, self.path_resolver.absolute(str(directory)))
            count += 1
        logger.info("Scanned %s directories, %s packages recorded", count, len(ledger))

        conflicts = compute_conflicts(ledger)
        if not conflicts:
            return ledger.as_package_map()

        logger.info("Found %s conflicting packages", len(conflicts))
        report = build_conflict_report(ledger, self.primary_root, self.path_resolver)
        message = render_conflict_report(
            report, self.generic_remediation, self.primary_root_remediation
        )
        raise ConflictError(report, message)

    def scan_directory(self, ledger: DependencyLedger, directory: str) -> None:
        """Record the manifests found in one package directory."""
        if self.manifest_reader.has_canonical(directory):
            self._add_canonical(ledger, directory)
        if self.manifest_reader.has_resolution(directory):
            self._add_resolutions(ledger, directory)

    def _add_canonical(self, ledger: DependencyLedger, directory: str) -> None:
        manifest_path = self.manifest_reader.canonical_path(directory)
        document = self.manifest_reader.load_canonical(directory)
        if not isinstance(document, dict):
            raise MalformedManifestError(manifest_path, "")
        name = document.get("name")
        if not isinstance(name, str):
            raise MalformedManifestError(manifest_path, "The name should be a String.")
        library_root = self.path_resolver.absolute(directory, self.library_dir)
        logger.debug("%s defines %s at %s", manifest_path, name, library_root)
        ledger.record_canonical(name, library_root, manifest_path)

    def _add_resolutions(self, ledger: DependencyLedger, directory: str) -> None:
        manifest_path = self.manifest_reader.resolution_path(directory)
        text = self.manifest_reader.read_resolution(directory)
        for name, raw_path in parse_resolution_manifest(text):
            path = self.path_resolver.from_uri(raw_path)
            if self.is_pinned_locally(name, path):
                logger.debug("Skipping vendor-pinned %s in %s", name, manifest_path)
                continue
            target = self.path_resolver.absolute(directory, path)
            ledger.record_resolution(name, target, manifest_path)

    def is_pinned_locally(self, name: str, path: str) -> bool:
        """Return True for vendor-pinned names resolved without leaving the tree."""
        return name in self.vendor_pinned and not self.path_resolver.escapes(path)
