"""Exception types raised while checking workspace dependency consistency."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from depcheck.conflict_report import ConflictReport


class DependencyCheckError(Exception):
    """Base class for every fatal outcome of a consistency check."""


class MalformedManifestError(DependencyCheckError):
    """A canonical manifest could not be read as a named package."""

    def __init__(self, manifest_path: str, reason: str) -> None:
        """Record the offending manifest and why it was rejected."""
        self.manifest_path = manifest_path
        self.reason = reason
        super().__init__(f"{manifest_path} is malformed. {reason}".rstrip())


class DuplicateCanonicalError(DependencyCheckError):
    """Two manifests both claim to define the same package."""

    def __init__(self, name: str, first_source: str, second_source: str) -> None:
        """Record both claimants of the package name."""
        self.name = name
        self.first_source = first_source
        self.second_source = second_source
        super().__init__(
            f'Package "{name}" is defined by more than one manifest:\n'
            f"  {first_source}\n"
            f"  {second_source}"
        )


class NotResolvableError(DependencyCheckError):
    """A single target was requested for a conflicted or unknown package."""

    def __init__(self, name: str) -> None:
        """Record the package that has no single target."""
        self.name = name
        super().__init__(f'Package "{name}" does not resolve to a single target.')


class ConflictError(DependencyCheckError):
    """One or more packages resolve to different targets across the workspace."""

    def __init__(self, report: ConflictReport, message: str) -> None:
        """Keep the structured report next to its rendered text."""
        self.report = report
        super().__init__(message)

    @property
    def names(self) -> list[str]:
        """Names of the conflicted packages, in discovery order."""
        return [block.name for block in self.report.blocks]
