"""Per-package record of every target a workspace asserts for that package."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DependencyRecord:
    """Immutable view of the targets recorded for one package name.

    ``targets`` keeps discovery order: each entry pairs a target path with the
    manifests that asked for it, in the order they were scanned.
    """

    name: str
    targets: tuple[tuple[str, tuple[str, ...]], ...]
    canonical_target: str | None = None
    canonical_source: str | None = None

    def sources_for(self, target: str) -> tuple[str, ...]:
        """Return the sources that asked for ``target``."""
        for candidate, sources in self.targets:
            if candidate == target:
                return sources
        return ()


@dataclass
class DependencyRecordBuilder:
    """Mutable accumulator used while the workspace is being scanned."""

    name: str
    targets: dict[str, list[str]] = field(default_factory=dict)
    canonical_target: str | None = None
    canonical_source: str | None = None

    def add(self, target: str, source: str) -> None:
        """Append ``source`` to the list of manifests asking for ``target``."""
        self.targets.setdefault(target, []).append(source)

    def freeze(self) -> DependencyRecord:
        """Snapshot the builder into an immutable record."""
        return DependencyRecord(
            name=self.name,
            targets=tuple(
                (target, tuple(sources)) for target, sources in self.targets.items()
            ),
            canonical_target=self.canonical_target,
            canonical_source=self.canonical_source,
        )
