"""In-memory ledger of package targets observed across a workspace."""

from depcheck.dependency_record import DependencyRecord, DependencyRecordBuilder
from depcheck.errors import DuplicateCanonicalError, NotResolvableError


class DependencyLedger:
    """Tracks, per package name, every target path and who asked for it.

    Package names keep the order in which they were first seen, and so do the
    targets within each package. Reports rely on that order.
    """

    def __init__(self) -> None:
        """Start with an empty ledger."""
        self._records: dict[str, DependencyRecordBuilder] = {}

    def _builder(self, name: str) -> DependencyRecordBuilder:
        builder = self._records.get(name)
        if builder is None:
            builder = DependencyRecordBuilder(name)
            self._records[name] = builder
        return builder

    def record_canonical(self, name: str, target: str, source: str) -> None:
        """Register ``target`` as the package's own definition from ``source``."""
        builder = self._builder(name)
        if builder.canonical_source is not None:
            raise DuplicateCanonicalError(name, builder.canonical_source, source)
        builder.add(target, source)
        builder.canonical_target = target
        builder.canonical_source = source

    def record_resolution(self, name: str, target: str, source: str) -> None:
        """Record that ``source`` resolved ``name`` to ``target``."""
        self._builder(name).add(target, source)

    def has_conflict(self, name: str) -> bool:
        """Return True if ``name`` was resolved to more than one target."""
        builder = self._records.get(name)
        return builder is not None and len(builder.targets) > 1

    def single_target(self, name: str) -> str:
        """Return the only target recorded for ``name``.

        Raises NotResolvableError when the package is unknown or conflicted.
        """
        builder = self._records.get(name)
        if builder is None or len(builder.targets) != 1:
            raise NotResolvableError(name)
        return next(iter(builder.targets))

    def conflicted_names(self) -> list[str]:
        """Names with more than one target, in the order they were first seen."""
        return [name for name in self._records if self.has_conflict(name)]

    def names(self) -> list[str]:
        """All recorded package names, in the order they were first seen."""
        return list(self._records)

    def record(self, name: str) -> DependencyRecord:
        """Return an immutable snapshot of the record for ``name``."""
        return self._records[name].freeze()

    def as_package_map(self) -> dict[str, str]:
        """Map every package to its single target."""
        return {name: self.single_target(name) for name in self._records}

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)
