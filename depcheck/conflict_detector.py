"""Conflict detection over a populated dependency ledger."""

from collections.abc import Iterable

from depcheck.dependency_ledger import DependencyLedger
from depcheck.path_resolver import PathResolver


def compute_conflicts(ledger: DependencyLedger) -> list[str]:
    """Return the conflicted package names in discovery order."""
    return ledger.conflicted_names()


def affects_root(
    ledger: DependencyLedger,
    name: str,
    root: str | None,
    path_resolver: PathResolver,
) -> bool:
    """Return True if a non-canonical source of ``name`` lies inside ``root``.

    The canonical target is skipped: the package defining itself inside the
    root is expected and says nothing about stale resolutions there.
    """
    if root is None or name not in ledger:
        return False
    record = ledger.record(name)
    for target, sources in record.targets:
        if target == record.canonical_target:
            continue
        if any(path_resolver.is_within(root, source) for source in sources):
            return True
    return False


def any_affects_root(
    ledger: DependencyLedger,
    names: Iterable[str],
    root: str | None,
    path_resolver: PathResolver,
) -> bool:
    """Return True if any of ``names`` affects ``root``."""
    return any(affects_root(ledger, name, root, path_resolver) for name in names)
