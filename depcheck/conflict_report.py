"""Structured and rendered reports of dependency conflicts."""

import json
from dataclasses import dataclass
from pathlib import Path

from depcheck.conflict_detector import any_affects_root, compute_conflicts
from depcheck.dependency_ledger import DependencyLedger
from depcheck.path_resolver import PathResolver
from depcheck.pluralize import pluralize

CANONICAL_NOTE = (
    "(This is the actual package definition, "
    'so it is considered the canonical "right answer".)'
)


@dataclass(frozen=True)
class TargetEntry:
    """One target of a conflicted package and the manifests asking for it."""

    target: str
    source_count: int
    sources: tuple[str, ...]
    is_canonical: bool


@dataclass(frozen=True)
class ConflictBlock:
    """All targets recorded for one conflicted package."""

    name: str
    entries: tuple[TargetEntry, ...]


@dataclass(frozen=True)
class ConflictReport:
    """Every conflict found in a workspace, in discovery order."""

    blocks: tuple[ConflictBlock, ...]
    affects_primary_root: bool = False


def build_conflict_block(ledger: DependencyLedger, name: str) -> ConflictBlock:
    """Build the block for ``name`` with targets ordered by source count."""
    record = ledger.record(name)
    # sorted() is stable, so equal counts keep first-discovery order.
    ordered = sorted(record.targets, key=lambda item: len(item[1]), reverse=True)
    entries = tuple(
        TargetEntry(
            target=target,
            source_count=len(sources),
            sources=sources,
            is_canonical=(
                record.canonical_source is not None
                and record.canonical_source in sources
            ),
        )
        for target, sources in ordered
    )
    return ConflictBlock(name=name, entries=entries)


def build_conflict_report(
    ledger: DependencyLedger,
    primary_root: str | None,
    path_resolver: PathResolver,
) -> ConflictReport:
    """Collect every conflicted package of ``ledger`` into a report."""
    names = compute_conflicts(ledger)
    return ConflictReport(
        blocks=tuple(build_conflict_block(ledger, name) for name in names),
        affects_primary_root=any_affects_root(
            ledger, names, primary_root, path_resolver
        ),
    )


def render_conflict_block(block: ConflictBlock) -> list[str]:
    """Render one package's conflict as report lines."""
    lines = [f'Package "{block.name}" has conflicts:']
    for entry in block.entries:
        wants = pluralize(entry.source_count, "source wants", "sources want")
        lines.append(f'  {entry.source_count} {wants} "{entry.target}":')
        lines.extend(f"    {source}" for source in entry.sources)
        if entry.is_canonical:
            lines.append(f"    {CANONICAL_NOTE}")
    return lines


def render_conflict_report(
    report: ConflictReport,
    generic_remediation: str,
    primary_root_remediation: str,
) -> str:
    """Render the full report text, remediation paragraph last."""
    lines: list[str] = []
    for block in report.blocks:
        lines.extend(render_conflict_block(block))
    lines.append("")
    if report.affects_primary_root:
        lines.append(primary_root_remediation.strip())
    else:
        lines.append(generic_remediation.strip())
    return "\n".join(lines)


def write_text_report(path: str | Path, text: str) -> None:
    """Write rendered report text to ``path``."""
    Path(path).write_text(text + "\n", encoding="utf-8")


def write_json_report(path: str | Path, report: ConflictReport, config_hash: str) -> None:
    """Write a machine-readable version of ``report`` to ``path``."""
    data = {
        "meta": {
            "config_hash": config_hash,
            "total_conflicts": len(report.blocks),
            "affects_primary_root": report.affects_primary_root,
        },
        "conflicts": [
            {
                "package": block.name,
                "targets": [
                    {
                        "target": entry.target,
                        "source_count": entry.source_count,
                        "sources": list(entry.sources),
                        "canonical": entry.is_canonical,
                    }
                    for entry in block.entries
                ],
            }
            for block in report.blocks
        ],
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
