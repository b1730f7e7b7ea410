"""Orchestration logic for checking a workspace from the command line."""

import argparse
import logging
from pathlib import Path
from typing import Any

from depcheck.compute_config_hash import compute_config_hash
from depcheck.conflict_report import write_json_report, write_text_report
from depcheck.discover_package_dirs import discover_package_dirs
from depcheck.errors import ConflictError, DependencyCheckError
from depcheck.load_config import load_config
from depcheck.manifest_reader import ManifestReader
from depcheck.path_resolver import PathResolver
from depcheck.workspace_checker import WorkspaceConsistencyChecker

logger = logging.getLogger(__name__)


def run_check(args: argparse.Namespace) -> int:
    """Execute the consistency check described by ``args``."""
    config = load_config(args.config)
    if args.primary_root:
        config["primary_root"] = str(args.primary_root)

    directories = _collect_directories(args, config)
    if not directories:
        msg = "No package directories to check."
        raise SystemExit(msg)

    checker = build_checker(config)
    try:
        package_map = checker.check(directories)
    except ConflictError as exc:
        if args.write:
            write_text_report(args.write, str(exc))
        if args.report_json:
            write_json_report(args.report_json, exc.report, compute_config_hash(config))
        raise SystemExit(str(exc)) from exc
    except DependencyCheckError as exc:
        raise SystemExit(str(exc)) from exc

    if args.write_package_map:
        write_package_map(args.write_package_map, package_map)

    print(
        f"No dependency conflicts across {len(directories)} directories "
        f"({len(package_map)} packages)."
    )
    return 0


def build_checker(config: dict[str, Any]) -> WorkspaceConsistencyChecker:
    """Create a checker wired from configuration."""
    manifests = config["manifests"]
    return WorkspaceConsistencyChecker(
        PathResolver(),
        ManifestReader(manifests["canonical"], manifests["resolution"]),
        vendor_pinned=config.get("vendor_pinned", []),
        primary_root=config.get("primary_root"),
        library_dir=manifests["library_dir"],
        generic_remediation=config["remediation"]["generic"],
        primary_root_remediation=config["remediation"]["primary_root"],
    )


def write_package_map(path: Path, package_map: dict[str, str]) -> None:
    """Write ``package_map`` as ``name:path`` lines."""
    lines = [f"{name}:{target}" for name, target in package_map.items()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _collect_directories(
    args: argparse.Namespace, config: dict[str, Any]
) -> list[Path]:
    """Explicit directories keep their order; discovered ones are sorted."""
    directories = list(args.directories)
    if args.workspace:
        manifests = config["manifests"]
        discovered = discover_package_dirs(
            args.workspace,
            [manifests["canonical"], manifests["resolution"]],
            config.get("discovery", {}).get("exclude_dirs", []),
        )
        logger.info("Discovered %s package directories", len(discovered))
        directories.extend(discovered)
    # A directory given explicitly and also discovered is scanned once.
    return list(dict.fromkeys(path.resolve() for path in directories))
