"""Verify that every package in a workspace resolves to a single location.

Each package directory may carry a canonical manifest (the package's own
definition) and a resolution manifest (``name:path`` lines written by the
package manager). The check fails, listing every conflict at once, when two
directories resolve the same package name to different paths.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from depcheck.run_check import run_check


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command line."""
    ap = argparse.ArgumentParser(
        description="Check that all package directories agree on dependency paths.",
    )
    ap.add_argument(
        "directories",
        nargs="*",
        type=Path,
        help="Package directories to check, in this order",
    )
    ap.add_argument(
        "--workspace",
        type=Path,
        help="Discover package directories under this root (sorted by path)",
    )
    ap.add_argument(
        "--primary-root",
        type=Path,
        help="Conflicts inside this root get workspace-wide remediation advice",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--write",
        type=Path,
        help="Also write the conflict report text to this file",
    )
    ap.add_argument(
        "--report-json",
        type=Path,
        help="Write a JSON conflict report to this file",
    )
    ap.add_argument(
        "--write-package-map",
        type=Path,
        help="On success, write the resolved name:path map to this file",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every manifest that is read",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the workspace dependency check."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_check(args)


if __name__ == "__main__":
    raise SystemExit(main())
