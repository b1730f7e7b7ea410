"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from depcheck.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "manifests": {
        "canonical": "pubspec.yaml",
        "resolution": ".packages",
        "library_dir": "lib",
    },
    # Packages vendored inside the SDK; local copies reached transitively
    # would otherwise show up as conflicts.
    "vendor_pinned": ["analyzer", "front_end", "kernel"],
    "primary_root": None,
    "discovery": {
        "exclude_dirs": [".git", ".dart_tool", "build", "node_modules"],
    },
    "remediation": {
        "generic": (
            "Make sure you have re-run dependency resolution in all the "
            "directories mentioned above.\n"
            "If this does not help, inspect the resolved dependency graph in the "
            "affected directories to track down the conflict."
        ),
        "primary_root": (
            "Some of these conflicts are inside the primary workspace. "
            "Re-synchronize the dependencies of every package there at once "
            "instead of one directory at a time.\n"
            "If you need to actually upgrade them, do so on a separate branch, "
            "since the canonical manifests will change as well."
        ),
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
