"""Shared fixtures for building throwaway workspaces."""

from collections.abc import Callable
from pathlib import Path

import pytest

from depcheck.manifest_reader import ManifestReader
from depcheck.path_resolver import PathResolver
from depcheck.workspace_checker import WorkspaceConsistencyChecker

MakePackage = Callable[..., Path]


@pytest.fixture
def make_package(tmp_path: Path) -> MakePackage:
    """Create a package directory with optional pubspec.yaml and .packages."""

    def _make(
        name: str,
        pubspec: str | None = None,
        packages: list[str] | None = None,
    ) -> Path:
        directory = tmp_path / name
        directory.mkdir(parents=True, exist_ok=True)
        if pubspec is not None:
            (directory / "pubspec.yaml").write_text(pubspec, encoding="utf-8")
        if packages is not None:
            (directory / ".packages").write_text(
                "\n".join(packages) + "\n", encoding="utf-8"
            )
        return directory

    return _make


@pytest.fixture
def checker() -> WorkspaceConsistencyChecker:
    """Checker with the default manifest names and vendor-pinned packages."""
    return WorkspaceConsistencyChecker(
        PathResolver(),
        ManifestReader(),
        vendor_pinned=["analyzer", "front_end", "kernel"],
    )
