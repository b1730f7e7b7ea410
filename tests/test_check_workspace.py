"""Tests for the command line entry point."""

import json
from pathlib import Path

import pytest

from depcheck.check_workspace import main


def _write_workspace(root: Path, foo_path: str) -> None:
    (root / "app").mkdir()
    (root / "app" / "pubspec.yaml").write_text("name: app\n", encoding="utf-8")
    (root / "app" / ".packages").write_text(
        f"# Generated\napp:lib/\nfoo:{foo_path}\n", encoding="utf-8"
    )
    (root / "foo").mkdir()
    (root / "foo" / "pubspec.yaml").write_text("name: foo\n", encoding="utf-8")


def test_success_writes_package_map(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify a clean workspace exits 0 and can dump its package map."""
    ws = tmp_path / "ws"
    ws.mkdir()
    _write_workspace(ws, "../foo/lib/")
    map_file = tmp_path / "map.txt"

    code = main(["--workspace", str(ws), "--write-package-map", str(map_file)])

    assert code == 0
    root = ws.resolve()
    assert map_file.read_text(encoding="utf-8").splitlines() == [
        f"app:{root / 'app' / 'lib'}",
        f"foo:{root / 'foo' / 'lib'}",
    ]
    assert "No dependency conflicts" in capsys.readouterr().out


def test_conflict_exits_with_report(tmp_path: Path) -> None:
    """Verify a conflicting workspace exits with the report as its message."""
    ws = tmp_path / "ws"
    ws.mkdir()
    _write_workspace(ws, "../vendor/foo/lib/")
    text_file = tmp_path / "report.txt"
    json_file = tmp_path / "report.json"

    with pytest.raises(SystemExit) as excinfo:
        main(
            [
                "--workspace",
                str(ws),
                "--primary-root",
                str(ws.resolve()),
                "--write",
                str(text_file),
                "--report-json",
                str(json_file),
            ]
        )

    message = str(excinfo.value.code)
    assert message.startswith('Package "foo" has conflicts:')
    assert "Re-synchronize" in message
    assert text_file.read_text(encoding="utf-8").strip() == message.strip()
    content = json.loads(json_file.read_text(encoding="utf-8"))
    assert content["meta"]["affects_primary_root"] is True
    assert len(content["meta"]["config_hash"]) == 64  # noqa: PLR2004


def test_explicit_directories_keep_order(tmp_path: Path) -> None:
    """Verify that directories given on the command line are scanned as given."""
    ws = tmp_path / "ws"
    ws.mkdir()
    _write_workspace(ws, "../foo/lib/")

    assert main([str(ws / "foo"), str(ws / "app")]) == 0


def test_malformed_manifest_exits(tmp_path: Path) -> None:
    """Verify that a malformed canonical manifest aborts the run."""
    (tmp_path / "bad").mkdir()
    (tmp_path / "bad" / "pubspec.yaml").write_text("name: 123\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "bad")])

    assert "pubspec.yaml is malformed" in str(excinfo.value.code)


def test_no_directories_exits() -> None:
    """Verify that an empty invocation is rejected."""
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == "No package directories to check."


def test_config_file_changes_manifest_names(tmp_path: Path) -> None:
    """Verify that manifest names come from the configuration file."""
    pkg = tmp_path / "pkg"
    pkg.mkdir()
    (pkg / "package.yaml").write_text("name: pkg\n", encoding="utf-8")
    (pkg / "resolved.map").write_text("dep:../dep/src/\n", encoding="utf-8")
    config = tmp_path / "depcheck.yml"
    config.write_text(
        "manifests:\n  canonical: package.yaml\n"
        "  resolution: resolved.map\n  library_dir: src\n",
        encoding="utf-8",
    )
    map_file = tmp_path / "map.txt"

    code = main(
        ["--config", str(config), "--workspace", str(tmp_path),
         "--write-package-map", str(map_file)]
    )

    assert code == 0
    root = tmp_path.resolve()
    assert map_file.read_text(encoding="utf-8").splitlines() == [
        f"pkg:{root / 'pkg' / 'src'}",
        f"dep:{root / 'dep' / 'src'}",
    ]


def test_directory_given_twice_is_scanned_once(tmp_path: Path) -> None:
    """Verify that an explicit directory also found by discovery is not rescanned."""
    ws = tmp_path / "ws"
    ws.mkdir()
    _write_workspace(ws, "../foo/lib/")

    assert main([str(ws / "foo"), "--workspace", str(ws)]) == 0
