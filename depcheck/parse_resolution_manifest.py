"""Parsing of ``name:path`` resolution manifests."""

import re

COMMENT_RE = re.compile(r"^\s*#")


def parse_resolution_manifest(text: str) -> list[tuple[str, str]]:
    """Return ``(dependency_name, raw_path)`` pairs in file order.

    Blank lines, comment lines and lines without a ``name:`` prefix are
    skipped. Only the first colon splits, so URIs such as ``file:///x`` stay
    intact in the path half.
    """
    entries: list[tuple[str, str]] = []
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        if not line.strip() or COMMENT_RE.match(line):
            continue
        name, sep, raw_path = line.partition(":")
        if not sep or not name:
            continue
        entries.append((name, raw_path))
    return entries
