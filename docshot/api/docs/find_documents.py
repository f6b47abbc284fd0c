"""Enumerate documentation files under a root directory."""

from collections.abc import Iterable, Iterator
from pathlib import Path


def find_documents(
    root: Path,
    extensions: Iterable[str] = (".md", ".mdx"),
    exclude_dirnames: Iterable[str] = ("node_modules",),
) -> Iterator[Path]:
    """Yield document files below ``root`` in sorted order.

    Args:
        root: Directory to walk; a missing root yields nothing
        extensions: Lowercase suffixes to include
        exclude_dirnames: Directory names whose subtrees are skipped

    Yields:
        Matching file paths
    """
    if not root.is_dir():
        return

    wanted = {ext.lower() for ext in extensions}
    excluded = set(exclude_dirnames)
    matches = []
    for child in root.rglob("*"):
        if not child.is_file() or child.suffix.lower() not in wanted:
            continue
        if excluded.intersection(child.relative_to(root).parts[:-1]):
            continue
        matches.append(child)

    yield from sorted(matches)
