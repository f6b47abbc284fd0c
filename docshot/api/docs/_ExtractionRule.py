"""Pattern-based extraction rule for one image syntax."""

import posixpath
import re
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class _ExtractionRule:
    """One syntactic form of an embedded image.

    Attributes:
        syntax: Name recorded on each reference ("markdown", "html")
        pattern: Compiled pattern scanned over the whole document
        path_group: Group holding the image path
        alt_group: Group holding the alt text, or None when the form has none
        extensions: Accepted path extensions (lowercase), or None for no filter
    """

    syntax: str
    pattern: re.Pattern[str]
    path_group: int
    alt_group: int | None = None
    extensions: frozenset[str] | None = None

    def accepts(self, path: str) -> bool:
        if self.extensions is None:
            return True
        return posixpath.splitext(path)[1].lower() in self.extensions

    def matches(self, text: str) -> Iterator[tuple[int, str, str]]:
        """Yield ``(offset, alt_text, path)`` for every match, unfiltered."""
        for match in self.pattern.finditer(text):
            alt = match.group(self.alt_group) if self.alt_group is not None else ""
            yield match.start(), alt, match.group(self.path_group)
