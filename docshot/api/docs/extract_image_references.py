"""Extract embedded image references from document text."""

import re

from ._ExtractionRule import _ExtractionRule
from .ImageReference import ImageReference

IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp"})
EXTERNAL_PREFIXES = ("http://", "https://")

# ![alt](path)
MARKDOWN_IMAGE_RULE = _ExtractionRule(
    syntax="markdown",
    pattern=re.compile(r"!\[([^\]]*)\]\(([^)]+)\)"),
    path_group=2,
    alt_group=1,
    extensions=IMAGE_EXTENSIONS,
)

# <img ... src="path" ...>
HTML_IMAGE_RULE = _ExtractionRule(
    syntax="html",
    pattern=re.compile(r"<img[^>]+src=[\"']([^\"']+)[\"'][^>]*>"),
    path_group=1,
)

EXTRACTION_RULES = (MARKDOWN_IMAGE_RULE, HTML_IMAGE_RULE)


def is_external(path: str) -> bool:
    return path.startswith(EXTERNAL_PREFIXES)


def extract_image_references(
    text: str,
    source_document: str,
    rules: tuple[_ExtractionRule, ...] = EXTRACTION_RULES,
) -> list[ImageReference]:
    """Find local image references in ``text``.

    External (http/https) paths are dropped for every rule; each rule's own
    extension filter is applied on top. References are returned in document
    order.

    Args:
        text: Document content
        source_document: Identifier recorded on each reference
        rules: Extraction rules to apply

    Returns:
        References sorted by their offset in ``text``
    """
    found: list[tuple[int, ImageReference]] = []
    for rule in rules:
        for offset, alt, path in rule.matches(text):
            if is_external(path) or not rule.accepts(path):
                continue
            found.append(
                (
                    offset,
                    ImageReference(
                        alt_text=alt,
                        path=path,
                        source_document=source_document,
                        line_number=text.count("\n", 0, offset) + 1,
                        syntax=rule.syntax,
                    ),
                )
            )

    found.sort(key=lambda item: item[0])
    return [ref for _, ref in found]
