"""Category assignment and legacy-branding detection for image paths."""

from .Category import CATEGORY_RULES, LEGACY_BRANDING_PATTERNS, Category
from .ClassifiedImage import ClassifiedImage
from .ImageReference import ImageReference


def categorize(path: str) -> Category:
    """Return the first category with a pattern matching ``path``.

    Never fails: paths matching nothing fall into ``Category.UNCATEGORIZED``.
    """
    path_lower = path.lower()
    for category, patterns in CATEGORY_RULES:
        for pattern in patterns:
            if pattern.search(path_lower):
                return category
    return Category.UNCATEGORIZED


def needs_replacement(path: str) -> bool:
    """True if ``path`` looks like a screenshot of the legacy product's UI."""
    path_lower = path.lower()
    return any(pattern.search(path_lower) for pattern in LEGACY_BRANDING_PATTERNS)


def classify(reference: ImageReference) -> ClassifiedImage:
    return ClassifiedImage(
        reference=reference,
        category=categorize(reference.path),
        needs_replacement=needs_replacement(reference.path),
    )
