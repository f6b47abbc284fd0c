"""Report model produced by the aggregator."""

from dataclasses import dataclass, field

from .Category import Category
from .ClassifiedImage import ClassifiedImage


@dataclass(frozen=True)
class Location:
    file: str
    line: int


@dataclass
class CategoryStats:
    total: int = 0
    needs_replacement: int = 0


@dataclass
class ReplacementPlanEntry:
    """A distinct flagged image path and every place it is referenced."""

    image_path: str
    category: Category
    referenced_in: list[Location] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "image_path": self.image_path,
            "category": self.category.value,
            "referenced_in": [{"file": loc.file, "line": loc.line} for loc in self.referenced_in],
        }


@dataclass
class Report:
    """Aggregated analysis of all scanned documents.

    ``by_category`` and ``images`` only hold categories that occur, in
    ``Category`` declaration order.
    """

    total: int
    needs_replacement: int
    by_category: dict[Category, CategoryStats]
    images: dict[Category, list[ClassifiedImage]]
    replacement_plan: list[ReplacementPlanEntry]

    def entries_for(self, category: Category) -> list[ReplacementPlanEntry]:
        return [entry for entry in self.replacement_plan if entry.category is category]

    def to_dict(self) -> dict:
        return {
            "summary": {
                "total": self.total,
                "needs_replacement": self.needs_replacement,
                "by_category": {
                    category.value: {"total": stats.total, "needs_replacement": stats.needs_replacement}
                    for category, stats in self.by_category.items()
                },
            },
            "by_category": {
                category.value: [image.to_dict() for image in images] for category, images in self.images.items()
            },
            "replacement_plan": [entry.to_dict() for entry in self.replacement_plan],
        }
