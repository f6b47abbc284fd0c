"""Accumulates classified images across documents and builds the Report."""

from collections.abc import Iterable

from .Category import Category
from .ClassifiedImage import ClassifiedImage
from .Report import CategoryStats, Location, ReplacementPlanEntry, Report


class ReportAggregator:
    """Single-owner accumulator for one analysis run.

    Feed it with ``add``/``extend`` while walking documents, then call
    ``build``. Replacement plan entries keep the order in which their path
    was first seen.
    """

    def __init__(self) -> None:
        self._images: list[ClassifiedImage] = []

    def __len__(self) -> int:
        return len(self._images)

    def add(self, image: ClassifiedImage) -> None:
        self._images.append(image)

    def extend(self, images: Iterable[ClassifiedImage]) -> None:
        self._images.extend(images)

    def build(self) -> Report:
        grouped: dict[Category, list[ClassifiedImage]] = {}
        for image in self._images:
            grouped.setdefault(image.category, []).append(image)

        # Declaration order, not first-seen order
        images = {category: grouped[category] for category in Category if category in grouped}
        by_category = {
            category: CategoryStats(
                total=len(members),
                needs_replacement=sum(1 for member in members if member.needs_replacement),
            )
            for category, members in images.items()
        }

        plan: dict[str, ReplacementPlanEntry] = {}
        for image in self._images:
            if not image.needs_replacement:
                continue
            ref = image.reference
            entry = plan.get(ref.path)
            if entry is None:
                entry = plan[ref.path] = ReplacementPlanEntry(image_path=ref.path, category=image.category)
            entry.referenced_in.append(Location(file=ref.source_document, line=ref.line_number))

        return Report(
            total=len(self._images),
            needs_replacement=sum(1 for image in self._images if image.needs_replacement),
            by_category=by_category,
            images=images,
            replacement_plan=list(plan.values()),
        )
