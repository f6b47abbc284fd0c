"""Image reference paired with its classification."""

from dataclasses import dataclass

from .Category import Category
from .ImageReference import ImageReference


@dataclass(frozen=True)
class ClassifiedImage:
    reference: ImageReference
    category: Category
    needs_replacement: bool

    def to_dict(self) -> dict:
        return {
            **self.reference.to_dict(),
            "category": self.category.value,
            "needs_replacement": self.needs_replacement,
        }
