"""Documentation image reference analysis."""

from .categorize import categorize, classify, needs_replacement
from .Category import Category
from .ClassifiedImage import ClassifiedImage
from .extract_image_references import extract_image_references
from .find_documents import find_documents
from .ImageReference import ImageReference
from .render_markdown import render_markdown
from .Report import CategoryStats, Location, ReplacementPlanEntry, Report
from .ReportAggregator import ReportAggregator

__all__ = [
    "Category",
    "CategoryStats",
    "ClassifiedImage",
    "ImageReference",
    "Location",
    "ReplacementPlanEntry",
    "Report",
    "ReportAggregator",
    "categorize",
    "classify",
    "extract_image_references",
    "find_documents",
    "needs_replacement",
    "render_markdown",
]
