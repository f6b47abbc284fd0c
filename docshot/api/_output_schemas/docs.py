"""Output schemas for docs commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class DocsAnalyzeOutput(BaseOutputSchema):
    """Output schema for docs analyze command."""

    root: str = Field(..., description="Scanned documentation root")
    documents_scanned: int = Field(..., description="Number of documents read")
    total: int = Field(..., description="Total image references found")
    needs_replacement: int = Field(..., description="References flagged for replacement")
    by_category: dict[str, dict[str, int]] = Field(
        ..., description="Per-category counts: {category: {total, needs_replacement}}"
    )
    unique_replacements: int = Field(..., description="Distinct image paths in the replacement plan")
    json_path: str = Field(..., description="Path of the written JSON report")
    markdown_path: str = Field(..., description="Path of the written markdown plan")


class DocsImagesOutput(BaseOutputSchema):
    """Output schema for docs images command."""

    path: str = Field(..., description="Inspected document")
    images: list[dict[str, Any]] = Field(..., description="Classified image references in document order")


schema_registry.register_output_schema("docs", "analyze", DocsAnalyzeOutput)
schema_registry.register_output_schema("docs", "images", DocsImagesOutput)
