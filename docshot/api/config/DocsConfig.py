"""Documentation analysis configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocsConfig(BaseModel):
    """Where to scan for documents and where to write reports."""

    model_config = ConfigDict(extra="forbid")

    root: str = Field("docs", description="Default documentation root to scan")
    output_dir: str = Field("output", description="Directory receiving the JSON report and markdown plan")
    extensions: list[str] = Field(default_factory=lambda: [".md", ".mdx"], description="Document file extensions")
    exclude_dirnames: list[str] = Field(
        default_factory=lambda: ["node_modules"], description="Directory names whose subtrees are skipped"
    )
    max_entries_per_category: int = Field(20, gt=0, description="Plan entries listed per category in markdown")
    max_locations_per_entry: int = Field(3, gt=0, description="Locations listed per plan entry in markdown")

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value]
