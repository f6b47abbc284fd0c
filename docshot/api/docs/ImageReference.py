"""Image reference dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageReference:
    """An image embedded in a document."""

    alt_text: str
    path: str
    source_document: str
    line_number: int
    syntax: str  # "markdown" or "html"

    def to_dict(self) -> dict:
        return {
            "alt_text": self.alt_text,
            "path": self.path,
            "source_document": self.source_document,
            "line_number": self.line_number,
            "syntax": self.syntax,
        }
