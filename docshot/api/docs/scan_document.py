"""Read one document and classify the images it references."""

from pathlib import Path

from .categorize import classify
from .ClassifiedImage import ClassifiedImage
from .extract_image_references import extract_image_references


def scan_document(path: Path, source_document: str | None = None) -> list[ClassifiedImage]:
    """Classify every local image referenced by the document at ``path``.

    Read errors propagate.

    Args:
        path: Document to read (UTF-8)
        source_document: Identifier recorded on each reference, defaults to ``str(path)``
    """
    text = path.read_text(encoding="utf-8")
    return [classify(ref) for ref in extract_image_references(text, source_document or str(path))]
