"""Docs images API command."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.docs import DocsImagesOutput
from ..StageResult import StageResult
from .scan_document import scan_document


def cmd_images(path: str) -> StageResult:
    """List and classify the image references of a single document."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Resolving path...")
        file_path = Path(path).expanduser()

        if not file_path.is_file():
            result_obj.output = DocsImagesOutput(
                errors=["File does not exist"],
                path=str(file_path),
                images=[],
            ).model_dump(mode="python")
            result_obj.result = f"File not found: {path}"
            result_obj.success = False
            return

        yield (0.5, "Scanning for images...")
        images = scan_document(file_path, path)
        flagged = sum(1 for image in images if image.needs_replacement)

        yield (1.0, "Complete")
        result_obj.output = DocsImagesOutput(
            path=str(file_path),
            images=[image.to_dict() for image in images],
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(images)} images in {file_path.name}, {flagged} need replacement"
        result_obj.success = True

    return StageResult(announce=f"Checking images in {path}...", progress_callback=do_work)
