"""Unit tests for docshot.api.StageResult and output validation."""

from collections.abc import Iterator

import pytest

from docshot.api.docs.cmd_images import cmd_images
from docshot.api.StageResult import StageResult
from docshot.api.validate_output import validate_output


def test_stage_result_initialization():
    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")
        result.result = "Done"
        result.output = {"test": True}
        result.success = True

    result = StageResult(announce="Testing", progress_callback=progress_gen)
    assert result.announce == "Testing"
    assert result.result == ""
    assert result.output == {}
    assert result.success is False

    assert list(result.progress_callback(result)) == [(1.0, "Complete")]
    assert result.success is True


def test_validate_output_fills_defaults():
    output = validate_output(cmd_images, {"path": "a.md", "images": []})
    assert output == {"errors": [], "warnings": [], "path": "a.md", "images": []}


def test_validate_output_rejects_unknown_fields():
    with pytest.raises(ValueError, match="docs.images"):
        validate_output(cmd_images, {"path": "a.md", "images": [], "extra": 1})


def test_validate_output_skips_non_api_functions():
    def cmd_local():
        pass

    assert validate_output(cmd_local, {"anything": 1}) == {"anything": 1}
