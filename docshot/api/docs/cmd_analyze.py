"""Docs analyze API command.

CLI: docshot docs analyze [ROOT]
"""

import json
from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path

from ...utils.get_logger import get_logger
from .._output_schemas.docs import DocsAnalyzeOutput
from ..config.DocshotConfig import DocshotConfig
from ..StageResult import StageResult
from .find_documents import find_documents
from .render_markdown import render_markdown
from .ReportAggregator import ReportAggregator
from .scan_document import scan_document

JSON_REPORT_NAME = "screenshot-analysis.json"
MARKDOWN_REPORT_NAME = "REPLACEMENT_PLAN.md"


def cmd_analyze(root: str | None = None, output_dir: str | None = None) -> StageResult:
    """Scan documentation for image references and write the replacement plan.

    Args:
        root: Documentation root, defaults to ``docs.root`` from config
        output_dir: Report directory, defaults to ``docs.output_dir`` from config
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        logger = get_logger("docs.analyze")
        yield (0.05, "Loading configuration...")
        docs_cfg = DocshotConfig.load().docs
        docs_root = Path(root or docs_cfg.root).expanduser()
        out_dir = Path(output_dir or docs_cfg.output_dir).expanduser()
        warnings: list[str] = []

        if not docs_root.is_dir():
            warnings.append(f"Documentation root not found: {docs_root}")

        yield (0.1, f"Scanning {docs_root}...")
        documents = list(find_documents(docs_root, docs_cfg.extensions, docs_cfg.exclude_dirnames))
        yield (0.2, f"Found {len(documents)} markdown files")

        aggregator = ReportAggregator()
        for i, document in enumerate(documents):
            yield (0.2 + 0.6 * (i / len(documents)), f"Scanning {document.name}...")
            source = document.relative_to(docs_root).as_posix()
            aggregator.extend(scan_document(document, source))

        yield (0.8, f"Found {len(aggregator)} image references")
        report = aggregator.build()
        generated_at = datetime.now(timezone.utc)

        yield (0.85, f"Writing reports to {out_dir}...")
        out_dir.mkdir(parents=True, exist_ok=True)
        json_path = out_dir / JSON_REPORT_NAME
        markdown_path = out_dir / MARKDOWN_REPORT_NAME
        payload = {
            "generated_at": generated_at.isoformat(timespec="seconds"),
            "root": str(docs_root),
            **report.to_dict(),
        }
        json_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        markdown_path.write_text(
            render_markdown(
                report,
                generated_at=generated_at,
                max_entries_per_category=docs_cfg.max_entries_per_category,
                max_locations_per_entry=docs_cfg.max_locations_per_entry,
            ),
            encoding="utf-8",
        )
        logger.info(
            "Analyzed %d documents under %s: %d images, %d need replacement",
            len(documents),
            docs_root,
            report.total,
            report.needs_replacement,
        )

        for category, stats in report.by_category.items():
            yield (
                0.95,
                f"{category.value}: {stats.total} total, {stats.needs_replacement} need replacement",
            )

        yield (1.0, "Complete")
        result_obj.output = DocsAnalyzeOutput(
            warnings=warnings,
            root=str(docs_root),
            documents_scanned=len(documents),
            total=report.total,
            needs_replacement=report.needs_replacement,
            by_category=report.to_dict()["summary"]["by_category"],
            unique_replacements=len(report.replacement_plan),
            json_path=str(json_path),
            markdown_path=str(markdown_path),
        ).model_dump(mode="python")
        result_obj.result = (
            f"Found {report.total} image references, {report.needs_replacement} need replacement; "
            f"reports saved to {json_path} and {markdown_path}"
        )
        result_obj.success = True

    return StageResult(announce=f"Analyzing documentation in {root or 'configured root'}...", progress_callback=do_work)
