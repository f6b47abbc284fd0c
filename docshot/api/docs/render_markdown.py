"""Render a Report as the human-readable replacement plan."""

import posixpath
from datetime import datetime, timezone
from typing import Any

from ...templating import render_template
from .Category import Category
from .Report import Report

PLAN_TEMPLATE = """\
# Operaton Screenshot Replacement Plan

Generated: {{ generated_at }}

## Summary

| Metric | Count |
|--------|-------|
| Total screenshots | {{ total }} |
| Need replacement | {{ needs_replacement }} |

## By Category

| Category | Total | Need Replacement |
|----------|-------|------------------|
{% for name, stats in by_category %}
| {{ name }} | {{ stats.total }} | {{ stats.needs_replacement }} |
{% endfor %}

## Replacement Plan

Screenshots that need to be replaced with Operaton equivalents:

{% for section in sections %}
### {{ section.heading }} ({{ section.count }})

{% for entry in section.entries %}
- **{{ entry.name }}**
  - Path: `{{ entry.image_path }}`
  - Referenced in: {{ entry.reference_count }} location(s)
{% for location in entry.locations %}
    - {{ location }}
{% endfor %}
{% if entry.more_locations %}
    - ... and {{ entry.more_locations }} more
{% endif %}

{% endfor %}
{% if section.more %}
... and {{ section.more }} more {{ section.name }} screenshots

{% endif %}
{% endfor %}
## Next Steps

1. Check the engine is reachable: `docshot engine check`
2. Capture the screenshots listed above against a populated Operaton instance
3. Copy the new screenshots into the documentation and update any changed paths
"""


def _sections(report: Report, max_entries: int, max_locations: int) -> list[dict[str, Any]]:
    sections = []
    for category in Category:
        entries = report.entries_for(category)
        if not entries:
            continue
        shown = []
        for entry in entries[:max_entries]:
            shown.append(
                {
                    "name": posixpath.basename(entry.image_path),
                    "image_path": entry.image_path,
                    "reference_count": len(entry.referenced_in),
                    "locations": [f"{loc.file}:{loc.line}" for loc in entry.referenced_in[:max_locations]],
                    "more_locations": max(len(entry.referenced_in) - max_locations, 0),
                }
            )
        sections.append(
            {
                "name": category.value,
                "heading": category.heading,
                "count": len(entries),
                "entries": shown,
                "more": max(len(entries) - max_entries, 0),
            }
        )
    return sections


def render_markdown(
    report: Report,
    generated_at: datetime | None = None,
    max_entries_per_category: int = 20,
    max_locations_per_entry: int = 3,
) -> str:
    """Render the replacement plan markdown for ``report``.

    Args:
        report: Aggregated report
        generated_at: Timestamp shown in the header (defaults to now). Aware
            values are shown in UTC, naive ones as given
        max_entries_per_category: Plan entries listed per category section
        max_locations_per_entry: Locations listed per entry
    """
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)
    stamp = generated_at.strftime("%Y-%m-%d %H:%M:%S")
    if generated_at.tzinfo is not None:
        stamp = generated_at.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
    return render_template(
        PLAN_TEMPLATE,
        {
            "generated_at": stamp,
            "total": report.total,
            "needs_replacement": report.needs_replacement,
            "by_category": [(category.value, stats) for category, stats in report.by_category.items()],
            "sections": _sections(report, max_entries_per_category, max_locations_per_entry),
        },
    )
