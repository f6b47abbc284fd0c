"""Unit tests for docshot.api.docs.render_markdown."""

from datetime import datetime, timedelta, timezone

from docshot.api.docs import ReportAggregator, classify, extract_image_references, render_markdown

GENERATED_AT = datetime(2025, 3, 1, 12, 30, 45)


def _report(text: str, document: str = "a.md"):
    aggregator = ReportAggregator()
    aggregator.extend(classify(ref) for ref in extract_image_references(text, document))
    return aggregator.build()


def test_empty_report_renders_headers():
    md = render_markdown(ReportAggregator().build(), generated_at=GENERATED_AT)
    assert md.startswith("# Operaton Screenshot Replacement Plan\n")
    assert "Generated: 2025-03-01 12:30:45" in md
    assert "| Total screenshots | 0 |" in md
    assert "| Need replacement | 0 |" in md
    assert "## By Category" in md
    assert "## Replacement Plan" in md
    assert "###" not in md
    assert "## Next Steps" in md


def test_tables_and_sections():
    report = _report("![Dash](images/cockpit-dashboard.png)\n![Users](images/admin-users.png)\n![x](img/other.png)")
    md = render_markdown(report, generated_at=GENERATED_AT)
    assert "| Total screenshots | 3 |" in md
    assert "| Need replacement | 2 |" in md
    assert "| process-monitoring-ui | 1 | 1 |" in md
    assert "| administration-ui | 1 | 1 |" in md
    assert "| uncategorized | 1 | 0 |" in md
    assert "### Process monitoring UI (1)" in md
    assert "### Administration UI (1)" in md
    assert "### Uncategorized" not in md
    assert "- **cockpit-dashboard.png**" in md
    assert "  - Path: `images/cockpit-dashboard.png`" in md
    assert "  - Referenced in: 1 location(s)" in md
    assert "    - a.md:1" in md
    # Sections follow category order
    assert md.index("### Process monitoring UI") < md.index("### Administration UI")


def test_locations_are_capped():
    text = "\n".join("![d](img/cockpit.png)" for _ in range(5))
    md = render_markdown(_report(text), generated_at=GENERATED_AT)
    assert "  - Referenced in: 5 location(s)" in md
    assert "    - a.md:3" in md
    assert "    - a.md:4" not in md
    assert "    - ... and 2 more" in md


def test_entries_per_category_are_capped():
    text = "\n".join(f"![d](img/cockpit-{i:02d}.png)" for i in range(23))
    md = render_markdown(_report(text), generated_at=GENERATED_AT)
    assert "### Process monitoring UI (23)" in md
    assert "cockpit-19.png" in md
    assert "cockpit-20.png" not in md
    assert "... and 3 more process-monitoring-ui screenshots" in md


def test_caps_are_configurable():
    text = "\n".join(f"![d](img/cockpit-{i}.png)" for i in range(3)) + "\n![d](img/cockpit-0.png)"
    md = render_markdown(
        _report(text), generated_at=GENERATED_AT, max_entries_per_category=1, max_locations_per_entry=1
    )
    assert "- **cockpit-0.png**" in md
    assert "    - ... and 1 more" in md
    assert "... and 2 more process-monitoring-ui screenshots" in md


def test_aware_timestamp_shown_in_utc():
    cet = timezone(timedelta(hours=1))
    md = render_markdown(ReportAggregator().build(), generated_at=datetime(2025, 3, 1, 13, 30, 45, tzinfo=cet))
    assert "Generated: 2025-03-01 12:30:45 UTC" in md


def test_plan_ends_with_newline():
    md = render_markdown(ReportAggregator().build(), generated_at=GENERATED_AT)
    assert md.endswith("update any changed paths\n")
