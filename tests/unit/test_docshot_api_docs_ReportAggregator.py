"""Unit tests for docshot.api.docs.ReportAggregator."""

from docshot.api.docs import Category, ReportAggregator, classify, extract_image_references


def _aggregate(documents: dict[str, str]):
    aggregator = ReportAggregator()
    for name, text in documents.items():
        aggregator.extend(classify(ref) for ref in extract_image_references(text, name))
    return aggregator.build()


def test_empty_report():
    report = ReportAggregator().build()
    assert report.total == 0
    assert report.needs_replacement == 0
    assert report.by_category == {}
    assert report.replacement_plan == []
    assert report.to_dict() == {
        "summary": {"total": 0, "needs_replacement": 0, "by_category": {}},
        "by_category": {},
        "replacement_plan": [],
    }


def test_same_path_in_two_documents_gives_one_entry():
    report = _aggregate(
        {
            "a.md": "![Users](images/admin-users.png)",
            "b.md": "intro\n\n![Users](images/admin-users.png)",
        }
    )
    assert len(report.replacement_plan) == 1
    entry = report.replacement_plan[0]
    assert entry.image_path == "images/admin-users.png"
    assert entry.category is Category.ADMINISTRATION_UI
    assert [(loc.file, loc.line) for loc in entry.referenced_in] == [("a.md", 1), ("b.md", 3)]


def test_category_totals_add_up():
    report = _aggregate(
        {
            "a.md": "![a](images/cockpit-dashboard.png)\n![b](img/architecture.svg)\n![c](img/tasklist.png)",
            "b.md": '<img src="assets/welcome-banner.jpg">\n![d](images/admin-users.png)\n![e](img/batch.png)',
        }
    )
    assert report.total == 6
    assert sum(stats.total for stats in report.by_category.values()) == report.total
    assert sum(stats.needs_replacement for stats in report.by_category.values()) == report.needs_replacement
    for stats in report.by_category.values():
        assert stats.needs_replacement <= stats.total

    process = report.by_category[Category.PROCESS_MONITORING_UI]
    assert (process.total, process.needs_replacement) == (2, 2)
    landing = report.by_category[Category.LANDING_PAGE]
    assert (landing.total, landing.needs_replacement) == (1, 0)


def test_categories_follow_declaration_order():
    report = _aggregate({"a.md": "![x](img/other.png)\n![y](img/welcome.png)\n![z](img/cockpit.png)"})
    assert list(report.by_category) == [
        Category.PROCESS_MONITORING_UI,
        Category.LANDING_PAGE,
        Category.UNCATEGORIZED,
    ]
    assert list(report.images) == list(report.by_category)


def test_plan_keeps_first_appearance_order_and_skips_unflagged():
    report = _aggregate(
        {
            "a.md": "![z](img/tasklist-z.png)\n![w](img/welcome.png)\n![a](img/cockpit-a.png)\n![z](img/tasklist-z.png)",
        }
    )
    assert [entry.image_path for entry in report.replacement_plan] == ["img/tasklist-z.png", "img/cockpit-a.png"]
    assert len(report.replacement_plan[0].referenced_in) == 2


def test_to_dict_structure():
    report = _aggregate({"guide.md": "![Cockpit Dashboard](images/cockpit-dashboard.png)"})
    data = report.to_dict()
    assert data["summary"] == {
        "total": 1,
        "needs_replacement": 1,
        "by_category": {"process-monitoring-ui": {"total": 1, "needs_replacement": 1}},
    }
    assert data["by_category"]["process-monitoring-ui"][0]["path"] == "images/cockpit-dashboard.png"
    assert data["replacement_plan"] == [
        {
            "image_path": "images/cockpit-dashboard.png",
            "category": "process-monitoring-ui",
            "referenced_in": [{"file": "guide.md", "line": 1}],
        }
    ]


def test_entries_for():
    report = _aggregate({"a.md": "![a](img/cockpit.png)\n![b](images/admin-users.png)"})
    assert [e.image_path for e in report.entries_for(Category.ADMINISTRATION_UI)] == ["images/admin-users.png"]
    assert report.entries_for(Category.LANDING_PAGE) == []


def test_len_tracks_added_images():
    aggregator = ReportAggregator()
    assert len(aggregator) == 0
    for ref in extract_image_references("![a](a.png) ![b](b.png)", "a.md"):
        aggregator.add(classify(ref))
    assert len(aggregator) == 2
