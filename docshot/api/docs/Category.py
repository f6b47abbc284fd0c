"""Screenshot categories and the rules that assign them."""

import re
from enum import Enum


class Category(str, Enum):
    """UI surface a screenshot belongs to.

    Declaration order is evaluation order; ``UNCATEGORIZED`` is the catch-all.
    """

    PROCESS_MONITORING_UI = "process-monitoring-ui"
    TASK_MANAGEMENT_UI = "task-management-ui"
    ADMINISTRATION_UI = "administration-ui"
    LANDING_PAGE = "landing-page"
    DIAGRAM_MODELER = "diagram-modeler"
    UNCATEGORIZED = "uncategorized"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def heading(self) -> str:
        """Section heading used in the markdown plan."""
        return self.value.replace("-", " ").capitalize().replace(" ui", " UI")


_DESCRIPTIONS = {
    Category.PROCESS_MONITORING_UI: "Cockpit webapp screenshots",
    Category.TASK_MANAGEMENT_UI: "Tasklist webapp screenshots",
    Category.ADMINISTRATION_UI: "Admin webapp screenshots",
    Category.LANDING_PAGE: "Welcome page screenshots",
    Category.DIAGRAM_MODELER: "Modeler screenshots",
    Category.UNCATEGORIZED: "Other screenshots",
}


def _compile(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


# Ordered (category, patterns); first match wins. Overlaps between lists are
# resolved by this order only.
CATEGORY_RULES: tuple[tuple[Category, tuple[re.Pattern[str], ...]], ...] = (
    (
        Category.PROCESS_MONITORING_UI,
        _compile(r"cockpit", r"dashboard", r"process-", r"decision-", r"batch", r"migration", r"heatmap"),
    ),
    (Category.TASK_MANAGEMENT_UI, _compile(r"tasklist", r"task-", r"filter", r"form")),
    (Category.ADMINISTRATION_UI, _compile(r"admin-", r"user", r"group", r"tenant", r"authorization", r"system")),
    (Category.LANDING_PAGE, _compile(r"welcome", r"profile")),
    (Category.DIAGRAM_MODELER, _compile(r"modeler", r"diagram", r"bpmn-")),
    (Category.UNCATEGORIZED, ()),
)

# Names and terms from the legacy product's web apps
LEGACY_BRANDING_PATTERNS: tuple[re.Pattern[str], ...] = _compile(
    r"camunda",
    r"cockpit",
    r"tasklist",
    r"admin-",
    r"webapp",
    r"dashboard",
    r"process-definition",
    r"process-instance",
    r"decision-",
    r"task-",
    r"filter-",
    r"batch",
    r"migration",
    r"cleanup",
)
