"""Mandatory scope items: Project Management and Testing/QA.

The system prompt already asks the generator for both items; this module is
the backstop that guarantees them on every returned list.

Category detection is a loose keyword heuristic (case-insensitive
substring match):
┌────────────────────┬──────────────────────┬──────────────────────┐
│ Category           │ workstream contains  │ customer story       │
├────────────────────┼──────────────────────┼──────────────────────┤
│ Project Management │ "project management" │ "project management" │
│ Testing            │ "testing" or "qa"    │ "testing"            │
└────────────────────┴──────────────────────┴──────────────────────┘
"""

import logging

from scope_engine.models import ScopeItem

logger = logging.getLogger(__name__)

PM_STORY_ID = "PM-001"
TESTING_STORY_ID = "TEST-001"

PM_KEYWORDS = ("project management",)
TESTING_WORKSTREAM_KEYWORDS = ("testing", "qa")
TESTING_STORY_KEYWORDS = ("testing",)


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    lowered = (text or "").lower()
    return any(keyword in lowered for keyword in keywords)


def is_project_management_item(item: ScopeItem) -> bool:
    return _contains_any(item.workstream, PM_KEYWORDS) or _contains_any(
        item.customer_story, PM_KEYWORDS
    )


def is_testing_item(item: ScopeItem) -> bool:
    return _contains_any(item.workstream, TESTING_WORKSTREAM_KEYWORDS) or _contains_any(
        item.customer_story, TESTING_STORY_KEYWORDS
    )


def project_management_item(order: int, hours: int = 20) -> ScopeItem:
    return ScopeItem(
        story_id=PM_STORY_ID,
        hours=hours,
        workstream="Project Management",
        customer_story=(
            "The client needs effective project management to ensure successful "
            "delivery and clear communication throughout the engagement"
        ),
        recommended_approach=(
            "• Weekly planning and status meetings\n"
            "• Regular client communication and updates\n"
            "• Sprint planning and retrospectives\n"
            "• Risk management and mitigation\n"
            "• Documentation and reporting"
        ),
        assumptions=(
            "• Weekly meetings with stakeholders\n"
            "• Standard agile methodology\n"
            "• Regular status updates required"
        ),
        order=order,
    )


def testing_item(order: int, hours: int = 30) -> ScopeItem:
    return ScopeItem(
        story_id=TESTING_STORY_ID,
        hours=hours,
        workstream="Testing & QA",
        customer_story=(
            "The client needs comprehensive testing to ensure the system works "
            "correctly and meets all requirements"
        ),
        recommended_approach=(
            "• Unit testing for critical components\n"
            "• Integration testing\n"
            "• User acceptance testing (UAT)\n"
            "• Bug fixes and refinement\n"
            "• Performance and security testing"
        ),
        assumptions=(
            "• Client will provide UAT feedback\n"
            "• Standard testing coverage expected\n"
            "• Bug fixes included in estimate"
        ),
        order=order,
    )


def ensure_mandatory_items(
    items: list[ScopeItem],
    pm_hours: int = 20,
    testing_hours: int = 30,
) -> list[ScopeItem]:
    """
    Append a Project Management and/or Testing item when missing.

    The two checks are independent, so a list gains zero, one or two items.
    Synthesized items are placed after the highest existing order (0 for an
    empty list). The input list is not mutated, and running this on an
    already compliant list returns an equal list.

    Args:
        items: Normalized scope items
        pm_hours: Hours for a synthesized Project Management item
        testing_hours: Hours for a synthesized Testing item

    Returns:
        New list satisfying both mandatory-category invariants
    """
    has_pm = any(is_project_management_item(item) for item in items)
    has_testing = any(is_testing_item(item) for item in items)

    result = list(items)
    next_order = max((item.order for item in items), default=-1) + 1

    if not has_pm:
        result.append(project_management_item(next_order, pm_hours))
        next_order += 1
        logger.info(f"[Enforcement] added {PM_STORY_ID} (order={next_order - 1})")

    if not has_testing:
        result.append(testing_item(next_order, testing_hours))
        logger.info(f"[Enforcement] added {TESTING_STORY_ID} (order={next_order})")

    return result
