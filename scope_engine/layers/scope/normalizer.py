"""Response normalization: raw generator text to validated scope items.

Processing steps:
1. Strip Markdown code fences (```json / ```) and surrounding whitespace
2. Parse as JSON; anything other than an array is a hard failure
3. Coerce every element field by field (the generator's types are never trusted)
4. Enforce the mandatory Project Management / Testing items

Coercion defaults:
┌─────────────────────┬──────────────────────────────────────────────────┐
│ Field               │ When missing or unusable                         │
├─────────────────────┼──────────────────────────────────────────────────┤
│ storyId             │ ITEM-<1-based index>                             │
│ hours               │ 5 (numbers are rounded to a multiple of 5, ≥ 5)  │
│ workstream          │ "General"                                        │
│ customerStory       │ ""                                               │
│ recommendedApproach │ ""                                               │
│ assumptions         │ ""                                               │
│ order               │ array index                                      │
└─────────────────────┴──────────────────────────────────────────────────┘

There is no partial success: any failure raises a single ScopeParseError.
"""

import json
import logging
import math
import re
from typing import Any, Optional

from scope_engine.exceptions import ScopeParseError
from scope_engine.models import ScopeItem

from .enforcement import ensure_mandatory_items
from .prompts import BULLET

logger = logging.getLogger(__name__)

GENERATE_FAILURE_MESSAGE = "Failed to parse AI-generated scope. Please try again."
REFINE_FAILURE_MESSAGE = "Failed to parse AI-refined scope. Please try again."

HOURS_STEP = 5
MIN_HOURS = 5
DEFAULT_HOURS = 5
DEFAULT_WORKSTREAM = "General"

_FENCE_PATTERN = re.compile(r"```(?:json)?\n?", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    """Remove Markdown code-fence markers and trim whitespace."""
    return _FENCE_PATTERN.sub("", text or "").strip()


def _is_number(value: Any) -> bool:
    """JSON number check; bool is an int subclass but not a number here.

    Integers too large for a float count as non-numbers.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def round_to_multiple_of_5(hours: float) -> int:
    """
    Round to the nearest multiple of 5, halves rounding up, floored at 5.

    Examples: 3 → 5, 7 → 5, 7.5 → 10, 8 → 10, 22 → 20, 22.5 → 25, -4 → 5
    """
    rounded = math.floor(hours / HOURS_STEP + 0.5) * HOURS_STEP
    return max(MIN_HOURS, int(rounded))


def _field(raw: dict, camel: str, snake: str) -> Any:
    value = raw.get(camel)
    if value is None:
        value = raw.get(snake)
    return value


def _coerce_text(value: Any) -> str:
    """Text field; a list of lines is joined into bullet lines."""
    if not value:
        return ""
    if isinstance(value, list):
        lines = [str(line).strip() for line in value if str(line).strip()]
        return "\n".join(
            line if line.startswith(BULLET.strip()) else f"{BULLET}{line}"
            for line in lines
        )
    return str(value)


def coerce_scope_item(raw: Any, index: int) -> ScopeItem:
    """
    Map one untyped array element onto a ScopeItem.

    Args:
        raw: Parsed JSON element
        index: 0-based position in the array

    Raises:
        ValueError: element is not a JSON object
    """
    if not isinstance(raw, dict):
        raise ValueError(f"scope item {index} is not an object: {type(raw).__name__}")

    story_id = _field(raw, "storyId", "story_id")
    hours = raw.get("hours")
    workstream = raw.get("workstream")
    order = raw.get("order")

    return ScopeItem(
        story_id=str(story_id) if story_id else f"ITEM-{index + 1}",
        hours=round_to_multiple_of_5(hours if _is_number(hours) else DEFAULT_HOURS),
        workstream=str(workstream) if workstream else DEFAULT_WORKSTREAM,
        customer_story=_coerce_text(_field(raw, "customerStory", "customer_story")),
        recommended_approach=_coerce_text(_field(raw, "recommendedApproach", "recommended_approach")),
        assumptions=_coerce_text(raw.get("assumptions")),
        order=int(order) if _is_number(order) else index,
    )


class ScopeNormalizer:
    """
    Converts raw generator text into an invariant-satisfying scope list.

    Attributes:
        pm_hours: Hours for a synthesized Project Management item
        testing_hours: Hours for a synthesized Testing item
    """

    def __init__(self, pm_hours: int = 20, testing_hours: int = 30):
        self.pm_hours = round_to_multiple_of_5(pm_hours)
        self.testing_hours = round_to_multiple_of_5(testing_hours)

    def parse(self, raw_text: str) -> list[ScopeItem]:
        """
        Parse and coerce without enforcement.

        Raises:
            ValueError: text is not a JSON array or an element is malformed
        """
        cleaned = strip_code_fences(raw_text)
        data = json.loads(cleaned)
        if not isinstance(data, list):
            raise ValueError(f"response is not an array: {type(data).__name__}")
        return [coerce_scope_item(raw, index) for index, raw in enumerate(data)]

    def normalize(
        self,
        raw_text: str,
        failure_message: str = GENERATE_FAILURE_MESSAGE,
    ) -> list[ScopeItem]:
        """
        Parse, coerce and enforce mandatory items.

        Args:
            raw_text: Raw completion text
            failure_message: User-facing message for ScopeParseError

        Returns:
            Fully normalized scope list

        Raises:
            ScopeParseError: the text could not be turned into scope items.
                The raw text is logged here and never attached to the error.
        """
        try:
            items = self.parse(raw_text)
        except (ValueError, TypeError, OverflowError, RecursionError) as e:
            logger.error(f"[Normalizer] failed to parse AI response: {e}")
            logger.error(f"[Normalizer] raw response: {raw_text!r}")
            raise ScopeParseError(
                failure_message,
                details={"reason": type(e).__name__},
            ) from e

        logger.info(f"[Normalizer] parsed {len(items)} scope items")
        return ensure_mandatory_items(
            items,
            pm_hours=self.pm_hours,
            testing_hours=self.testing_hours,
        )


def parse_json_object(raw_text: str) -> Optional[dict]:
    """Fence-stripped JSON object, or None when the text is not one."""
    try:
        data = json.loads(strip_code_fences(raw_text))
    except (ValueError, RecursionError):
        return None
    return data if isinstance(data, dict) else None
