"""Fix priority derived from the scored criteria."""

from typing import Iterable

from gym_audit.models import PRIORITY_HIGH, PRIORITY_LOW, PRIORITY_MEDIUM


def derive_fix_priority(criteria_passed: Iterable[bool], join_route_present: bool) -> str:
    """High when the join route is missing or two criteria fail.

    ``criteria_passed`` holds the verdicts of the facilities and imagery
    criteria only; the join route and description tone never add to the
    fail count.
    """
    fail_count = sum(1 for passed in criteria_passed if not passed)
    if not join_route_present or fail_count >= 2:
        return PRIORITY_HIGH
    if fail_count == 1:
        return PRIORITY_MEDIUM
    return PRIORITY_LOW
