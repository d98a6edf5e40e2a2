"""Profile Match Filter — selects profiles that satisfy search criteria and a text query.

Invariants:
    - Pure function: no IO, no async, no DB, never raises on well-formed snapshots
    - Every check is an AND; an unset (None) criterion always passes
    - Boolean criteria are "must not have X": only an explicit False excludes, and
      only profiles whose field is True
    - Enum criteria compare only when both criterion and profile value are present
    - Threshold = (minimum or -10) + 10; profiles strictly below it are excluded
    - Query matches case-insensitively against user name, user email, or school;
      a missing name/email compares as ""
    - Output keeps input order (stable filter, never a sort)

Design Decisions:
    - The -10/+10 offset is kept verbatim: an unset minimum maps to threshold 0,
      while a caller-supplied 0 maps to threshold 10
"""

from collections.abc import Iterable
from enum import Enum

from roommates.core.snapshots import FilterCriteria, ProfileSnapshot

_BOOLEAN_EXCLUSIONS = ("alcohol", "committed", "drugs", "snore")
_ENUM_EQUALITIES = (
    "assigned_sex", "day_volume", "night_volume", "school", "status",
)
# criterion field -> profile field
_THRESHOLDS = {
    "minimum_neatness": "neatness",
    "minimum_social_energy_level": "social_energy_level",
}
_THRESHOLD_OFFSET = 10


def threshold_for(minimum: int | None) -> int:
    """Map a (possibly unset) minimum to the inclusive threshold it denotes."""
    return (minimum if minimum is not None else -_THRESHOLD_OFFSET) + _THRESHOLD_OFFSET


def passes_boolean_exclusions(profile: ProfileSnapshot, criteria: FilterCriteria) -> bool:
    for name in _BOOLEAN_EXCLUSIONS:
        wanted = getattr(criteria, name)
        if wanted is False and getattr(profile, name):
            return False
    return True


def passes_enum_filters(profile: ProfileSnapshot, criteria: FilterCriteria) -> bool:
    for name in _ENUM_EQUALITIES:
        wanted = getattr(criteria, name)
        actual = getattr(profile, name)
        if wanted and actual and wanted != actual:
            return False
    return True


def passes_thresholds(profile: ProfileSnapshot, criteria: FilterCriteria) -> bool:
    for criterion_name, profile_name in _THRESHOLDS.items():
        threshold = threshold_for(getattr(criteria, criterion_name))
        if getattr(profile, profile_name) < threshold:
            return False
    return True


def _as_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def matches_query(profile: ProfileSnapshot, query: str) -> bool:
    """Case-insensitive substring match on user name, user email, or school."""
    if not query:
        return True
    needle = query.lower()
    haystacks = (
        _as_text(profile.user.name),
        _as_text(profile.user.email),
        _as_text(profile.school),
    )
    return any(needle in h.lower() for h in haystacks)


def matches_profile(
    profile: ProfileSnapshot, query: str, criteria: FilterCriteria,
) -> bool:
    """Chain every check. Cheapest structured checks run before the text match."""
    return (
        passes_boolean_exclusions(profile, criteria)
        and passes_enum_filters(profile, criteria)
        and passes_thresholds(profile, criteria)
        and matches_query(profile, query)
    )


def filter_profiles(
    profiles: Iterable[ProfileSnapshot],
    query: str = "",
    criteria: FilterCriteria | None = None,
) -> list[ProfileSnapshot]:
    """Return the profiles satisfying every criterion and the query, in input order."""
    criteria = criteria or FilterCriteria()
    query = query or ""
    return [p for p in profiles if matches_profile(p, query, criteria)]
