"""Normalization helpers shared by the scoring and status rules.

The backend stores free text for identifiers, nationality, team size and
experience. These helpers turn that text into the canonical values the rules
compare against.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sized

# Experience bands offered by the profile form, mapped to a representative
# number of years.
EXPERIENCE_BAND_YEARS = {
    "0-1": 1,
    "2-3": 3,
    "4-6": 6,
    "7-10": 10,
    "10+": 11,
}

DEFAULT_TEAM_SIZE = "0-10"

_LEADING_INT_RE = re.compile(r"^\s*(\d+)")


def normalize_application_id(application_id: str | None) -> str:
    """Return the canonical key for an application id.

    Lookups and stores in the undo history always use this form, so
    ``"ABC "`` and ``"abc"`` refer to the same application.

    Args:
        application_id: Raw identifier as received from the backend or UI.

    Returns:
        The identifier trimmed and lower cased; empty string for ``None``.
    """
    if application_id is None:
        return ""
    return str(application_id).strip().lower()


def is_filled(value: object) -> bool:
    """Return True when a checklist value counts as completed.

    Strings count only when non-blank, sized collections only when non-empty,
    numbers only when non-zero, and ``None`` never.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return value != 0
    if isinstance(value, Sized):
        return len(value) > 0
    return True


def first_filled(*values: str | None) -> str:
    """Return the first non-blank value, stripped, or an empty string."""
    for value in values:
        if value is not None and value.strip():
            return value.strip()
    return ""


def is_emirati(nationality: str | None) -> bool:
    """Case-insensitive substring match of a nationality against "emirati"."""
    if not nationality:
        return False
    return "emirati" in nationality.lower()


def parse_team_size_lower_bound(team_size: str | None) -> int:
    """Parse the lower bound of a team-size bracket.

    Examples:
        "501-1000" → 501
        "1000+" → 1000
        "250" → 250
        "" → 0 (the default "0-10" bracket)

    Unparsable text yields 0.
    """
    text = (team_size or "").strip() or DEFAULT_TEAM_SIZE
    if "+" in text:
        text = text.replace("+", "")
    elif "-" in text:
        text = text.split("-", 1)[0]
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else 0


def years_from_experience_band(band: str | int | float | None) -> float:
    """Convert an experience band (or a plain number) into years."""
    if band is None:
        return 0
    if isinstance(band, int | float):
        return max(0, band)
    text = band.strip()
    if text in EXPERIENCE_BAND_YEARS:
        return EXPERIENCE_BAND_YEARS[text]
    try:
        return max(0.0, float(text))
    except ValueError:
        return 0


def matches_company(name: str | None, companies: Iterable[str]) -> bool:
    """Exact, case-insensitive match of a company name against a list."""
    candidate = (name or "").strip().lower()
    if not candidate:
        return False
    return any(candidate == company.strip().lower() for company in companies)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)
