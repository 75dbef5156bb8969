# scout/normalizer.py
# Tolerant decode: arbitrary parsed JSON -> well-formed Company records.
# Bad fields get defaults; a bad field never rejects the record or the batch.

from __future__ import annotations

from typing import Any, List

from scout.models import DEFAULT_REASONING, DEFAULT_ROLES, H1B_LEVELS, Company

_LEVELS_BY_LOWER = {lvl.lower(): lvl for lvl in H1B_LEVELS}


def _text(value: Any, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def _h1b(value: Any) -> str:
    if isinstance(value, str):
        return _LEVELS_BY_LOWER.get(value.strip().lower(), "Unknown")
    return "Unknown"


def _roles(value: Any) -> List[str]:
    if not isinstance(value, list):
        return list(DEFAULT_ROLES)
    roles = [r for r in value if isinstance(r, str) and r]
    return roles or list(DEFAULT_ROLES)


def normalize_company(item: Any, series_label: str) -> Company:
    if not isinstance(item, dict):
        item = {}
    return Company(
        name=_text(item.get("name"), "Unknown Company"),
        series=_text(item.get("series"), series_label),
        industry=_text(item.get("industry"), "Tech"),
        location=_text(item.get("location"), "USA"),
        h1b_likelihood=_h1b(item.get("h1b_likelihood")),
        roles=_roles(item.get("roles")),
        website=_text(item.get("website"), ""),
        description=_text(item.get("description"), ""),
        reasoning=_text(item.get("reasoning"), DEFAULT_REASONING),
    )


def normalize_companies(data: Any, series_label: str) -> List[Company]:
    """Returns [] for anything that is not a list."""
    if not isinstance(data, list):
        return []
    return [normalize_company(item, series_label) for item in data]


def unwrap_payload(data: Any) -> Any:
    # Accept the {"companies": [...]} envelope as well as a bare array
    if isinstance(data, dict) and "companies" in data:
        return data["companies"]
    return data
