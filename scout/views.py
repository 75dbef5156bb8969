# scout/views.py
# Derived views over ResearchState: regional filter, counts, table rows, CSV.

from __future__ import annotations

import csv
from typing import Dict, Iterable, List, Optional

import pandas as pd

from scout.models import CATEGORIES, CATEGORY_KEYS, EXPORT_LABELS, Company, ResearchState

REGIONAL_STATES = ["NY", "NEW YORK", "PA", "PENNSYLVANIA", "NJ", "NEW JERSEY", "DE", "DELAWARE"]
REGION_LABEL = "NY/PA/NJ/DE"

CSV_HEADERS = [
    "Company Name", "Series Category", "Specific Series", "Industry",
    "Role Location", "H1B Likelihood", "Roles", "Website", "Reasoning",
]
CSV_MIME = "text/csv"

H1B_BADGES = {
    "High":    "🟢 High",
    "Medium":  "🟡 Medium",
    "Low":     "🔴 Low",
    "Unknown": "⚪ Unknown",
}

MAX_ROLES_SHOWN = 3

# ----------------------------- Filtering ------------------------------

def is_regional(company: Company) -> bool:
    # Substring match on purpose: "Delaware County, OH" passes too
    loc = (company.location or "").upper()
    return any(s in loc for s in REGIONAL_STATES)


def filter_regional(companies: Iterable[Company], regional_only: bool) -> List[Company]:
    companies = list(companies)
    if not regional_only:
        return companies
    return [c for c in companies if is_regional(c)]


def active_companies(state: ResearchState, category: str, regional_only: bool) -> List[Company]:
    return filter_regional(state.companies(category), regional_only)


def total_count(state: ResearchState, regional_only: bool) -> int:
    return len(filter_regional(state.all_companies(), regional_only))


def category_counts(state: ResearchState, regional_only: bool) -> Dict[str, int]:
    return {k: len(active_companies(state, k, regional_only)) for k in CATEGORY_KEYS}

# ------------------------------ Display -------------------------------

def show_results(state: ResearchState, regional_only: bool) -> bool:
    # Tabs stay up for the whole run so each category fills in as it lands
    return state.is_searching or total_count(state, regional_only) > 0


def results_summary(state: ResearchState, regional_only: bool) -> str:
    parts = [f"Total Found: {total_count(state, regional_only)}"]
    if regional_only:
        parts.append(f"Target Area: {REGION_LABEL}")
    return " · ".join(parts)


def empty_tab_message(state: ResearchState, label: str) -> str:
    if state.is_searching:
        return f"⏳ Searching the web for {label} companies, role locations and H1B history..."
    return f"No companies found yet for {label}. Start the research to populate this list."


def h1b_badge(level: str) -> str:
    return H1B_BADGES.get(level, H1B_BADGES["Unknown"])


def _roles_summary(roles: List[str]) -> str:
    shown = ", ".join(roles[:MAX_ROLES_SHOWN])
    extra = len(roles) - MAX_ROLES_SHOWN
    return f"{shown} +{extra} more" if extra > 0 else shown


def table_rows(companies: Iterable[Company]) -> List[dict]:
    rows = []
    for c in companies:
        rows.append({
            "Company": c.name,
            "Location": c.location,
            "Website": c.website or None,
            "Industry": c.industry,
            "H1B Potential": h1b_badge(c.h1b_likelihood),
            "Funding": c.series,
            "Why listed": c.reasoning,
            "Relevant Roles": _roles_summary(c.roles),
        })
    return rows

# ------------------------------- Export -------------------------------

def export_rows(state: ResearchState, regional_only: bool) -> List[dict]:
    rows = []
    for key, _ in CATEGORIES:
        for c in state.companies(key):
            if regional_only and not is_regional(c):
                continue
            rows.append({
                "Company Name": c.name,
                "Series Category": EXPORT_LABELS[key],
                "Specific Series": c.series,
                "Industry": c.industry,
                "Role Location": c.location,
                "H1B Likelihood": c.h1b_likelihood,
                "Roles": "; ".join(c.roles),
                "Website": c.website,
                "Reasoning": c.reasoning,
            })
    return rows


def to_csv(state: ResearchState, regional_only: bool) -> Optional[str]:
    """CSV text for every (filtered) company, or None when there is nothing to export."""
    rows = export_rows(state, regional_only)
    if not rows:
        return None
    df = pd.DataFrame(rows, columns=CSV_HEADERS)
    # Plain header line; QUOTE_ALL wraps every data field and doubles embedded quotes
    body = df.to_csv(index=False, header=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
    return ",".join(CSV_HEADERS) + "\n" + body


def export_filename(regional_only: bool) -> str:
    scope = "regional" if regional_only else "global"
    return f"h1b_product_roles_deep_research_{scope}.csv"
