# scout/models.py
# Shared types: Company record, funding-stage categories, research state.

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Dict, List, Optional, Tuple

# ----------------------------- Categories -----------------------------

CATEGORIES: List[Tuple[str, str]] = [
    ("seriesC",   "Series C"),
    ("seriesD",   "Series D"),
    ("seriesE",   "Series E"),
    ("lateStage", "Late Stage / Pre-IPO"),
]

CATEGORY_KEYS: List[str] = [k for k, _ in CATEGORIES]
SERIES_LABELS: Dict[str, str] = dict(CATEGORIES)

# Shorter names used in the "Series Category" CSV column
EXPORT_LABELS: Dict[str, str] = {
    "seriesC":   "Series C",
    "seriesD":   "Series D",
    "seriesE":   "Series E",
    "lateStage": "Late Stage",
}

H1B_LEVELS: Tuple[str, ...] = ("High", "Medium", "Low", "Unknown")

DEFAULT_ROLES: List[str] = ["Product Manager"]
DEFAULT_REASONING = "Matched search criteria"

# ------------------------------ Company -------------------------------

@dataclass
class Company:
    name: str
    series: str
    industry: str
    location: str              # role location, "City, ST" or "USA"
    h1b_likelihood: str        # one of H1B_LEVELS
    roles: List[str] = field(default_factory=lambda: list(DEFAULT_ROLES))
    website: str = ""
    description: str = ""
    reasoning: str = DEFAULT_REASONING

    def to_dict(self) -> dict:
        return asdict(self)

# --------------------------- Research state ---------------------------

def _empty_results() -> Dict[str, List[Company]]:
    return {k: [] for k in CATEGORY_KEYS}


@dataclass(frozen=True)
class ResearchState:
    """
    Snapshot of one research run.

    Every transition returns a new snapshot; readers holding an older one
    never see it change underneath them.
    """
    results: Dict[str, List[Company]] = field(default_factory=_empty_results)
    is_searching: bool = False
    current_stage: str = ""
    error: Optional[str] = None

    def companies(self, category: str) -> List[Company]:
        return list(self.results.get(category) or [])

    def all_companies(self) -> List[Company]:
        out: List[Company] = []
        for k in CATEGORY_KEYS:
            out.extend(self.results.get(k) or [])
        return out

    # ---- transitions ----

    def start(self, message: str) -> "ResearchState":
        return replace(self, results=_empty_results(), is_searching=True,
                       current_stage=message, error=None)

    def with_stage(self, message: str) -> "ResearchState":
        return replace(self, current_stage=message)

    def with_results(self, category: str, companies: List[Company]) -> "ResearchState":
        if category not in SERIES_LABELS:
            raise KeyError(f"Unknown category: {category}")
        results = dict(self.results)
        results[category] = list(companies)
        return replace(self, results=results)

    def with_error(self, message: str) -> "ResearchState":
        return replace(self, error=message)

    def finish(self, message: str) -> "ResearchState":
        return replace(self, is_searching=False, current_stage=message)
