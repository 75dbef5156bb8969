# scout/research.py
# Sequential sweep across the four funding categories.

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from scout.llm_guard import MissingApiKeyError, fetch_companies_for_series
from scout.models import CATEGORIES, Company, ResearchState

logger = logging.getLogger(__name__)

FetchFunc = Callable[[str, str, bool], List[Company]]
UpdateFunc = Callable[[ResearchState], None]

INITIATING = "Initiating deep-scan..."
COMPLETE = "Deep Research Complete!"


def scanning_message(label: str) -> str:
    return f"Scanning for 50+ {label} roles..."


def partial_failure_message(label: str) -> str:
    return f"Partial data failure for {label}. Results might be limited."


def run_research(
    api_key: Optional[str],
    regional_only: bool = False,
    *,
    fetch: FetchFunc = fetch_companies_for_series,
    on_update: Optional[UpdateFunc] = None,
    state: Optional[ResearchState] = None,
) -> ResearchState:
    """
    Run one full research cycle and return the final snapshot.

    Each transition is handed to on_update before the next request goes out,
    so the page can render results category by category. A failing category
    only sets `error`; the remaining categories still run.
    """
    if not api_key:
        raise MissingApiKeyError()

    state = state or ResearchState()

    def publish(new_state: ResearchState) -> ResearchState:
        if on_update is not None:
            on_update(new_state)
        return new_state

    state = publish(state.start(INITIATING))

    for key, label in CATEGORIES:
        state = publish(state.with_stage(scanning_message(label)))
        try:
            companies = fetch(label, api_key, regional_only)
        except Exception:
            logger.warning("Failed to fetch %s", key, exc_info=True)
            state = publish(state.with_error(partial_failure_message(label)))
            continue
        state = publish(state.with_results(key, companies))

    state = publish(state.finish(COMPLETE))
    logger.info("Research run finished: %d companies", len(state.all_companies()))
    return state
