"""
Unit tests for the sequential research coordinator.
"""

from unittest.mock import MagicMock

import pytest

from scout.llm_guard import MissingApiKeyError, SeriesFetchError
from scout.models import Company, ResearchState
from scout.research import COMPLETE, INITIATING, run_research


def make_company(name, series):
    return Company(name=name, series=series, industry="AI", location="New York, NY",
                   h1b_likelihood="High")


def _fetch_failing_on(failing_label):
    def fetch(label, api_key, regional_only):
        if label == failing_label:
            raise SeriesFetchError(label, "boom")
        return [make_company(f"{label} Co", label)]
    return fetch


def test_missing_key_does_not_touch_state_or_fetch(populated_state):
    fetch = MagicMock()
    on_update = MagicMock()

    with pytest.raises(MissingApiKeyError):
        run_research(None, fetch=fetch, on_update=on_update, state=populated_state)

    fetch.assert_not_called()
    on_update.assert_not_called()
    assert [c.name for c in populated_state.companies("seriesC")] == ["Acme", "Bolt"]


def test_missing_key_leaves_fresh_state_empty():
    state = ResearchState()
    fetch = MagicMock()

    with pytest.raises(MissingApiKeyError):
        run_research("", fetch=fetch, state=state)

    assert state.all_companies() == []
    fetch.assert_not_called()


def test_all_categories_succeed():
    state = run_research("sk-test", fetch=_fetch_failing_on(None))

    assert state.error is None
    assert state.is_searching is False
    assert state.current_stage == COMPLETE
    assert state.companies("seriesC")[0].name == "Series C Co"
    assert state.companies("lateStage")[0].name == "Late Stage / Pre-IPO Co"


def test_one_failing_category_does_not_block_the_others():
    state = run_research("sk-test", fetch=_fetch_failing_on("Series D"))

    assert "Series D" in state.error
    assert state.companies("seriesD") == []
    assert len(state.companies("seriesC")) == 1
    assert len(state.companies("seriesE")) == 1
    assert len(state.companies("lateStage")) == 1
    assert state.is_searching is False


def test_every_category_failing_still_completes():
    def fetch(label, api_key, regional_only):
        raise RuntimeError("down")

    state = run_research("sk-test", fetch=fetch)

    assert state.all_companies() == []
    assert state.is_searching is False
    assert state.current_stage == COMPLETE
    # last failure wins
    assert "Late Stage / Pre-IPO" in state.error


def test_categories_run_in_order_with_regional_flag():
    fetch = MagicMock(return_value=[])

    run_research("sk-test", regional_only=True, fetch=fetch)

    labels = [c.args[0] for c in fetch.call_args_list]
    assert labels == ["Series C", "Series D", "Series E", "Late Stage / Pre-IPO"]
    assert all(c.args[1:] == ("sk-test", True) for c in fetch.call_args_list)


def test_new_run_clears_previous_results_and_error(populated_state):
    stale = populated_state.with_error("old failure")

    state = run_research("sk-test", fetch=MagicMock(return_value=[]), state=stale)

    assert state.all_companies() == []
    assert state.error is None


def test_updates_are_published_per_category():
    snapshots = []

    run_research("sk-test", fetch=_fetch_failing_on(None), on_update=snapshots.append)

    assert snapshots[0].current_stage == INITIATING
    assert snapshots[0].is_searching is True
    assert snapshots[-1].is_searching is False
    # start + (stage + results) * 4 + finish
    assert len(snapshots) == 10
    # Series C results are visible before Series D is requested
    after_c = snapshots[2]
    assert len(after_c.companies("seriesC")) == 1
    assert after_c.companies("seriesD") == []
    assert snapshots[3].current_stage == "Scanning for 50+ Series D roles..."
