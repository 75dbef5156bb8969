"""
Shared fixtures for the scout test suite.

No test talks to the network: the OpenAI client and the per-category
fetch function are replaced with mocks.
"""

import pytest

from scout.models import Company, ResearchState


def make_company(**overrides):
    data = dict(
        name="Acme",
        series="Series C",
        industry="Fintech",
        location="New York, NY",
        h1b_likelihood="High",
        roles=["Product Manager"],
        website="https://acme.example",
        description="Payments infrastructure",
        reasoning="Raised $100M Series C",
    )
    data.update(overrides)
    return Company(**data)


@pytest.fixture
def company_factory():
    return make_company


@pytest.fixture
def populated_state():
    """State with one NY and one CA company in Series C, one PA company in Late Stage."""
    state = ResearchState()
    state = state.with_results("seriesC", [
        make_company(name="Acme", location="New York, NY"),
        make_company(name="Bolt", location="San Francisco, CA"),
    ])
    state = state.with_results("lateStage", [
        make_company(name="Crate", series="Series F", location="Philadelphia, PA"),
    ])
    return state
