# streamlit_app.py
# H1B Product Scout
# Search-grounded scan of Series C / D / E / Late Stage startups hiring product roles,
# one tab per funding stage, CSV export (global or NY/PA/NJ/DE roles only).

import streamlit as st
import pandas as pd

from scout.config import configure_logging, get_api_key
from scout.llm_guard import MissingApiKeyError
from scout.models import CATEGORIES, ResearchState
from scout.research import run_research
from scout.views import (
    CSV_MIME,
    active_companies,
    category_counts,
    empty_tab_message,
    export_filename,
    results_summary,
    show_results,
    table_rows,
    to_csv,
)

configure_logging()

# ---------------------------
# Streamlit config + layout
# ---------------------------
st.set_page_config(page_title="H1B Product Scout", page_icon="🧭", layout="wide")
st.title("H1B Product Scout")
st.caption("High-volume deep research · Series C, D, E and Late Stage startups with active product teams")
st.caption(f"OpenAI key loaded: {'yes' if get_api_key() else 'no'}")

# ---------------------------
# Session state
# ---------------------------
for key, default in [
    ("research", ResearchState()),
    ("regional_only", False),
    ("_busy", False),
]:
    if key not in st.session_state:
        st.session_state[key] = default

busy = st.session_state._busy

# ---------------------------
# Controls
# ---------------------------
c1, c2, c3 = st.columns([2, 2, 2])
regional_only = c1.toggle("NY, PA, NJ, DE Roles", key="regional_only", disabled=busy)
start = c2.button(
    "Deep Scouting..." if busy else "Start Deep Research",
    disabled=busy,
    type="primary",
    use_container_width=True,
)

state: ResearchState = st.session_state.research
csv_text = to_csv(state, regional_only)
c3.download_button(
    "Export CSV",
    csv_text or "",
    file_name=export_filename(regional_only),
    mime=CSV_MIME,
    disabled=csv_text is None or busy,
    use_container_width=True,
)

if start:
    if not get_api_key():
        st.warning("API Key is missing. Please check your configuration.")
    else:
        st.session_state._busy = True
        st.rerun()

# ---------------------------
# Results (drawn into a slot so a running sweep can redraw it per category)
# ---------------------------
def _render_results(snapshot: ResearchState):
    if snapshot.is_searching:
        st.info(f"⏳ {snapshot.current_stage}")
    elif snapshot.current_stage:
        st.caption(snapshot.current_stage)

    if snapshot.error:
        st.error(f"⚠️ {snapshot.error}")

    if not show_results(snapshot, regional_only):
        st.subheader("High-Volume H1B Scouting")
        st.write(
            "Aggregating 50+ companies per funding series. Targeting Series C, D, E, and Late Stage "
            "startups with active product teams."
        )
        if regional_only:
            st.info("Scanning strictly for roles based in the NY/PA/NJ/DE area.")
        return

    st.caption(results_summary(snapshot, regional_only))
    counts = category_counts(snapshot, regional_only)
    tabs = st.tabs([f"{label} ({counts[key]})" for key, label in CATEGORIES])
    for tab, (key, label) in zip(tabs, CATEGORIES):
        with tab:
            companies = active_companies(snapshot, key, regional_only)
            if not companies:
                st.caption(empty_tab_message(snapshot, label))
                continue
            st.markdown(f"#### {label} ({len(companies)} companies)")
            st.dataframe(
                pd.DataFrame(table_rows(companies)),
                use_container_width=True,
                hide_index=True,
                column_config={
                    "Website": st.column_config.LinkColumn("Website", display_text="Visit Website"),
                },
            )


results_slot = st.empty()

# ---------------------------
# Research run (blocks this script run; each snapshot is rendered as it lands)
# ---------------------------
if busy:
    def _on_update(snapshot: ResearchState):
        st.session_state.research = snapshot
        with results_slot.container():
            _render_results(snapshot)

    try:
        run_research(get_api_key(), regional_only, on_update=_on_update)
    except MissingApiKeyError as e:
        st.warning(str(e))
    finally:
        st.session_state._busy = False
    st.rerun()

with results_slot.container():
    _render_results(state)
