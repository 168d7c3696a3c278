"""Streamlit UI for the AI Job Scanner."""
from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from jobscan.config import PipelineConfig, load_criteria, save_criteria
from jobscan.log import get_logger
from jobscan.models import JobListing, JobType, SearchCriteria
from jobscan.scan import ScanOutcome
from jobscan.session import ScanSession

log = get_logger(__name__)

_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: linear-gradient(135deg, #eff6ff 0%, #e0e7ff 100%);
}
[data-testid="stSidebar"] {
    background: rgba(255,255,255,0.55);
    backdrop-filter: blur(16px);
    -webkit-backdrop-filter: blur(16px);
}
.block-container {
    padding-top: 2rem;
}
/* job card */
[data-testid="stVerticalBlockBorderWrapper"] {
    background: rgba(255,255,255,0.75);
    border-radius: 12px;
    box-shadow: 0 4px 16px rgba(0,0,0,0.06);
}
</style>
"""

# ── Helpers ──────────────────────────────────────────────────────────────


def _session() -> ScanSession:
    if "scan_session" not in st.session_state:
        st.session_state["scan_session"] = ScanSession()
    return st.session_state["scan_session"]


def _criteria() -> SearchCriteria:
    if "criteria" not in st.session_state:
        try:
            st.session_state["criteria"] = load_criteria()
        except ValueError as exc:
            st.error(f"Saved criteria are invalid: {exc}")
            st.session_state["criteria"] = SearchCriteria.build(location="")
    return st.session_state["criteria"]


def _render_insights(outcome: ScanOutcome) -> None:
    report = outcome.insights
    if report is None and not outcome.insights_text:
        return
    st.subheader("AI Insights")
    if report is None:
        st.markdown(outcome.insights_text)
        return
    if report.analysis:
        st.markdown(f"**Analysis:** {report.analysis}")
    if report.suggestions:
        st.markdown(f"**Suggestions:** {report.suggestions}")
    if report.keywords_to_add:
        st.markdown("**Keywords to add:** " + " ".join(f"`{kw}`" for kw in report.keywords_to_add))
    if report.keywords_to_remove:
        st.markdown("**Keywords to remove:** " + " ".join(f"`{kw}`" for kw in report.keywords_to_remove))


def _render_job(job: JobListing, session: ScanSession) -> None:
    with st.container(border=True):
        head, like, dislike = st.columns([8, 1, 1])
        with head:
            st.markdown(f"### {job.title}")
            if job.company_actionable:
                st.markdown(f"[{job.company}]({job.company_url})")
            else:
                st.markdown(f"**{job.company}**")
        current = session.feedback.get(job.id)
        like.button(
            "👍",
            key=f"pos-{job.id}",
            type="primary" if current == "positive" else "secondary",
            help="Like this job",
            on_click=session.toggle_feedback,
            args=(job.id, "positive"),
        )
        dislike.button(
            "👎",
            key=f"neg-{job.id}",
            type="primary" if current == "negative" else "secondary",
            help="Not interested",
            on_click=session.toggle_feedback,
            args=(job.id, "negative"),
        )

        st.caption(f"📍 {job.location}  ·  {job.type}  ·  💶 {job.salary}")
        st.write(job.description)

        foot, link = st.columns([3, 1])
        foot.caption(f"Posted: {job.posted}")
        # Non-absolute URLs are never clickable
        if job.actionable:
            link.link_button("View Job", job.url, use_container_width=True)
        else:
            link.button("View Job", key=f"view-{job.id}", disabled=True, use_container_width=True)


# ── Page: Search ─────────────────────────────────────────────────────────


def page_search() -> None:
    st.header("AI Job Scanner (Live Search)")
    st.caption("Smart job search for English speakers in Austria using the Gemini API")

    session = _session()
    criteria = _criteria()

    if st.button("Search Jobs", type="primary", use_container_width=True):
        force = st.session_state.get("force_fallback", False)
        with st.status("Searching…", expanded=True) as sw:
            outcome = session.search(criteria, force_fallback=force, progress=sw.write)
            sw.update(label="Search complete", state="complete")
        log.info("UI scan token=%d source=%s", outcome.token, outcome.source)

    outcome = session.outcome
    if outcome is None:
        st.divider()
        st.info(
            "Ready to find your perfect job? Click **Search Jobs** to start a live search "
            "using the Gemini API and Google Search grounding."
        )
        return

    if outcome.diagnostic:
        if outcome.is_fallback and outcome.forced:
            st.warning(outcome.diagnostic)
        else:
            st.error(outcome.diagnostic)

    _render_insights(outcome)

    st.divider()
    st.subheader(f"Found {len(outcome.jobs)} Jobs")
    origin = "**hardcoded fallback list**" if outcome.is_fallback else "live Google search"
    st.caption(f"Results are generated from a {origin} via the Gemini API.")
    for job in outcome.jobs:
        _render_job(job, session)


# ── Page: Settings ───────────────────────────────────────────────────────


def page_settings() -> None:
    st.header("Search Settings")
    criteria = _criteria()

    with st.form("criteria"):
        location = st.text_input("📍 Location (e.g., 'Vienna, Mödling')", value=criteria.location)
        types = st.multiselect(
            "Job Types",
            [t.value for t in JobType],
            default=[t.value for t in criteria.ordered_job_types],
        )
        include = st.text_area(
            "Include Keywords (comma-separated, e.g., 'data entry, hotel')",
            value=", ".join(criteria.include_keywords),
            height=100,
        )
        exclude = st.text_area(
            "Exclude Keywords (comma-separated, e.g., 'senior, German required')",
            value=", ".join(criteria.exclude_keywords),
            height=70,
        )
        remember = st.checkbox("Save as default criteria", value=False)
        if st.form_submit_button("Apply", type="primary"):
            updated = SearchCriteria.build(location, include, exclude, types)
            st.session_state["criteria"] = updated
            if remember:
                save_criteria(updated)
            st.success("Criteria updated.")

    st.divider()
    st.session_state["force_fallback"] = st.checkbox(
        "⚠️ Force Fallback Data (for testing)",
        value=st.session_state.get("force_fallback", False),
    )


def _inject_css() -> None:
    st.markdown(_CSS, unsafe_allow_html=True)


def _sidebar_status() -> None:
    with st.sidebar:
        st.divider()
        cfg = PipelineConfig.from_env()
        st.markdown("**Status**")
        st.markdown(("✅" if cfg.has_credentials else "⬜") + "  Gemini API key")
        st.markdown(f"Model: `{cfg.model}`")
        if st.session_state.get("force_fallback"):
            st.markdown("⚠️  Fallback mode forced")


def _wrap_search():
    _inject_css()
    _sidebar_status()
    page_search()


def _wrap_settings():
    _inject_css()
    _sidebar_status()
    page_settings()


pages = [
    st.Page(_wrap_search, title="Search", icon="🔎", url_path="search", default=True),
    st.Page(_wrap_settings, title="Settings", icon="⚙️", url_path="settings"),
]

nav = st.navigation(pages)
nav.run()
