"""Live location dashboard: Streamlit + folium, device position on a web map."""

from __future__ import annotations

import streamlit as st
from streamlit_folium import st_folium

from shared import (
    DEFAULT_CENTER,
    DEFAULT_ZOOM,
    FOLLOW_ZOOM,
    MAP_HEIGHT,
    POSITION_GROUP,
    REFRESH_INTERVAL,
    TrackingSession,
    accuracy_figure,
    build_location_service,
    format_accuracy,
    format_age,
    format_coordinate,
    render_tracking_sidebar,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="My Location",
    page_icon="\U0001f4cd",
    layout="wide",
)


# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("Live Location")

selection = render_tracking_sidebar()


# ── Tracking session (one loop per browser session) ─────────────────────────

tracking: TrackingSession | None = st.session_state.get("tracking")
if tracking is not None and tracking.config_key != selection.config_key:
    tracking.stop()
    tracking = None

if tracking is None:
    try:
        service = build_location_service(selection.source)
    except (OSError, ValueError) as exc:
        st.error(f"Failed to set up {selection.source.value}: {exc}")
        st.stop()
    tracking = TrackingSession.create(
        service, selection.timing, config_key=selection.config_key,
    )
    st.session_state["tracking"] = tracking

if not tracking.runner.is_running and tracking.runner.error is None:
    tracking.start()

if tracking.runner.error is not None:
    st.error(f"Location polling stopped: {tracking.runner.error}")


# ── Header ───────────────────────────────────────────────────────────────────

st.markdown(
    f"# My Location"
    f"  \n**{selection.source.value}** | every {selection.timing.retry_delay:g}s"
)


# ── Live map + KPIs (rerun on a timer, map only receives the position group) ─

@st.fragment(run_every=REFRESH_INTERVAL)
def live_panel() -> None:
    view = tracking.refresh()
    fix = view.last_fix

    kpi1, kpi2, kpi3, kpi4 = st.columns(4)
    kpi1.metric("Position", format_coordinate(
        fix.latitude if fix else None, fix.longitude if fix else None,
    ))
    kpi2.metric("Accuracy", format_accuracy(fix.accuracy if fix else None))
    kpi3.metric("Last fix", format_age(fix.timestamp if fix else None))
    rate = tracking.trail.success_rate()
    kpi4.metric("Fix rate", "—" if rate is None else f"{rate:.0%}")

    if view.sample is not None and not view.sample.success:
        st.caption(f"Latest attempt failed: {view.sample.error or 'no fix'}")

    if fix is not None and selection.follow:
        center, zoom = [fix.latitude, fix.longitude], FOLLOW_ZOOM
    else:
        center, zoom = list(DEFAULT_CENTER), DEFAULT_ZOOM

    st_folium(
        tracking.canvas.map,
        feature_group_to_add=tracking.canvas.group(POSITION_GROUP),
        center=center,
        zoom=zoom,
        height=MAP_HEIGHT,
        use_container_width=True,
        returned_objects=[],
        key="leaf",
    )

    frame = tracking.trail.to_frame()
    if frame.empty:
        st.info("Waiting for the first position…")
    else:
        st.subheader("Reported Accuracy")
        st.plotly_chart(accuracy_figure(frame), use_container_width=True)


live_panel()
