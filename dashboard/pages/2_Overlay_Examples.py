"""Overlay walkthrough: species occurrence points on the Topo/Sat base map."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st
from streamlit_folium import st_folium

from shared import (
    DEFAULT_GENUS,
    DEFAULT_OCCURRENCE_LIMIT,
    DEFAULT_SPECIES,
    MAP_HEIGHT,
    PLOTLY_LAYOUT_DEFAULTS,
    OccurrenceOverlayService,
    OverlayDataError,
    get_repository,
    summarise_occurrences,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Overlay Examples",
    page_icon="\U0001f33b",
    layout="wide",
)

# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("Overlay Examples")

genus = st.sidebar.text_input("Genus", DEFAULT_GENUS)
species = st.sidebar.text_input("Species", DEFAULT_SPECIES)
limit = st.sidebar.slider("Max records", 50, 1000, DEFAULT_OCCURRENCE_LIMIT, step=50)

if not genus.strip():
    st.sidebar.warning("Enter a genus to search.")
    st.stop()

# ── Fetch ────────────────────────────────────────────────────────────────────

service = OccurrenceOverlayService(get_repository())

with st.spinner("Loading occurrence records..."):
    try:
        points = service.fetch(genus, species, limit)
    except OverlayDataError as exc:
        st.error(f"Failed to load occurrences: {exc}")
        st.stop()

summary = summarise_occurrences(points)

taxon = " ".join(part for part in (genus.strip(), species.strip()) if part)
st.markdown(f"# *{taxon}*")

kpi1, kpi2, kpi3 = st.columns(3)
kpi1.metric("Records", summary.count)
kpi2.metric(
    "Years",
    "—" if summary.first_year is None else f"{summary.first_year}–{summary.last_year}",
)
kpi3.metric("Institutions", summary.institutions)

if not points:
    st.warning("No georeferenced records with a year and institution were found.")
    st.stop()

# ── Map ──────────────────────────────────────────────────────────────────────

st.subheader("Occurrences")
st.caption("Toggle the base layer and the occurrence group from the layer control.")

canvas = service.build_map(points)
st_folium(canvas.map, height=MAP_HEIGHT, use_container_width=True, returned_objects=[], key="occurrences")

# ── Records per year ─────────────────────────────────────────────────────────

st.subheader("Records per Year")

fig_years = go.Figure(go.Histogram(
    x=[p["year"] for p in points],
    marker_color="#E8A33D",
    hovertemplate="%{x}: %{y} records<extra></extra>",
))
fig_years.update_layout(
    **PLOTLY_LAYOUT_DEFAULTS,
    xaxis_title="Year Observed",
    yaxis_title="Records",
    height=300,
)
st.plotly_chart(fig_years, use_container_width=True)
