"""GBIF occurrence repository implementation."""

from __future__ import annotations

import streamlit as st

from geotrack import OccurrenceClient, clean_occurrences

from ..api_logging import log_api_call
from .base import OverlayRepository
from .errors import OverlayDataError
from .types import OccurrencePoint


@st.cache_data(ttl=3600)
def _fetch_occurrences(genus: str, species: str, limit: int) -> list[OccurrencePoint]:
    try:
        with OccurrenceClient() as gbif:
            records = gbif.search(genus=genus, species=species or None, limit=limit)
    except Exception as exc:
        raise OverlayDataError(
            f"Failed to fetch occurrences for {genus} {species}: {exc}",
        ) from exc
    return [
        {
            "latitude": r.latitude,
            "longitude": r.longitude,
            "year": r.year,
            "institution_code": r.institution_code,
            "scientific_name": r.scientific_name,
        }
        for r in clean_occurrences(records)
    ]


class GbifRepository(OverlayRepository):
    """GBIF occurrence search backed repository."""

    @log_api_call
    def get_occurrences(self, genus: str, species: str, limit: int) -> list[OccurrencePoint]:
        return _fetch_occurrences(genus.strip(), species.strip(), limit)
