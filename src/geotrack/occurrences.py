"""Client for the GBIF occurrence search API."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from geotrack._http import SyncTransport
from geotrack._params import build_query_params
from geotrack.exceptions import GeotrackValidationError
from geotrack.models.occurrence import Occurrence, OccurrencePage

GBIF_BASE_URL = "https://api.gbif.org/v1"
MAX_PAGE_SIZE = 300  # GBIF caps a single search page at 300 records


class OccurrenceClient:
    """Synchronous client for GBIF occurrence records.

    Usage:
        with OccurrenceClient() as gbif:
            records = gbif.search(genus="Heliomeris", species="multiflora")
    """

    def __init__(
        self,
        base_url: str = GBIF_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> OccurrenceClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def search_page(self, offset: int = 0, limit: int = MAX_PAGE_SIZE, **kwargs: Any) -> OccurrencePage:
        """Fetch one page of georeferenced occurrences matching *kwargs*."""
        params = build_query_params(
            hasCoordinate=True,
            offset=offset,
            limit=min(limit, MAX_PAGE_SIZE),
            **kwargs,
        )
        data = self._transport.get("/occurrence/search", params)
        try:
            return OccurrencePage.model_validate(data)
        except ValidationError as exc:
            raise GeotrackValidationError(
                f"Failed to validate occurrence search response: {exc}"
            ) from exc

    def search(
        self,
        genus: str | None = None,
        species: str | None = None,
        limit: int = MAX_PAGE_SIZE,
        **kwargs: Any,
    ) -> list[Occurrence]:
        """Return up to *limit* occurrences, paging through results as needed."""
        scientific_name = " ".join(part for part in (genus, species) if part) or None
        records: list[Occurrence] = []
        offset = 0
        while len(records) < limit:
            page = self.search_page(
                offset=offset,
                limit=limit - len(records),
                scientificName=scientific_name,
                **kwargs,
            )
            records.extend(page.results)
            if page.end_of_records or not page.results:
                break
            offset += len(page.results)
        return records[:limit]


def clean_occurrences(records: list[Occurrence]) -> list[Occurrence]:
    """Keep records with non-zero coordinates, a year and an institution code."""
    return [
        r for r in records
        if r.latitude is not None
        and r.longitude is not None
        and not (r.latitude == 0 or r.longitude == 0)
        and r.year is not None
        and r.institution_code
    ]
