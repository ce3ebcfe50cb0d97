"""Species occurrence records from the GBIF occurrence search API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Occurrence(BaseModel):
    """One georeferenced observation of an organism."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: int | None = None
    scientific_name: str | None = Field(default=None, alias="scientificName")
    latitude: float | None = Field(default=None, alias="decimalLatitude")
    longitude: float | None = Field(default=None, alias="decimalLongitude")
    year: int | None = None
    institution_code: str | None = Field(default=None, alias="institutionCode")
    country: str | None = None


class OccurrencePage(BaseModel):
    """A single page of occurrence search results."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    offset: int = 0
    limit: int = 0
    count: int | None = None
    end_of_records: bool = Field(default=True, alias="endOfRecords")
    results: list[Occurrence] = Field(default_factory=list)
