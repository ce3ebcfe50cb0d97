"""Abstract base repository for overlay data access."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .types import OccurrencePoint


class OverlayRepository(ABC):
    """Source-agnostic interface for point overlay data."""

    @abstractmethod
    def get_occurrences(self, genus: str, species: str, limit: int) -> list[OccurrencePoint]: ...
