"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path):
    """Keep the dashboard's file logger out of the source tree."""
    import shared.api_logging as mod

    old = (mod._logger, mod._LOG_DIR, mod._LOG_FILE)
    named_logger = logging.getLogger("geotrack_dashboard.api")
    named_logger.handlers.clear()
    mod._logger = None
    mod._LOG_DIR = str(tmp_path)
    mod._LOG_FILE = str(tmp_path / "api_calls.log")

    yield tmp_path

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger, mod._LOG_DIR, mod._LOG_FILE = old


def _make_point(
    latitude: float = 35.2,
    longitude: float = -111.6,
    year: int = 2017,
    institution_code: str = "ASU",
    scientific_name: str | None = "Heliomeris multiflora",
) -> dict:
    return {
        "latitude": latitude,
        "longitude": longitude,
        "year": year,
        "institution_code": institution_code,
        "scientific_name": scientific_name,
    }


@pytest.fixture
def sample_points() -> list[dict]:
    return [
        _make_point(35.2, -111.6, 2017, "ASU"),
        _make_point(36.1, -112.1, 1998, "ASU"),
        _make_point(34.0, -109.5, 2021, "NY"),
        _make_point(37.3, -110.2, 2005, "COLO"),
    ]


@pytest.fixture
def make_point():
    """Factory fixture for creating occurrence point dicts."""
    return _make_point
