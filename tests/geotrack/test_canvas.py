"""Tests for the folium map canvas."""

from __future__ import annotations

import folium
import pytest

from geotrack.canvas import BASE_LAYERS, FoliumCanvas, MapCanvas, build_base_map


class TestMapCanvas:
    def test_cannot_instantiate_abc(self) -> None:
        with pytest.raises(TypeError):
            MapCanvas()


class TestFoliumCanvas:
    def test_add_marker_creates_group(self) -> None:
        canvas = FoliumCanvas()
        canvas.add_marker(40.0, -105.0, "here", "pos")
        assert canvas.group_names == ["pos"]
        (marker,) = canvas.annotations("pos")
        assert isinstance(marker, folium.Marker)
        assert not isinstance(marker, folium.Circle)
        assert marker.location == [40.0, -105.0]

    def test_add_circle(self) -> None:
        canvas = FoliumCanvas()
        canvas.add_circle(40.0, -105.0, 25.0, "pos")
        (circle,) = canvas.annotations("pos")
        assert isinstance(circle, folium.Circle)
        assert circle.options["radius"] == 25.0

    def test_clear_group_removes_annotations(self) -> None:
        canvas = FoliumCanvas()
        canvas.add_marker(40.0, -105.0, "here", "pos")
        canvas.add_circle(40.0, -105.0, 25.0, "pos")
        canvas.clear_group("pos")
        assert canvas.annotations("pos") == []

    def test_clear_group_leaves_other_groups(self) -> None:
        canvas = FoliumCanvas()
        canvas.add_marker(40.0, -105.0, "here", "pos")
        canvas.add_marker(35.0, -111.0, "ASU", "Occurrences")
        canvas.clear_group("pos")
        assert len(canvas.annotations("Occurrences")) == 1

    def test_clear_unknown_group_is_noop(self) -> None:
        canvas = FoliumCanvas()
        before = list(canvas.map._children)
        canvas.clear_group("pos")
        canvas.clear_group("pos")
        assert list(canvas.map._children) == before
        assert canvas.annotations("pos") == []

    def test_groups_attach_to_map(self) -> None:
        canvas = FoliumCanvas()
        fg = canvas.group("Occurrences")
        assert fg.get_name() in canvas.map._children

    def test_detached_group_not_on_map(self) -> None:
        canvas = FoliumCanvas(detached_groups=("pos",))
        fg = canvas.group("pos")
        canvas.add_marker(40.0, -105.0, "here", "pos")
        assert fg.get_name() not in canvas.map._children
        assert len(canvas.annotations("pos")) == 1

    def test_group_is_reused(self) -> None:
        canvas = FoliumCanvas()
        assert canvas.group("pos") is canvas.group("pos")

    def test_circle_marker(self) -> None:
        canvas = FoliumCanvas()
        canvas.add_circle_marker(35.0, -111.0, None, "Occurrences", color="#ff0000")
        (marker,) = canvas.annotations("Occurrences")
        assert isinstance(marker, folium.CircleMarker)


class TestBuildBaseMap:
    def test_base_layers_and_control(self) -> None:
        canvas = build_base_map()
        children = list(canvas.map._children.values())
        tiles = [c for c in children if isinstance(c, folium.TileLayer)]
        assert sorted(t.layer_name for t in tiles) == sorted(BASE_LAYERS)
        assert any(isinstance(c, folium.LayerControl) for c in children)

    def test_overlay_groups_created(self) -> None:
        canvas = build_base_map(overlay_groups=("Occurrences",))
        assert canvas.group_names == ["Occurrences"]

    def test_renders_html(self) -> None:
        canvas = build_base_map(overlay_groups=("Occurrences",))
        canvas.add_marker(35.0, -111.0, "ASU", "Occurrences")
        html = canvas.map.get_root().render()
        assert "Occurrences" in html
