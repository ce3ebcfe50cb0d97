"""Map widget capability and its folium implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import folium

DEFAULT_CENTER = (39.5, -98.35)
DEFAULT_ZOOM = 4

BASE_LAYERS: dict[str, str] = {
    "Topo": "Esri.WorldTopoMap",
    "Sat": "Esri.WorldImagery",
}


class MapCanvas(ABC):
    """The subset of a web map widget the application draws through."""

    @abstractmethod
    def add_marker(self, latitude: float, longitude: float, popup: str, group: str) -> None: ...

    @abstractmethod
    def add_circle(self, latitude: float, longitude: float, radius: float, group: str) -> None: ...

    @abstractmethod
    def clear_group(self, group: str) -> None: ...

    @abstractmethod
    def add_base_tiles(self, provider: str, name: str) -> None: ...

    @abstractmethod
    def add_layers_control(self, collapsed: bool = False) -> None: ...

    @abstractmethod
    def annotations(self, group: str) -> list[Any]: ...


class FoliumCanvas(MapCanvas):
    """MapCanvas backed by a :class:`folium.Map`, one FeatureGroup per group name.

    Groups named in *detached_groups* are never attached to the map; the host
    renders them on its own (streamlit-folium's ``feature_group_to_add``) so
    redrawing them does not re-render the whole map.
    """

    def __init__(
        self,
        center: tuple[float, float] = DEFAULT_CENTER,
        zoom: int = DEFAULT_ZOOM,
        detached_groups: tuple[str, ...] = (),
    ) -> None:
        self.map = folium.Map(location=list(center), zoom_start=zoom, tiles=None)
        self.detached_groups = frozenset(detached_groups)
        self._groups: dict[str, folium.FeatureGroup] = {}

    def group(self, name: str) -> folium.FeatureGroup:
        """Return the FeatureGroup for *name*, attaching it to the map on first use."""
        fg = self._groups.get(name)
        if fg is None:
            fg = folium.FeatureGroup(name=name, overlay=True, control=True)
            if name not in self.detached_groups:
                fg.add_to(self.map)
            self._groups[name] = fg
        return fg

    @property
    def group_names(self) -> list[str]:
        return list(self._groups)

    def add_marker(self, latitude: float, longitude: float, popup: str, group: str) -> None:
        folium.Marker(
            location=[latitude, longitude],
            popup=folium.Popup(popup, max_width=300),
        ).add_to(self.group(group))

    def add_circle(self, latitude: float, longitude: float, radius: float, group: str) -> None:
        folium.Circle(
            location=[latitude, longitude],
            radius=radius,
            weight=2,
            fill=True,
            fill_opacity=0.2,
        ).add_to(self.group(group))

    def add_circle_marker(
        self,
        latitude: float,
        longitude: float,
        popup: str | None,
        group: str,
        color: str = "#3388ff",
        radius: float = 6,
    ) -> None:
        """Fixed pixel-radius marker, used for dense point overlays."""
        folium.CircleMarker(
            location=[latitude, longitude],
            radius=radius,
            color=color,
            fill=True,
            fill_opacity=0.8,
            popup=folium.Popup(popup, max_width=300) if popup else None,
        ).add_to(self.group(group))

    def clear_group(self, group: str) -> None:
        fg = self._groups.get(group)
        if fg is not None:
            # folium has no public way to empty a layer; relies on branca's private _children
            fg._children.clear()

    def add_base_tiles(self, provider: str, name: str) -> None:
        folium.TileLayer(provider, name=name, overlay=False, control=True).add_to(self.map)

    def add_layers_control(self, collapsed: bool = False) -> None:
        folium.LayerControl(collapsed=collapsed).add_to(self.map)

    def annotations(self, group: str) -> list[Any]:
        # same private branca attribute as clear_group
        fg = self._groups.get(group)
        return list(fg._children.values()) if fg is not None else []


def build_base_map(
    center: tuple[float, float] = DEFAULT_CENTER,
    zoom: int = DEFAULT_ZOOM,
    overlay_groups: tuple[str, ...] = (),
    detached_groups: tuple[str, ...] = (),
) -> FoliumCanvas:
    """Return a canvas with the Topo/Sat base layers and an expanded layer control.

    *overlay_groups* are created up front so they show in the layer control.
    """
    canvas = FoliumCanvas(center=center, zoom=zoom, detached_groups=detached_groups)
    for name, provider in BASE_LAYERS.items():
        canvas.add_base_tiles(provider, name)
    for name in overlay_groups:
        canvas.group(name)
    canvas.add_layers_control(collapsed=False)
    return canvas
