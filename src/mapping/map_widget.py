import logging
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple
import folium
from utils.constants import MapConstants

logger = logging.getLogger(__name__)


class MapWidget(Protocol):
    def add_marker(
        self,
        lat: float,
        lng: float,
        color: str,
        tooltip: str,
        on_click: Callable[[], None],
    ) -> Any: ...

    def remove_marker(self, handle: Any) -> None: ...


class FoliumMapWidget:
    """Leaflet map whose pins are streamed as one feature group.

    The base map is built once; a fresh feature group holding the current
    pins is sent to the browser on every rerun so pins can change without
    re-creating the map.
    """

    def __init__(
        self,
        center: Tuple[float, float] = MapConstants.CENTER.value,
        zoom: int = MapConstants.ZOOM.value,
        zoom_control: bool = False,
        scroll_wheel_zoom: bool = True,
    ):
        self.center = center
        self.zoom = zoom
        self.zoom_control = zoom_control
        self.scroll_wheel_zoom = scroll_wheel_zoom
        self._pins: Dict[str, Tuple[folium.CircleMarker, Callable[[], None]]] = {}
        self._last_click: Optional[Tuple[float, float]] = None

    def build_map(self) -> folium.Map:
        return folium.Map(
            location=list(self.center),
            zoom_start=self.zoom,
            zoom_control=self.zoom_control,
            scrollWheelZoom=self.scroll_wheel_zoom,
            tiles="OpenStreetMap",
        )

    def build_layer(self) -> folium.FeatureGroup:
        layer = folium.FeatureGroup(name="finds")
        for marker, _ in self._pins.values():
            layer.add_child(marker)
        return layer

    @property
    def markers(self) -> List[folium.CircleMarker]:
        return [marker for marker, _ in self._pins.values()]

    @property
    def marker_count(self) -> int:
        return len(self._pins)

    def add_marker(self, lat, lng, color, tooltip, on_click) -> folium.CircleMarker:
        marker = folium.CircleMarker(
            location=[lat, lng],
            radius=MapConstants.PIN_RADIUS.value,
            color=MapConstants.PIN_STROKE_COLOR.value,
            weight=MapConstants.PIN_STROKE_WEIGHT.value,
            fill=True,
            fill_color=color,
            fill_opacity=1,
            tooltip=tooltip,
        )
        self._pins[marker.get_name()] = (marker, on_click)
        return marker

    def remove_marker(self, handle: folium.CircleMarker) -> None:
        self._pins.pop(handle.get_name(), None)

    def reset_click(self) -> None:
        """Forget the last dispatched click so the same pin can fire again."""
        self._last_click = None

    def dispatch_click(self, clicked: Optional[Dict[str, float]]) -> bool:
        """Fire the callback of the pin at the clicked position.

        `st_folium` keeps reporting the last click on every rerun, so a click
        is only dispatched the first time it is seen until `reset_click`.
        """
        if not clicked or "lat" not in clicked or "lng" not in clicked:
            return False
        point = (clicked["lat"], clicked["lng"])
        if point == self._last_click:
            return False
        self._last_click = point

        tolerance = MapConstants.CLICK_TOLERANCE_DEG.value
        for marker, on_click in self._pins.values():
            lat, lng = marker.location
            if abs(lat - point[0]) <= tolerance and abs(lng - point[1]) <= tolerance:
                on_click()
                return True
        logger.debug(f"Map click at {point} matched no pin")
        return False
