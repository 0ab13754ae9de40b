from unittest.mock import MagicMock
import folium

from mapping.map_widget import FoliumMapWidget
from mapping.marker_synchronizer import MarkerSynchronizer


def _rendered(widget: FoliumMapWidget) -> str:
    fmap = widget.build_map()
    widget.build_layer().add_to(fmap)
    return fmap.get_root().render()


def test_build_map_center_and_zoom():
    widget = FoliumMapWidget()
    fmap = widget.build_map()
    assert isinstance(fmap, folium.Map)
    assert list(fmap.location) == [44.8, -85.5]


def test_add_and_remove_marker():
    widget = FoliumMapWidget()
    marker = widget.add_marker(45.0, -85.0, "#2563EB", "Petoskey", MagicMock())
    assert isinstance(marker, folium.CircleMarker)
    assert widget.markers == [marker]
    assert marker.get_name() in _rendered(widget)

    widget.remove_marker(marker)
    assert widget.markers == []
    assert widget.marker_count == 0
    assert marker.get_name() not in _rendered(widget)


def test_dispatch_click_fires_matching_marker_once():
    widget = FoliumMapWidget()
    first, second = MagicMock(), MagicMock()
    widget.add_marker(45.0, -85.0, "#2563EB", "Petoskey", first)
    widget.add_marker(44.0, -86.0, "#16A34A", "Quartz", second)

    assert widget.dispatch_click({"lat": 44.0, "lng": -86.0}) is True
    second.assert_called_once()
    first.assert_not_called()

    # st_folium reports the same click on every rerun
    assert widget.dispatch_click({"lat": 44.0, "lng": -86.0}) is False
    second.assert_called_once()


def test_same_pin_fires_again_after_reset_click():
    widget = FoliumMapWidget()
    on_click = MagicMock()
    widget.add_marker(45.0, -85.0, "#2563EB", "Petoskey", on_click)

    widget.dispatch_click({"lat": 45.0, "lng": -85.0})
    widget.reset_click()
    assert widget.dispatch_click({"lat": 45.0, "lng": -85.0}) is True
    assert on_click.call_count == 2


def test_dispatch_click_ignores_empty_and_unmatched():
    widget = FoliumMapWidget()
    on_click = MagicMock()
    widget.add_marker(45.0, -85.0, "#2563EB", "Petoskey", on_click)
    assert widget.dispatch_click(None) is False
    assert widget.dispatch_click({}) is False
    assert widget.dispatch_click({"lat": 10.0, "lng": 10.0}) is False
    on_click.assert_not_called()


def test_synchronizer_drives_folium_layer(seed_finds):
    widget = FoliumMapWidget()
    sync = MarkerSynchronizer(widget=widget, on_select=MagicMock())
    sync.reconcile(seed_finds)
    assert widget.marker_count == 5

    sync.reconcile(seed_finds[:2])
    assert widget.marker_count == 2
    assert set(widget.markers) == {m.handle for m in sync.markers.values()}


def test_closed_selection_reopens_on_same_pin(seed_finds):
    widget = FoliumMapWidget()
    selected = []
    sync = MarkerSynchronizer(widget=widget, on_select=selected.append)
    sync.reconcile(seed_finds)
    pin = {"lat": seed_finds[0].lat, "lng": seed_finds[0].lng}

    widget.dispatch_click(pin)
    assert selected == [seed_finds[0]]

    selected.clear()
    widget.reset_click()
    widget.dispatch_click(pin)
    assert selected == [seed_finds[0]]
