from unittest.mock import MagicMock

from mapping.marker_synchronizer import MarkerSynchronizer


def _sync(widget, on_select=None):
    return MarkerSynchronizer(widget=widget, on_select=on_select or MagicMock())


def test_five_finds_make_five_markers(fake_widget, seed_finds):
    sync = _sync(fake_widget)
    result = sync.reconcile(seed_finds)
    assert len(sync.markers) == 5
    assert set(sync.markers) == {f.id for f in seed_finds}
    assert len(fake_widget.live) == 5
    assert sorted(result.added) == sorted(f.id for f in seed_finds)
    assert result.removed == []


def test_adding_one_find_adds_one_marker(fake_widget, seed_finds, new_find):
    sync = _sync(fake_widget)
    sync.reconcile(seed_finds)
    fake_widget.added.clear()

    result = sync.reconcile([new_find, *seed_finds])

    assert result.added == [new_find.id]
    assert result.removed == []
    assert len(fake_widget.added) == 1
    handle = fake_widget.added[0]
    assert (handle["lat"], handle["lng"]) == (new_find.lat, new_find.lng)
    assert handle["color"] == "#D97706"
    marker = sync.markers[new_find.id]
    assert (marker.lat, marker.lng, marker.color) == (47.2466, -88.4530, "#D97706")


def test_removing_one_find_removes_its_marker(fake_widget, seed_finds):
    sync = _sync(fake_widget)
    sync.reconcile(seed_finds)
    gone = seed_finds[2]
    gone_handle = sync.markers[gone.id].handle

    result = sync.reconcile([f for f in seed_finds if f.id != gone.id])

    assert result.removed == [gone.id]
    assert result.added == []
    assert fake_widget.removed == [gone_handle]
    assert gone.id not in sync.markers
    assert len(fake_widget.live) == 4


def test_unchanged_collection_is_identity_stable(fake_widget, seed_finds):
    sync = _sync(fake_widget)
    sync.reconcile(seed_finds)
    before = dict(sync.markers)

    result = sync.reconcile(list(reversed(seed_finds)))

    assert not result.changed
    assert len(fake_widget.added) == 5
    assert fake_widget.removed == []
    for find_id, marker in sync.markers.items():
        assert marker is before[find_id]


def test_duplicate_ids_produce_one_marker(fake_widget, seed_finds):
    sync = _sync(fake_widget)
    sync.reconcile([seed_finds[0], seed_finds[0]])
    assert len(sync.markers) == 1
    assert len(fake_widget.live) == 1


def test_empty_collection_clears_map(fake_widget, seed_finds):
    sync = _sync(fake_widget)
    sync.reconcile(seed_finds)
    result = sync.reconcile([])
    assert len(result.removed) == 5
    assert fake_widget.live == []
    assert len(sync.markers) == 0


def test_marker_click_selects_its_find(fake_widget, seed_finds):
    on_select = MagicMock()
    sync = _sync(fake_widget, on_select)
    sync.reconcile(seed_finds)

    handle = sync.markers[seed_finds[3].id].handle
    handle["on_click"]()

    on_select.assert_called_once_with(seed_finds[3])


def test_markers_view_is_read_only(fake_widget, seed_finds):
    sync = _sync(fake_widget)
    sync.reconcile(seed_finds)
    try:
        sync.markers["x"] = None
    except TypeError:
        pass
    assert "x" not in sync.markers
