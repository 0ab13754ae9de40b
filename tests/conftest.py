import pytest
from unittest.mock import MagicMock

from models.models import Find, PhotoUpload
from test_data import SEED_ROWS, NEW_ROW, PHOTO_BYTES


class FakeMapWidget:
    """Records marker calls; handles are plain objects so identity is checkable."""

    def __init__(self):
        self.live = []
        self.added = []
        self.removed = []

    def add_marker(self, lat, lng, color, tooltip, on_click):
        handle = {"lat": lat, "lng": lng, "color": color, "tooltip": tooltip, "on_click": on_click}
        self.live.append(handle)
        self.added.append(handle)
        return handle

    def remove_marker(self, handle):
        self.live.remove(handle)
        self.removed.append(handle)


@pytest.fixture
def seed_finds():
    return [Find.model_validate(row) for row in SEED_ROWS]


@pytest.fixture
def new_find():
    return Find.model_validate(NEW_ROW)


@pytest.fixture
def fake_widget():
    return FakeMapWidget()


@pytest.fixture
def photo():
    return PhotoUpload(name="IMG_0042.JPG", content_type="image/jpeg", data=PHOTO_BYTES)


@pytest.fixture
def s3_client():
    client = MagicMock()
    client.upload_photo.return_value = NEW_ROW["photo_path"]
    return client


@pytest.fixture
def finds_client():
    client = MagicMock()
    client.insert.return_value = Find.model_validate(NEW_ROW)
    return client
