import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping
from mapping.map_widget import MapWidget
from models.models import Find
from utils.rocks import label, pin_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Marker:
    find_id: str
    lat: float
    lng: float
    color: str
    handle: Any = field(repr=False)


@dataclass
class SyncResult:
    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.added or self.removed)


class MarkerSynchronizer:
    """Keeps one map marker per find id.

    Markers are created for unseen ids and removed for ids that disappear.
    A find that is already mapped is never touched again, since its
    position and rock type cannot change.
    """

    def __init__(self, widget: MapWidget, on_select: Callable[[Find], None]):
        self.widget = widget
        self.on_select = on_select
        self._markers: Dict[str, Marker] = {}

    @property
    def markers(self) -> Mapping[str, Marker]:
        return MappingProxyType(self._markers)

    def reconcile(self, finds: Iterable[Find]) -> SyncResult:
        finds = list(finds)
        result = SyncResult()
        ids = {f.id for f in finds}

        for find_id in [i for i in self._markers if i not in ids]:
            marker = self._markers.pop(find_id)
            self.widget.remove_marker(marker.handle)
            result.removed.append(find_id)

        for find in finds:
            if find.id in self._markers:
                continue
            self._markers[find.id] = self._create_marker(find)
            result.added.append(find.id)

        if result.changed:
            logger.info(
                f"Markers synced: +{len(result.added)} -{len(result.removed)} "
                f"({len(self._markers)} shown)"
            )
        return result

    def _create_marker(self, find: Find) -> Marker:
        color = pin_color(find.rock_type)
        handle = self.widget.add_marker(
            find.lat,
            find.lng,
            color,
            label(find.rock_type),
            lambda: self.on_select(find),
        )
        return Marker(
            find_id=find.id, lat=find.lat, lng=find.lng, color=color, handle=handle
        )
