from typing import Any, Dict, Optional

from models.models import GeoFix
from utils.constants import Label
from utils.errors import PermissionDeniedError


def location_request_js(timeout_ms: int) -> str:
    """JS expression resolving to one high-accuracy position fix or an error."""
    return (
        "new Promise((resolve) => navigator.geolocation.getCurrentPosition("
        "(pos) => resolve({lat: pos.coords.latitude, lng: pos.coords.longitude, "
        "accuracy: pos.coords.accuracy}), "
        "(err) => resolve({error: {code: err.code, message: err.message}}), "
        f"{{enableHighAccuracy: true, timeout: {int(timeout_ms)}, maximumAge: 0}}))"
    )


def parse_location_result(result: Optional[Dict[str, Any]]) -> GeoFix:
    """Turn the browser's answer into a GeoFix.

    Accepts both the flat shape produced by `location_request_js` and the
    `{"coords": {...}}` shape of the raw Geolocation API. Anything without
    usable coordinates counts as a denial.
    """
    if not isinstance(result, dict) or "error" in result:
        raise PermissionDeniedError(Label.LOCATION_DENIED.value)

    coords = result.get("coords", result)
    lat = coords.get("lat", coords.get("latitude"))
    lng = coords.get("lng", coords.get("longitude"))
    if lat is None or lng is None:
        raise PermissionDeniedError(Label.LOCATION_DENIED.value)

    try:
        return GeoFix(lat=lat, lng=lng, accuracy=coords.get("accuracy"))
    except ValueError as e:
        raise PermissionDeniedError(Label.LOCATION_DENIED.value) from e
