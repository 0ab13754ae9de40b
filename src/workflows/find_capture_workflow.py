import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional
from clients.finds_client import FindsClient
from clients.s3_client import S3Client
from models.models import Find, GeoFix, NewFind, PhotoUpload
from utils.errors import PermissionDeniedError
from utils.geo_utils import parse_location_result
from utils.rocks import DEFAULT_ROCK_TYPE, RockType
from workflows.workflow import Workflow

logger = logging.getLogger(__name__)


class CaptureState(Enum):
    IDLE = "idle"
    AWAITING_LOCATION = "awaiting_location"
    FORM_OPEN = "form_open"
    SAVING = "saving"


class FindCaptureWorkflow(Workflow):
    """Location fix, photo upload and record insert as one user-level save.

    IDLE -> AWAITING_LOCATION -> FORM_OPEN -> SAVING -> IDLE. A failed save
    goes back to FORM_OPEN with the form and location untouched.
    """

    def __init__(self, s3_client: S3Client, finds_client: FindsClient):
        self.s3_client = s3_client
        self.finds_client = finds_client
        self.state = CaptureState.IDLE
        self.notice: Optional[str] = None
        self.location: Optional[GeoFix] = None
        self._reset_form()

    def _reset_form(self):
        self.photo: Optional[PhotoUpload] = None
        self.rock_type: RockType = DEFAULT_ROCK_TYPE
        self.note: str = ""

    def _reset(self):
        self._reset_form()
        self.location = None
        self.state = CaptureState.IDLE

    @property
    def can_submit(self) -> bool:
        return (
            self.state == CaptureState.FORM_OPEN
            and self.photo is not None
            and self.location is not None
        )

    def request_location(self):
        if self.state != CaptureState.IDLE:
            return
        self.notice = None
        self.state = CaptureState.AWAITING_LOCATION

    def resolve_location(self, result: Optional[Dict[str, Any]]):
        if self.state != CaptureState.AWAITING_LOCATION:
            return
        try:
            fix = parse_location_result(result)
        except PermissionDeniedError as e:
            logger.warning(f"Location fix failed: {result}")
            self.notice = str(e)
            self._reset()
            return
        self.location = fix
        self._reset_form()
        self.state = CaptureState.FORM_OPEN

    def update_form(
        self,
        photo: Optional[PhotoUpload] = None,
        rock_type: Optional[RockType | str] = None,
        note: Optional[str] = None,
        clear_photo: bool = False,
    ):
        if self.state != CaptureState.FORM_OPEN:
            return
        if photo is not None or clear_photo:
            self.photo = photo
        if rock_type is not None:
            self.rock_type = RockType(rock_type)
        if note is not None:
            self.note = note

    def cancel(self):
        if self.state in (CaptureState.AWAITING_LOCATION, CaptureState.FORM_OPEN):
            self.notice = None
            self._reset()

    def run(self, input: Dict, on_created: Optional[Callable[[Find], None]] = None) -> Find:
        """Upload the photo, then insert the record.

        `on_created` receives the new find before the workflow resets.
        """
        user_id = input["user_id"]
        if not self.can_submit:
            raise ValueError("A photo and a location are required to save a find.")
        assert self.photo is not None and self.location is not None

        self.state = CaptureState.SAVING
        self.notice = None
        try:
            photo_path = self.s3_client.upload_photo(user_id, self.photo)
            find = self.finds_client.insert(
                NewFind(
                    user_id=user_id,
                    rock_type=self.rock_type,
                    note=self.note,
                    photo_path=photo_path,
                    lat=self.location.lat,
                    lng=self.location.lng,
                )
            )
        except Exception as e:
            logger.error(f"Saving find failed: {e}")
            self.notice = str(e) or "Save failed"
            self.state = CaptureState.FORM_OPEN
            raise

        if on_created is not None:
            on_created(find)
        self._reset()
        return find
