import logging
from typing import List
from postgrest.exceptions import APIError
from supabase import Client
from models.models import Find, NewFind
from utils.constants import TableConstants
from utils.errors import InsertFailureError

logger = logging.getLogger(__name__)


class FindsClient:
    def __init__(self, supabase: Client, limit: int = 100):
        self.supabase = supabase
        self.limit = limit

    def _table(self):
        return self.supabase.table(TableConstants.FINDS.value)

    def fetch_recent(self) -> List[Find]:
        """Return the most recent finds, newest first."""
        res = (
            self._table()
            .select("*")
            .order(TableConstants.CREATED_AT.value, desc=True)
            .limit(self.limit)
            .execute()
        )
        rows = res.data or []
        logger.info(f"Fetched {len(rows)} finds")
        return [Find.model_validate(row) for row in rows]

    def insert(self, new_find: NewFind) -> Find:
        """Insert a find and return the stored row with its id and created_at."""
        payload = new_find.model_dump(mode="json")
        try:
            res = self._table().insert(payload).execute()
        except APIError as e:
            logger.error(f"Insert into finds failed: {e.message}")
            raise InsertFailureError(e.message or "Save failed") from e

        if not res.data:
            raise InsertFailureError("Save failed: no row returned.")
        find = Find.model_validate(res.data[0])
        logger.info(f"Inserted find {find.id} ({find.rock_type})")
        return find
