# cruise_booking/services/catalog.py
import logging
from datetime import datetime, timezone
from typing import List, Optional

from cruise_booking.schemas import Cruise, CruiseCreate
from cruise_booking.store import EntityStore

logger = logging.getLogger(__name__)


class CruiseCatalog:
    """CRUD over cruise listings. Missing ids come back as ``None``/``False``."""

    def __init__(self, store: EntityStore):
        self.store = store

    def create(self, data: CruiseCreate) -> Cruise:
        cruise = self.store.cruises.add({**data.model_dump(), "created_at": datetime.now(timezone.utc)})
        logger.info("Cruise %s (%s) created", cruise.id, cruise.name)
        return cruise

    def get(self, cruise_id: int) -> Optional[Cruise]:
        return self.store.cruises.get(cruise_id)

    def list(self) -> List[Cruise]:
        return self.store.cruises.list()

    def update(self, cruise_id: int, data: CruiseCreate) -> Optional[Cruise]:
        existing = self.store.cruises.get(cruise_id)
        if existing is None:
            return None
        # fields left out of the request keep their stored values; id and created_at always survive
        changes = data.model_dump(exclude_unset=True, exclude={"id", "created_at"})
        updated = existing.model_copy(update=changes)
        cruise = self.store.cruises.replace(updated)
        if cruise is not None:
            logger.info("Cruise %s updated", cruise_id)
        return cruise

    def delete(self, cruise_id: int) -> bool:
        deleted = self.store.cruises.delete(cruise_id)
        if deleted:
            # bookings that reference the cruise are left alone
            logger.info("Cruise %s deleted", cruise_id)
        return deleted
