from typing import Dict, Optional, Type

from pydantic import BaseModel
from sqlalchemy import func

from app.core.exceptions import DuplicateError, ResourceInUseError
from app.core.logging import get_logger
from app.models.accommodation import Accommodation
from app.models.activity import Activity
from app.models.destination import Destination
from app.models.lookup import TravelPriorityLevel, TravelStatus
from app.models.trip import Trip
from app.services.crud import CRUDService

logger = get_logger(__name__)

# Tables whose rows point at a status / priority level
DEPENDENT_MODELS = (Destination, Activity, Accommodation, Trip)


class LookupService(CRUDService):
    """Travel statuses and priority levels: unique labels, restricted deletes."""

    references: Dict = {}
    reference_column: str

    def find_by_label(self, label: str):
        return self._query().filter(func.lower(self.model.label) == label.lower()).first()

    def _ensure_label_free(self, label: str, own_id: Optional[int] = None) -> None:
        existing = self.find_by_label(label)
        if existing is not None and existing.id != own_id:
            raise DuplicateError(
                f"{self.entity_name.capitalize()} '{label}' already exists",
                field_errors={"label": [f"Label '{label}' is already in use"]},
            )

    def create(self, data: BaseModel, user_id: Optional[int] = None):
        self._ensure_label_free(data.label)
        return super().create(data)

    def update(self, obj_id: int, data: BaseModel):
        if "label" in data.model_fields_set:
            self._ensure_label_free(data.label, own_id=obj_id)
        return super().update(obj_id, data)

    def usage_counts(self, obj_id: int) -> Dict[str, int]:
        column = self.reference_column
        counts = {}
        for model in DEPENDENT_MODELS:
            count = self.db.query(model).filter(getattr(model, column) == obj_id).count()
            if count:
                counts[model.__tablename__] = count
        return counts

    def delete(self, obj_id: int) -> None:
        obj = self.get(obj_id)
        counts = self.usage_counts(obj.id)
        if counts:
            logger.warning(
                f"Refused to delete referenced {self.entity_name}",
                extra={"entity": self.entity_name, "entity_id": obj.id, **counts},
            )
            summary = ", ".join(f"{count} {table}" for table, count in sorted(counts.items()))
            raise ResourceInUseError(
                f"{self.entity_name.capitalize()} '{obj.label}' is still used by {summary}"
            )
        super().delete(obj_id)


class TravelStatusService(LookupService):
    model: Type = TravelStatus
    entity_name = "travel status"
    reference_column = "status_id"


class PriorityLevelService(LookupService):
    model: Type = TravelPriorityLevel
    entity_name = "priority level"
    reference_column = "priority_id"
