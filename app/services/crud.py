"""
Generic create/read/update/delete service for the travel entities.

Each entity service names its model and the foreign keys it must verify
before writing. Reference checks run before the database is touched so a
dangling id comes back as a field error (``statusId``) rather than a bare
integrity failure; the database constraints remain the final guard.
"""
from typing import Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateError, NotFoundError, ValidationFailedError
from app.core.logging import get_logger
from app.models.lookup import TravelPriorityLevel, TravelStatus

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")

STATUS_PRIORITY_REFERENCES = {
    "status_id": (TravelStatus, "Travel status"),
    "priority_id": (TravelPriorityLevel, "Priority level"),
}


class CRUDService(Generic[ModelT]):
    """CRUD operations for one SQLAlchemy model, scoped to a request session."""

    model: Type[ModelT]
    entity_name: str = "resource"
    # column -> (referenced model, human label)
    references: Dict[str, Tuple[type, str]] = STATUS_PRIORITY_REFERENCES

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(self.model)

    def list(self) -> List[ModelT]:
        return self._query().order_by(self.model.id).all()

    def find(self, obj_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, obj_id)

    def get(self, obj_id: int) -> ModelT:
        obj = self.find(obj_id)
        if obj is None:
            raise NotFoundError(f"{self.entity_name.capitalize()} with ID {obj_id} not found")
        return obj

    def create(self, data: BaseModel, user_id: Optional[int] = None) -> ModelT:
        values = data.model_dump()
        self.check_references(values)

        if user_id is not None and hasattr(self.model, "user_id"):
            values["user_id"] = user_id

        obj = self.model(**values)
        self.db.add(obj)
        self.commit()
        self.db.refresh(obj)

        logger.info(f"Created {self.entity_name}", extra={"entity": self.entity_name, "entity_id": obj.id})
        return obj

    def update(self, obj_id: int, data: BaseModel) -> ModelT:
        obj = self.get(obj_id)
        values = data.model_dump(exclude_unset=True)
        self.check_references(values)

        for field, value in values.items():
            setattr(obj, field, value)

        self.commit()
        self.db.refresh(obj)

        logger.info(
            f"Updated {self.entity_name}",
            extra={"entity": self.entity_name, "entity_id": obj.id, "fields": ",".join(sorted(values))},
        )
        return obj

    def delete(self, obj_id: int) -> None:
        obj = self.get(obj_id)
        self.db.delete(obj)
        self.commit()

        logger.info(f"Deleted {self.entity_name}", extra={"entity": self.entity_name, "entity_id": obj_id})

    def check_references(self, values: dict) -> None:
        """Raise ValidationFailedError listing every foreign key that points nowhere."""
        field_errors = {}
        for column, (ref_model, label) in self.references.items():
            ref_id = values.get(column)
            if ref_id is None:
                continue
            if self.db.get(ref_model, ref_id) is None:
                field_errors[to_camel(column)] = [f"{label} {ref_id} does not exist"]

        if field_errors:
            raise ValidationFailedError(f"Invalid {self.entity_name} data", field_errors=field_errors)

    def commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(
                f"Integrity error while saving {self.entity_name}",
                extra={"entity": self.entity_name, "error": str(e.orig)},
            )
            raise DuplicateError(f"Could not save {self.entity_name}: conflicting data")
