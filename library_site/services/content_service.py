"""Business logic for the ordered site content collections."""

import math
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel

from library_site.core.error_codes import ValidationErrorCode
from library_site.core.exceptions import ValidationException
from library_site.core.logger import get_logger
from library_site.services.collections import ContentCollection
from library_site.stores.content_store import ContentStore

logger = get_logger(__name__)


# Range of a 64-bit signed INTEGER column
SORT_ORDER_MIN = -(2**63)
SORT_ORDER_MAX = 2**63 - 1


def coerce_sort_order(value: Any) -> int:
    """Integer position; anything absent, non-numeric or out of range sorts as 0."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value if SORT_ORDER_MIN <= value <= SORT_ORDER_MAX else 0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return coerce_sort_order(int(value))
    return 0


def is_blank(value: Any) -> bool:
    """None, or a string with nothing but whitespace."""
    return value is None or (isinstance(value, str) and not value.strip())


class ContentService:
    """List, add, update and delete rows of one content collection."""

    def __init__(
        self, collection: ContentCollection, store: Optional[ContentStore] = None
    ) -> None:
        self.collection = collection
        self.store = store or ContentStore(collection.model)

    def _build_fields(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Validate required inputs and fill in defaults for the editable columns."""
        for field in self.collection.required_fields:
            if is_blank(payload.get(field)):
                raise ValidationException(
                    f"{field} is required",
                    ValidationErrorCode.MISSING_FIELD,
                    details={"field": field, "collection": self.collection.name},
                )

        fields = {field: payload[field] for field in self.collection.required_fields}
        for field, default in self.collection.optional_defaults.items():
            value = payload.get(field)
            fields[field] = default if value is None or value == "" else value
        fields["sort_order"] = coerce_sort_order(payload.get("sort_order"))
        return fields

    def list_all(self) -> List[BaseModel]:
        """Every row, for the admin console."""
        rows = self.store.list_all()
        return [self.collection.data_schema.model_validate(row) for row in rows]

    def list_public(self) -> List[BaseModel]:
        """Active rows only, projected for the public site."""
        rows = self.store.list_all(active_only=True)
        return [self.collection.public_schema.model_validate(row) for row in rows]

    def get(self, item_id: int) -> Optional[BaseModel]:
        row = self.store.get_by_id(item_id)
        if row is None:
            return None
        return self.collection.data_schema.model_validate(row)

    def create(self, payload: Mapping[str, Any]) -> BaseModel:
        """
        Insert a new row.

        New rows are always active; is_active in the payload is ignored.
        """
        fields = self._build_fields(payload)
        fields["is_active"] = True
        created = self.store.create(self.collection.model(**fields))
        logger.info("%s %s added", self.collection.label, created.id)
        return self.collection.data_schema.model_validate(created)

    def update(self, item_id: int, payload: Mapping[str, Any]) -> bool:
        """
        Replace every editable column of a row.

        This is a full-row replace: a payload without is_active hides the row.
        Returns False when the id does not exist; callers do not report it.
        """
        fields = self._build_fields(payload)
        fields["is_active"] = bool(payload.get("is_active"))
        updated = self.store.update(item_id, fields)
        if not updated:
            logger.info(
                "%s %s not found; update had no effect", self.collection.label, item_id
            )
        return updated

    def delete(self, item_id: int) -> bool:
        """Idempotent delete; returns whether a row was removed."""
        return self.store.delete(item_id)


__all__ = ["ContentService", "coerce_sort_order", "is_blank"]
