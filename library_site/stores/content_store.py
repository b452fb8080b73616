"""Data access for the ordered site content tables."""

from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar

from library_site.core.error_codes import DatabaseErrorCode
from library_site.core.exceptions import DatabaseException
from library_site.core.logger import get_logger
from library_site.models import BaseDBModel
from library_site.stores.database import database_session

logger = get_logger(__name__)

ContentModel = TypeVar("ContentModel", bound=BaseDBModel)


class ContentStore(Generic[ContentModel]):
    """
    CRUD operations for one content table (slides, gallery, shifts, facilities).

    Rows are always returned ascending by sort_order, ties in insertion order.
    """

    def __init__(self, model: Type[ContentModel]) -> None:
        self.model = model
        self.table = model.__tablename__

    def _ordered(self, query: Any) -> Any:
        return query.order_by(self.model.sort_order.asc(), self.model.id.asc())

    def list_all(self, active_only: bool = False) -> List[ContentModel]:
        try:
            with database_session() as db:
                query = db.query(self.model)
                if active_only:
                    query = query.filter(self.model.is_active.is_(True))
                return self._ordered(query).all()
        except Exception as exc:
            logger.error("Failed to list %s: %s", self.table, exc)
            raise DatabaseException(
                f"Failed to list {self.table}", DatabaseErrorCode.QUERY_FAILED
            ) from exc

    def get_by_id(self, item_id: int) -> Optional[ContentModel]:
        try:
            with database_session() as db:
                return db.get(self.model, item_id)
        except Exception as exc:
            logger.error("Failed to fetch %s %s: %s", self.table, item_id, exc)
            raise DatabaseException(
                f"Failed to fetch from {self.table}", DatabaseErrorCode.QUERY_FAILED
            ) from exc

    def create(self, item: ContentModel) -> ContentModel:
        try:
            with database_session() as db:
                db.add(item)
                db.commit()
                db.refresh(item)
                logger.info("Created %s row %s", self.table, item.id)
                return item
        except Exception as exc:
            logger.error("Failed to create %s row: %s", self.table, exc)
            raise DatabaseException(
                f"Failed to insert into {self.table}", DatabaseErrorCode.QUERY_FAILED
            ) from exc

    def update(self, item_id: int, fields: Mapping[str, Any]) -> bool:
        """Overwrite the given columns; returns False when no row has that id."""
        try:
            with database_session() as db:
                item = db.get(self.model, item_id)
                if item is None:
                    return False
                for column, value in fields.items():
                    setattr(item, column, value)
                db.commit()
                logger.info("Updated %s row %s", self.table, item_id)
                return True
        except Exception as exc:
            logger.error("Failed to update %s row %s: %s", self.table, item_id, exc)
            raise DatabaseException(
                f"Failed to update {self.table}", DatabaseErrorCode.QUERY_FAILED
            ) from exc

    def delete(self, item_id: int) -> bool:
        """Remove the row if present; returns whether a row was removed."""
        try:
            with database_session() as db:
                deleted = (
                    db.query(self.model)
                    .filter(self.model.id == item_id)
                    .delete(synchronize_session=False)
                )
                db.commit()
                if deleted:
                    logger.info("Deleted %s row %s", self.table, item_id)
                return bool(deleted)
        except Exception as exc:
            logger.error("Failed to delete %s row %s: %s", self.table, item_id, exc)
            raise DatabaseException(
                f"Failed to delete from {self.table}", DatabaseErrorCode.QUERY_FAILED
            ) from exc


__all__ = ["ContentStore"]
