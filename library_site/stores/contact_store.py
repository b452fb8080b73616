"""Contact submission data access layer."""

from typing import List

from library_site.core.error_codes import DatabaseErrorCode
from library_site.core.exceptions import DatabaseException
from library_site.core.logger import get_logger
from library_site.models import ContactSubmission
from library_site.stores.database import database_session

logger = get_logger(__name__)


class ContactStore:
    """Store class encapsulating operations on contact submissions."""

    def create(self, submission: ContactSubmission) -> ContactSubmission:
        try:
            with database_session() as db:
                db.add(submission)
                db.commit()
                db.refresh(submission)
                logger.info("Stored contact submission %s", submission.id)
                return submission
        except Exception as exc:
            logger.error("Failed to store contact submission: %s", exc)
            raise DatabaseException(
                "Failed to store contact submission", DatabaseErrorCode.QUERY_FAILED
            ) from exc

    def list_submissions(self) -> List[ContactSubmission]:
        """Newest first."""
        try:
            with database_session() as db:
                return (
                    db.query(ContactSubmission)
                    .order_by(
                        ContactSubmission.created_at.desc(),
                        ContactSubmission.id.desc(),
                    )
                    .all()
                )
        except Exception as exc:
            logger.error("Failed to list contact submissions: %s", exc)
            raise DatabaseException(
                "Failed to list contact submissions", DatabaseErrorCode.QUERY_FAILED
            ) from exc

    def count(self) -> int:
        try:
            with database_session() as db:
                return db.query(ContactSubmission).count()
        except Exception as exc:
            logger.error("Failed to count contact submissions: %s", exc)
            raise DatabaseException(
                "Failed to count contact submissions", DatabaseErrorCode.QUERY_FAILED
            ) from exc

    def mark_read(self, submission_id: int) -> bool:
        try:
            with database_session() as db:
                updated = (
                    db.query(ContactSubmission)
                    .filter(ContactSubmission.id == submission_id)
                    .update({ContactSubmission.is_read: True}, synchronize_session=False)
                )
                db.commit()
                return bool(updated)
        except Exception as exc:
            logger.error("Failed to mark submission %s read: %s", submission_id, exc)
            raise DatabaseException(
                "Failed to update contact submission", DatabaseErrorCode.QUERY_FAILED
            ) from exc

    def delete(self, submission_id: int) -> bool:
        try:
            with database_session() as db:
                deleted = (
                    db.query(ContactSubmission)
                    .filter(ContactSubmission.id == submission_id)
                    .delete(synchronize_session=False)
                )
                db.commit()
                if deleted:
                    logger.info("Deleted contact submission %s", submission_id)
                return bool(deleted)
        except Exception as exc:
            logger.error("Failed to delete submission %s: %s", submission_id, exc)
            raise DatabaseException(
                "Failed to delete contact submission", DatabaseErrorCode.QUERY_FAILED
            ) from exc


__all__ = ["ContactStore"]
