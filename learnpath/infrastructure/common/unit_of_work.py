"""SQLAlchemy implementation of the UnitOfWork port."""

import structlog
from sqlalchemy.orm import Session

from learnpath.application.common.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Unit of work bound to one SQLAlchemy session shared with the repositories."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        logger.debug("unit_of_work_rollback")
        self.db.rollback()
