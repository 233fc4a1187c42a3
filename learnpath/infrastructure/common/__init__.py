from .clock import SystemClock
from .unit_of_work import SQLAlchemyUnitOfWork

__all__ = ["SQLAlchemyUnitOfWork", "SystemClock"]
