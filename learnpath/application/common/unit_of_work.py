"""
Unit of Work interface.

Every public use case operation runs inside one unit of work: read the
current rows, compute the next state, write everything back and commit
once. Repositories only flush.

Example:
    class ModuleUseCase:
        def delete_module(self, module_id: int, access: CourseAccess) -> None:
            with self.uow:
                module = self.module_repository.find_by_id(ModuleId(module_id))
                ...
                self.module_repository.update_order_indices(changed)
                self.module_repository.delete(module.id)
                self.uow.commit()
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Manages database transactions
    - Ensures atomicity of operations
    - Can be used as a context manager

    Infrastructure layer provides concrete implementations
    (e.g., SQLAlchemyUnitOfWork).
    """

    @abstractmethod
    def commit(self) -> None:
        """Commit the current transaction."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Rollback the current transaction."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()
