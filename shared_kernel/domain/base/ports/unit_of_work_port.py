"""Unit of work port."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Port for transactional boundaries around entity changes.

    Used as a context manager: commits when the block succeeds and rolls
    back when it raises.
    """

    @abstractmethod
    def begin(self) -> None:
        """Begin a transaction."""

    @abstractmethod
    def commit(self) -> None:
        """Commit the current transaction."""

    @abstractmethod
    def rollback(self) -> None:
        """Roll back the current transaction."""

    def __enter__(self) -> "UnitOfWork":
        self.begin()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False
