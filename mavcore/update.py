"""In-place updates of one object from another."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

__all__ = ["TryUpdateFrom"]

T = TypeVar("T")


class TryUpdateFrom(ABC, Generic[T]):
    """Updates internal state using a value of another type.

    Subclasses implement :meth:`check_try_update_from`, which raises when
    the update is impossible, and :meth:`update_from_unchecked`, which
    performs it. All checks must happen before any state changes.
    """

    def try_update_from(self, value: T) -> None:
        """Check that the update is possible, then perform it.

        Raises whatever :meth:`check_try_update_from` raises, leaving
        the object untouched.
        """
        self.check_try_update_from(value)
        self.update_from_unchecked(value)

    @abstractmethod
    def check_try_update_from(self, value: T) -> None:
        """Raise an exception if updating from ``value`` is impossible."""

    @abstractmethod
    def update_from_unchecked(self, value: T) -> None:
        """Perform the update without checking that it is possible."""