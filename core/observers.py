# core/observers.py

"""
Grade notification channel for the Roster.

A `GradeTracker` keeps an ordered list of observers and fans out each recorded grade
to all of them. Delivery is synchronous and follows registration order. An observer
that raises is logged and skipped, so one faulty observer can neither block delivery
to the observers after it nor fail the grade insertion that triggered the fan-out.
"""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class GradeObserver(Protocol):
    def update(self, student_name: str, grade: int) -> None: ...


class GradeTracker:

    def __init__(self):
        self._observers: list[GradeObserver] = []

    # === properties ===

    @property
    def observers(self) -> list[GradeObserver]:
        return self._observers.copy()

    # === data manipulators ===

    def register(self, observer: GradeObserver) -> None:
        # duplicates are allowed and will be notified once per registration
        self._observers.append(observer)

    def unregister(self, observer: GradeObserver) -> None:
        try:
            self._observers.remove(observer)
        except ValueError:
            logger.debug("Observer %r was not registered; nothing removed.", observer)

    def notify(self, student_name: str, grade: int) -> None:
        """
        Delivers a recorded grade to every registered observer.

        Args:
            student_name (str): The full name of the student who received the grade.
            grade (int): The grade that was recorded.

        Notes:
            - Observers are called in registration order, on the calling thread.
            - Iterates over a snapshot, so observers may register or unregister during delivery without affecting the current fan-out.
            - Exceptions raised by an observer are logged and do not propagate.
        """
        for observer in self._observers.copy():
            try:
                observer.update(student_name, grade)
            except Exception:
                logger.exception(
                    "Observer %r failed while handling grade %s for %s.",
                    observer,
                    grade,
                    student_name,
                )

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._observers)


class LoggingGradeObserver:
    """Writes every recorded grade to the `core.observers` logger at INFO level."""

    def update(self, student_name: str, grade: int) -> None:
        logger.info("Grade recorded: %s received %s.", student_name, grade)
