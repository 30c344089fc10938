"""
Schedule Protocol - the capability every learning-rate strategy implements.

Strategies are independent leaf classes; they share this structural
interface, not a base class.
"""

from typing import Optional, Protocol, runtime_checkable


class ScheduleConfigError(ValueError):
    """Raised when a schedule is constructed with invalid arguments."""


@runtime_checkable
class Schedule(Protocol):
    """
    Protocol defining the interface all schedules implement.

    Usage:
        for batch in loader:
            lr = schedule.get_lr()
            loss = train_step(batch, lr)
            schedule.step(loss)

    Only ReduceLROnPlateau consumes ``loss``; every other schedule accepts
    and ignores it, so ``None`` is always safe for them.
    """

    @property
    def step_count(self) -> int:
        """Number of steps taken, including ``init_step``."""
        ...

    def get_lr(self, loss: Optional[float] = None) -> float:
        """
        Return the learning rate for the current step.

        Does not mutate state: repeated calls before the next ``step``
        return the same value.

        Args:
            loss: Ignored; accepted so callers can treat schedules uniformly

        Returns:
            Current learning rate
        """
        ...

    def step(self, loss: Optional[float] = None) -> None:
        """
        Advance the schedule by one iteration.

        Args:
            loss: Most recent metric (required only by ReduceLROnPlateau)
        """
        ...
