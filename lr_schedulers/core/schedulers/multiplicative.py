"""
Multiplicative schedule driven by a caller-supplied factor function.
"""

from typing import Callable, Optional

from . import validation as check
from .protocol import ScheduleConfigError
from ...infrastructure.logging import get_logger

logger = get_logger(__name__)


class MultiplicativeLR:
    """
    Multiply the running learning rate by ``lr_lambda(step)`` on every step.

    The factor compounds onto the previous rate, not onto ``base_lr``.

    Contract for ``lr_lambda``:
    - pure function of the 0-based step index, no side effects
    - called exactly once per ``step``, with the index before the increment
    - held for the lifetime of the schedule

    Resuming with ``init_step=k`` replays ``lr_lambda(0) .. lr_lambda(k-1)``,
    which is only equivalent to the original run if the function is pure.
    The running product is never clamped.

    Usage:
        schedule = MultiplicativeLR(1.0, lambda step: 0.9 if step < 3 else 0.95)
    """

    def __init__(
        self,
        base_lr: float,
        lr_lambda: Callable[[int], float],
        init_step: int = 0,
    ):
        """
        Initialize multiplicative schedule.

        Args:
            base_lr: Learning rate at step 0
            lr_lambda: Step-indexed factor function
            init_step: Starting step (0 to train from scratch)
        """
        self.base_lr = check.non_negative_float("base_lr", base_lr)
        if not callable(lr_lambda):
            raise ScheduleConfigError(f"lr_lambda must be callable, got {lr_lambda!r}")
        self.lr_lambda = lr_lambda
        self._step_count = 0
        self.current_lr = self.base_lr
        for _ in range(check.init_step(init_step)):
            self.step()
        logger.debug(
            f"MultiplicativeLR(base_lr={self.base_lr}) resumed at step "
            f"{self._step_count} with lr={self.current_lr}"
        )

    @property
    def step_count(self) -> int:
        return self._step_count

    def get_lr(self, loss: Optional[float] = None) -> float:
        return self.current_lr

    def step(self, loss: Optional[float] = None) -> None:
        self.current_lr *= self.lr_lambda(self._step_count)
        self._step_count += 1
