"""
Constant learning rate, optionally scaled for an initial span of steps.
"""

from typing import Optional

from . import validation as check
from ...infrastructure.logging import get_logger

logger = get_logger(__name__)


class ConstantLR:
    """
    Constant learning rate with an optional scaled prefix.

    Learning rate schedule:
    1. ``base_lr * factor`` while step < total_iters
    2. ``base_lr`` from step total_iters onwards

    With the defaults (factor=1.0, total_iters=0) the rate is simply
    ``base_lr`` at every step.

    Usage:
        schedule = ConstantLR(base_lr=1.0, factor=2.0, total_iters=2)
        # get_lr() yields 2.0, 2.0, 1.0, 1.0, ... between steps
    """

    def __init__(
        self,
        base_lr: float,
        factor: float = 1.0,
        total_iters: int = 0,
        init_step: int = 0,
    ):
        """
        Initialize constant schedule.

        Args:
            base_lr: Learning rate after the scaled prefix
            factor: Multiplier applied while step < total_iters
            total_iters: Length of the scaled prefix (0 disables it)
            init_step: Starting step (0 to train from scratch)
        """
        self.base_lr = check.non_negative_float("base_lr", base_lr)
        self.factor = check.non_negative_float("factor", factor)
        self.total_iters = check.non_negative_int("total_iters", total_iters)
        self._step_count = check.init_step(init_step)
        logger.debug(
            f"ConstantLR(base_lr={self.base_lr}, factor={self.factor}, "
            f"total_iters={self.total_iters}) starting at step {self._step_count}"
        )

    @property
    def step_count(self) -> int:
        return self._step_count

    def get_lr(self, loss: Optional[float] = None) -> float:
        if self._step_count < self.total_iters:
            return self.base_lr * self.factor
        return self.base_lr

    def step(self, loss: Optional[float] = None) -> None:
        self._step_count += 1
