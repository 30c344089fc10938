"""
Polynomial decay to zero over a fixed number of steps.
"""

from typing import Optional

from . import validation as check
from ...infrastructure.logging import get_logger

logger = get_logger(__name__)


class PolynomialLR:
    """
    Polynomial decay.

        lr = base_lr * (1 - min(step, total_iters) / total_iters) ** power

    The rate is exactly 0 once step >= total_iters. power=1 gives linear
    decay, power=2 quadratic.
    """

    def __init__(
        self,
        base_lr: float,
        total_iters: int = 5,
        power: float = 1.0,
        init_step: int = 0,
    ):
        """
        Initialize polynomial schedule.

        Args:
            base_lr: Learning rate at step 0
            total_iters: Step at which the rate reaches 0
            power: Exponent of the decay curve (non-negative)
            init_step: Starting step (0 to train from scratch)
        """
        self.base_lr = check.non_negative_float("base_lr", base_lr)
        self.total_iters = check.positive_int("total_iters", total_iters)
        self.power = check.non_negative_float("power", power)
        self._step_count = check.init_step(init_step)
        logger.debug(
            f"PolynomialLR(base_lr={self.base_lr}, total_iters={self.total_iters}, "
            f"power={self.power})"
        )

    @property
    def step_count(self) -> int:
        return self._step_count

    def get_lr(self, loss: Optional[float] = None) -> float:
        if self._step_count >= self.total_iters:
            return 0.0
        remaining = 1.0 - self._step_count / self.total_iters
        return self.base_lr * remaining ** self.power

    def step(self, loss: Optional[float] = None) -> None:
        self._step_count += 1
