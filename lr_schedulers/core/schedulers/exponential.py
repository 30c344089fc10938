"""
Geometric decay: lr = base_lr * gamma ** step.
"""

from typing import Optional

from . import validation as check
from ...infrastructure.logging import get_logger

logger = get_logger(__name__)


class ExponentialLR:
    """Multiply the learning rate by ``gamma`` every step."""

    def __init__(self, base_lr: float, gamma: float, init_step: int = 0):
        """
        Initialize exponential schedule.

        Args:
            base_lr: Learning rate at step 0
            gamma: Per-step multiplier (must be positive)
            init_step: Starting step (0 to train from scratch)
        """
        self.base_lr = check.non_negative_float("base_lr", base_lr)
        self.gamma = check.positive_float("gamma", gamma)
        self._step_count = check.init_step(init_step)
        logger.debug(f"ExponentialLR(base_lr={self.base_lr}, gamma={self.gamma})")

    @property
    def step_count(self) -> int:
        return self._step_count

    def get_lr(self, loss: Optional[float] = None) -> float:
        return self.base_lr * self.gamma ** self._step_count

    def step(self, loss: Optional[float] = None) -> None:
        self._step_count += 1
