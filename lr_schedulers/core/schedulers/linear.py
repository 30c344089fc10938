"""
Linear interpolation of a multiplicative factor over a fixed number of steps.
"""

from typing import Optional

from . import validation as check
from ...infrastructure.logging import get_logger

logger = get_logger(__name__)


class LinearLR:
    """
    Linearly changing learning rate.

    The factor moves from ``start_factor`` to ``end_factor`` over
    ``total_iters`` steps and then stays at ``end_factor``:

        lr = base_lr * (start + (end - start) * min(step, total_iters) / total_iters)

    Works as a warmup (start < end) or a decay (start > end).
    """

    def __init__(
        self,
        base_lr: float,
        start_factor: float = 1.0 / 3,
        end_factor: float = 1.0,
        total_iters: int = 5,
        init_step: int = 0,
    ):
        """
        Initialize linear schedule.

        Args:
            base_lr: Learning rate the factors are applied to
            start_factor: Factor at step 0
            end_factor: Factor from step total_iters onwards
            total_iters: Number of steps to interpolate over
            init_step: Starting step (0 to train from scratch)
        """
        self.base_lr = check.non_negative_float("base_lr", base_lr)
        self.start_factor = check.non_negative_float("start_factor", start_factor)
        self.end_factor = check.non_negative_float("end_factor", end_factor)
        self.total_iters = check.positive_int("total_iters", total_iters)
        self._step_count = check.init_step(init_step)
        logger.debug(
            f"LinearLR(base_lr={self.base_lr}, start_factor={self.start_factor}, "
            f"end_factor={self.end_factor}, total_iters={self.total_iters})"
        )

    @property
    def step_count(self) -> int:
        return self._step_count

    def get_lr(self, loss: Optional[float] = None) -> float:
        if self._step_count >= self.total_iters:
            # exact endpoint
            return self.base_lr * self.end_factor
        progress = self._step_count / self.total_iters
        factor = self.start_factor + (self.end_factor - self.start_factor) * progress
        return self.base_lr * factor

    def step(self, loss: Optional[float] = None) -> None:
        self._step_count += 1
