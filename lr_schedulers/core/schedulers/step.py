"""
Piecewise-constant decay schedules.

- StepLR: decay by gamma every ``step_size`` steps
- MultiStepLR: decay by gamma at each milestone
"""

from bisect import bisect_right
from typing import List, Optional, Sequence

from . import validation as check
from ...infrastructure.logging import get_logger

logger = get_logger(__name__)


class StepLR:
    """
    Decay the learning rate by ``gamma`` every ``step_size`` steps.

        lr = base_lr * gamma ** (step // step_size)
    """

    def __init__(
        self,
        base_lr: float,
        step_size: int,
        gamma: float = 0.1,
        init_step: int = 0,
    ):
        """
        Initialize step schedule.

        Args:
            base_lr: Learning rate before the first decay
            step_size: Steps between decays
            gamma: Multiplier applied at each decay
            init_step: Starting step (0 to train from scratch)
        """
        self.base_lr = check.non_negative_float("base_lr", base_lr)
        self.step_size = check.positive_int("step_size", step_size)
        self.gamma = check.positive_float("gamma", gamma)
        self._step_count = check.init_step(init_step)
        logger.debug(
            f"StepLR(base_lr={self.base_lr}, step_size={self.step_size}, "
            f"gamma={self.gamma})"
        )

    @property
    def step_count(self) -> int:
        return self._step_count

    def get_lr(self, loss: Optional[float] = None) -> float:
        return self.base_lr * self.gamma ** (self._step_count // self.step_size)

    def step(self, loss: Optional[float] = None) -> None:
        self._step_count += 1


class MultiStepLR:
    """
    Decay the learning rate by ``gamma`` once the step reaches each milestone.

        lr = base_lr * gamma ** (number of milestones <= step)

    Milestones must be strictly increasing; lookup is a binary search.
    """

    def __init__(
        self,
        base_lr: float,
        milestones: Sequence[int],
        gamma: float = 0.1,
        init_step: int = 0,
    ):
        """
        Initialize multi-step schedule.

        Args:
            base_lr: Learning rate before the first milestone
            milestones: Strictly increasing step indices
            gamma: Multiplier applied at each milestone
            init_step: Starting step (0 to train from scratch)
        """
        self.base_lr = check.non_negative_float("base_lr", base_lr)
        self.milestones: List[int] = check.strictly_increasing("milestones", milestones)
        self.gamma = check.positive_float("gamma", gamma)
        self._step_count = check.init_step(init_step)
        logger.debug(
            f"MultiStepLR(base_lr={self.base_lr}, milestones={self.milestones}, "
            f"gamma={self.gamma})"
        )

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def milestones_passed(self) -> int:
        return bisect_right(self.milestones, self._step_count)

    def get_lr(self, loss: Optional[float] = None) -> float:
        return self.base_lr * self.gamma ** self.milestones_passed

    def step(self, loss: Optional[float] = None) -> None:
        self._step_count += 1
