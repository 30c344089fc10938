"""
Cosine annealing learning rate schedules.

Based on: https://arxiv.org/abs/1608.03983

- CosineAnnealingLR: single half-cosine from eta_max down to eta_min
- CosineAnnealingWarmRestarts: repeated half-cosines, each period
  optionally longer than the last
"""

import math
from typing import Optional

from . import validation as check
from .protocol import ScheduleConfigError
from ...infrastructure.logging import get_logger

logger = get_logger(__name__)


def cosine_annealing(eta_max: float, eta_min: float, t: int, t_max: int) -> float:
    """Half-cosine from eta_max (t=0) to eta_min (t=t_max)."""
    cosine = math.cos(math.pi * t / t_max)
    return eta_min + 0.5 * (eta_max - eta_min) * (1 + cosine)


class CosineAnnealingLR:
    """
    Cosine annealing without restarts.

    Learning rate schedule:
    1. Cosine decay from eta_max to eta_min over t_max steps
    2. Flat at eta_min afterwards
    """

    def __init__(
        self,
        eta_max: float,
        eta_min: float,
        t_max: int,
        init_step: int = 0,
    ):
        """
        Initialize cosine scheduler.

        Args:
            eta_max: Learning rate at step 0
            eta_min: Floor learning rate
            t_max: Steps to reach eta_min
            init_step: Starting step (0 to train from scratch)
        """
        self.eta_max = check.non_negative_float("eta_max", eta_max)
        self.eta_min = check.non_negative_float("eta_min", eta_min)
        if self.eta_min > self.eta_max:
            raise ScheduleConfigError(
                f"eta_min ({self.eta_min}) must not exceed eta_max ({self.eta_max})"
            )
        self.t_max = check.positive_int("t_max", t_max)
        self._step_count = check.init_step(init_step)
        logger.debug(
            f"CosineAnnealingLR(eta_max={self.eta_max}, eta_min={self.eta_min}, "
            f"t_max={self.t_max})"
        )

    @property
    def step_count(self) -> int:
        return self._step_count

    def get_lr(self, loss: Optional[float] = None) -> float:
        t = min(self._step_count, self.t_max)
        return cosine_annealing(self.eta_max, self.eta_min, t, self.t_max)

    def step(self, loss: Optional[float] = None) -> None:
        self._step_count += 1


class CosineAnnealingWarmRestarts:
    """
    Cosine annealing with warm restarts (SGDR).

    The learning rate follows a half-cosine over the current period of
    ``t_i`` steps. When ``t_cur`` reaches ``t_i`` the rate jumps back to
    eta_max and the next period is ``t_i * t_mult`` steps long.

    Invariant: 0 <= t_cur < t_i, and t_i never shrinks.
    """

    def __init__(
        self,
        eta_max: float,
        eta_min: float,
        t_0: int,
        t_mult: int = 1,
        init_step: int = 0,
    ):
        """
        Initialize warm-restart scheduler.

        Args:
            eta_max: Learning rate at the start of every period
            eta_min: Learning rate approached at the end of each period
            t_0: Length of the first period
            t_mult: Period growth factor applied at each restart (>= 1)
            init_step: Starting step (0 to train from scratch)
        """
        self.eta_max = check.non_negative_float("eta_max", eta_max)
        self.eta_min = check.non_negative_float("eta_min", eta_min)
        if self.eta_min > self.eta_max:
            raise ScheduleConfigError(
                f"eta_min ({self.eta_min}) must not exceed eta_max ({self.eta_max})"
            )
        self.t_0 = check.positive_int("t_0", t_0)
        self.t_mult = check.positive_int("t_mult", t_mult)
        self._step_count = check.init_step(init_step)
        self.t_cur, self.t_i = self._locate(self._step_count)
        logger.debug(
            f"CosineAnnealingWarmRestarts(eta_max={self.eta_max}, eta_min={self.eta_min}, "
            f"t_0={self.t_0}, t_mult={self.t_mult}) at t_cur={self.t_cur}, t_i={self.t_i}"
        )

    def _locate(self, step: int):
        """Return (t_cur, t_i) for an absolute step count."""
        if self.t_mult == 1:
            return step % self.t_0, self.t_0
        t_cur, t_i = step, self.t_0
        while t_cur >= t_i:
            t_cur -= t_i
            t_i *= self.t_mult
        return t_cur, t_i

    @property
    def step_count(self) -> int:
        return self._step_count

    def get_lr(self, loss: Optional[float] = None) -> float:
        return cosine_annealing(self.eta_max, self.eta_min, self.t_cur, self.t_i)

    def step(self, loss: Optional[float] = None) -> None:
        self._step_count += 1
        self.t_cur += 1
        if self.t_cur >= self.t_i:
            self.t_cur = 0
            self.t_i *= self.t_mult
            logger.debug(
                f"Warm restart at step {self._step_count}; next period {self.t_i} steps"
            )
