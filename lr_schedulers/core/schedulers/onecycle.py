"""
One-cycle learning rate policy.

Based on: https://arxiv.org/abs/1708.07120 (Super-Convergence)

Learning rate schedule:
1. Warmup: initial_lr -> max_lr over the first pct_start of training
2. Anneal: max_lr -> final_lr (two-phase) or max_lr -> initial_lr (three-phase)
3. Cooldown (three-phase only): initial_lr -> final_lr
"""

import math
from typing import Callable, Dict, List, NamedTuple, Optional

from . import validation as check
from .protocol import ScheduleConfigError
from ...infrastructure.logging import get_logger

logger = get_logger(__name__)


def linear_interpolation(start: float, end: float, fraction: float) -> float:
    return start + (end - start) * fraction


def cosine_interpolation(start: float, end: float, fraction: float) -> float:
    return start + (end - start) * (1 - math.cos(math.pi * fraction)) / 2


ANNEAL_STRATEGIES: Dict[str, Callable[[float, float, float], float]] = {
    "linear": linear_interpolation,
    "cos": cosine_interpolation,
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class Phase(NamedTuple):
    """Contiguous range of steps [start, end) interpolating start_lr -> end_lr."""
    start: int
    end: int
    start_lr: float
    end_lr: float


class OneCycleLR:
    """
    One-cycle policy over a fixed number of steps.

    Phase boundaries:
        up_end   = round(pct_start * total_steps)
        down_end = total_steps                                  (two-phase)
                 = total_steps - round(final_pct * total_steps) (three-phase)

    A boundary step belongs to the phase it starts, so the rate is exactly
    ``max_lr`` at ``up_end``. From ``total_steps`` onwards the rate stays at
    ``final_lr``.
    """

    def __init__(
        self,
        max_lr: float,
        total_steps: int,
        pct_start: float = 0.3,
        anneal_strategy: str = "cos",
        div_factor: float = 25.0,
        final_div_factor: float = 1e4,
        three_phase: bool = False,
        final_pct: Optional[float] = None,
        init_step: int = 0,
    ):
        """
        Initialize one-cycle schedule.

        Args:
            max_lr: Peak learning rate
            total_steps: Length of the cycle
            pct_start: Fraction of steps spent warming up
            anneal_strategy: Interpolation kernel, "cos" or "linear"
            div_factor: initial_lr = max_lr / div_factor
            final_div_factor: final_lr = initial_lr / final_div_factor
            three_phase: Add a cooldown phase from initial_lr to final_lr
            final_pct: Fraction of steps in the cooldown phase; implies
                three_phase when positive (defaults to (1 - pct_start) / 2)
            init_step: Starting step (0 to train from scratch)
        """
        self.max_lr = check.non_negative_float("max_lr", max_lr)
        self.total_steps = check.positive_int("total_steps", total_steps)
        self.pct_start = check.float_in_range("pct_start", pct_start, 0.0, 1.0)
        self.anneal_strategy = check.choice(
            "anneal_strategy", anneal_strategy, tuple(ANNEAL_STRATEGIES)
        )
        self.div_factor = check.positive_float("div_factor", div_factor)
        self.final_div_factor = check.positive_float("final_div_factor", final_div_factor)

        if final_pct is not None:
            final_pct = check.float_in_range("final_pct", final_pct, 0.0, 1.0)
            three_phase = three_phase or final_pct > 0
        elif three_phase:
            final_pct = (1.0 - self.pct_start) / 2
        else:
            final_pct = 0.0
        # A cooldown of zero steps is the two-phase schedule
        self.three_phase = bool(three_phase) and final_pct > 0
        self.final_pct = final_pct

        self.initial_lr = self.max_lr / self.div_factor
        self.final_lr = self.initial_lr / self.final_div_factor

        self.up_end = _round_half_up(self.pct_start * self.total_steps)
        if self.three_phase:
            self.down_end = self.total_steps - _round_half_up(self.final_pct * self.total_steps)
        else:
            self.down_end = self.total_steps
        if self.up_end > self.down_end:
            raise ScheduleConfigError(
                f"pct_start ({self.pct_start}) and final_pct ({self.final_pct}) "
                f"overlap: warmup ends at step {self.up_end} after annealing "
                f"ends at step {self.down_end}"
            )

        self.phases = self._build_phases()
        self._interpolate = ANNEAL_STRATEGIES[self.anneal_strategy]
        self._step_count = check.init_step(init_step)
        logger.debug(
            f"OneCycleLR(max_lr={self.max_lr}, total_steps={self.total_steps}, "
            f"phases={[(p.start, p.end) for p in self.phases]}, "
            f"strategy={self.anneal_strategy})"
        )

    def _build_phases(self) -> List[Phase]:
        phases = [Phase(0, self.up_end, self.initial_lr, self.max_lr)]
        if self.three_phase:
            phases.append(Phase(self.up_end, self.down_end, self.max_lr, self.initial_lr))
            phases.append(Phase(self.down_end, self.total_steps, self.initial_lr, self.final_lr))
        else:
            phases.append(Phase(self.up_end, self.total_steps, self.max_lr, self.final_lr))
        # Zero-length phases are never entered
        return [p for p in phases if p.end > p.start]

    @property
    def step_count(self) -> int:
        return self._step_count

    def get_lr(self, loss: Optional[float] = None) -> float:
        s = self._step_count
        if s >= self.total_steps:
            return self.final_lr
        for phase in self.phases:
            if s < phase.end:
                fraction = (s - phase.start) / (phase.end - phase.start)
                return self._interpolate(phase.start_lr, phase.end_lr, fraction)
        return self.final_lr

    def step(self, loss: Optional[float] = None) -> None:
        self._step_count += 1
