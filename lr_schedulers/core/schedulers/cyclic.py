"""
Cyclical learning rate (triangular wave between two bounds).

Based on: https://arxiv.org/abs/1506.01186
"""

from typing import Callable, Optional

from . import validation as check
from .protocol import ScheduleConfigError
from ...infrastructure.logging import get_logger

logger = get_logger(__name__)

CYCLIC_MODES = ("triangular", "triangular2", "exp_range")
SCALE_MODES = ("cycle", "iterations")


class CyclicLR:
    """
    Cycle the learning rate between ``base_lr`` and ``max_lr``.

    One cycle is ``step_size_up`` rising steps followed by
    ``step_size_down`` falling steps. With position p = step mod cycle:

        p <  up:  lr = base_lr + amplitude * p / up
        p >= up:  lr = base_lr + amplitude * (1 - (p - up) / down)

    where amplitude = (max_lr - base_lr) * scale and the scale depends on
    ``mode``:
    - triangular: 1
    - triangular2: halves every cycle
    - exp_range: gamma ** step

    A custom ``scale_fn`` overrides ``mode``. It receives the 1-based cycle
    number (scale_mode="cycle") or the position inside the cycle
    (scale_mode="iterations") and must be a pure function.
    """

    def __init__(
        self,
        base_lr: float,
        max_lr: float,
        step_size_up: int = 2000,
        step_size_down: Optional[int] = None,
        mode: str = "triangular",
        gamma: float = 1.0,
        scale_fn: Optional[Callable[[float], float]] = None,
        scale_mode: str = "cycle",
        init_step: int = 0,
    ):
        """
        Initialize cyclic schedule.

        Args:
            base_lr: Lower bound of the cycle
            max_lr: Upper bound of the cycle
            step_size_up: Steps in the rising half
            step_size_down: Steps in the falling half (defaults to step_size_up)
            mode: "triangular", "triangular2" or "exp_range"
            gamma: Per-step amplitude decay for exp_range
            scale_fn: Custom amplitude scaling (overrides mode)
            scale_mode: Argument passed to scale_fn: "cycle" or "iterations"
            init_step: Starting step (0 to train from scratch)
        """
        self.base_lr = check.non_negative_float("base_lr", base_lr)
        self.max_lr = check.non_negative_float("max_lr", max_lr)
        if self.max_lr < self.base_lr:
            raise ScheduleConfigError(
                f"max_lr ({self.max_lr}) must not be below base_lr ({self.base_lr})"
            )
        self.step_size_up = check.positive_int("step_size_up", step_size_up)
        if step_size_down is None:
            step_size_down = self.step_size_up
        self.step_size_down = check.positive_int("step_size_down", step_size_down)
        self.mode = check.choice("mode", mode, CYCLIC_MODES)
        self.gamma = check.positive_float("gamma", gamma)
        if scale_fn is not None and not callable(scale_fn):
            raise ScheduleConfigError(f"scale_fn must be callable, got {scale_fn!r}")
        self.scale_fn = scale_fn
        self.scale_mode = check.choice("scale_mode", scale_mode, SCALE_MODES)
        self._step_count = check.init_step(init_step)
        logger.debug(
            f"CyclicLR(base_lr={self.base_lr}, max_lr={self.max_lr}, "
            f"up={self.step_size_up}, down={self.step_size_down}, mode={self.mode})"
        )

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def cycle_length(self) -> int:
        return self.step_size_up + self.step_size_down

    @property
    def cycle(self) -> int:
        """1-based index of the current cycle."""
        return 1 + self._step_count // self.cycle_length

    def _position(self) -> float:
        """Fraction of the way from base_lr to max_lr, in [0, 1]."""
        p = self._step_count % self.cycle_length
        if p < self.step_size_up:
            return p / self.step_size_up
        return 1.0 - (p - self.step_size_up) / self.step_size_down

    def _scale(self) -> float:
        if self.scale_fn is not None:
            if self.scale_mode == "cycle":
                return float(self.scale_fn(self.cycle))
            return float(self.scale_fn(self._step_count % self.cycle_length))
        if self.mode == "triangular2":
            return 1.0 / (2.0 ** (self.cycle - 1))
        if self.mode == "exp_range":
            return self.gamma ** self._step_count
        return 1.0

    def get_lr(self, loss: Optional[float] = None) -> float:
        amplitude = (self.max_lr - self.base_lr) * self._scale()
        return self.base_lr + amplitude * self._position()

    def step(self, loss: Optional[float] = None) -> None:
        self._step_count += 1
