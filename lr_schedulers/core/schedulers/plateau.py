"""
Reduce the learning rate when a monitored metric stops improving.

The only schedule that consumes the loss signal. State machine:

    Watching --(num_bad_epochs > patience)--> reduce lr --> Cooldown
    Cooldown --(cooldown_counter reaches 0)--> Watching
"""

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from . import validation as check
from .protocol import ScheduleConfigError
from ...infrastructure.logging import get_logger

logger = get_logger(__name__)

PLATEAU_MODES = ("min", "max")
THRESHOLD_MODES = ("abs", "rel")


@dataclass
class PlateauState:
    """
    Adaptive history of a ReduceLROnPlateau.

    A step count alone cannot rebuild this history, so resuming training
    passes a snapshot back in through ``ReduceLROnPlateau(state=...)``.
    """
    lr: float
    best: Optional[float] = None  # None until the first metric is observed
    num_bad_epochs: int = 0
    cooldown_counter: int = 0
    step_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlateauState":
        return cls(**data)


class ReduceLROnPlateau:
    """
    Multiply the learning rate by ``factor`` after a plateau.

    A plateau is more than ``patience`` consecutive observations without
    improvement. After each reduction the schedule waits ``cooldown``
    observations before counting bad epochs again.

    Improvement (threshold_mode="abs"):
    - mode="min": metric < best - threshold
    - mode="max": metric > best + threshold
    With threshold_mode="rel" the margin is ``best * threshold``.

    The first observed metric seeds ``best``. A NaN metric counts as "no
    improvement" and never replaces ``best``.

    Usage:
        schedule = ReduceLROnPlateau(init_lr=1e-3, patience=5)
        for epoch in range(num_epochs):
            train(lr=schedule.get_lr())
            schedule.step(validate())
    """

    def __init__(
        self,
        init_lr: float,
        mode: str = "min",
        factor: float = 0.1,
        patience: int = 10,
        threshold: float = 1e-4,
        threshold_mode: str = "abs",
        cooldown: int = 0,
        min_lr: float = 0.0,
        eps: float = 1e-8,
        state: Optional[PlateauState] = None,
    ):
        """
        Initialize plateau schedule.

        Args:
            init_lr: Starting learning rate
            mode: "min" for loss-like metrics, "max" for accuracy-like metrics
            factor: Reduction multiplier, in (0, 1)
            patience: Bad observations tolerated before reducing
            threshold: Minimum change that counts as improvement
            threshold_mode: "abs" or "rel"
            cooldown: Observations to skip after a reduction
            min_lr: Lower bound on the learning rate
            eps: Reductions smaller than this are ignored
            state: Snapshot from ``snapshot()`` to resume from
        """
        self.init_lr = check.non_negative_float("init_lr", init_lr)
        self.mode = check.choice("mode", mode, PLATEAU_MODES)
        self.factor = check.float_in_range(
            "factor", factor, 0.0, 1.0, include_low=False, include_high=False
        )
        self.patience = check.non_negative_int("patience", patience)
        self.threshold = check.non_negative_float("threshold", threshold)
        self.threshold_mode = check.choice("threshold_mode", threshold_mode, THRESHOLD_MODES)
        self.cooldown = check.non_negative_int("cooldown", cooldown)
        self.min_lr = check.non_negative_float("min_lr", min_lr)
        self.eps = check.non_negative_float("eps", eps)

        if state is None:
            state = PlateauState(lr=self.init_lr)
        self._restore(state)
        logger.debug(
            f"ReduceLROnPlateau(init_lr={self.init_lr}, mode={self.mode}, "
            f"factor={self.factor}, patience={self.patience}, cooldown={self.cooldown})"
        )

    def _restore(self, state: PlateauState) -> None:
        self.current_lr = check.non_negative_float("state.lr", state.lr)
        if state.best is not None and math.isnan(state.best):
            raise ScheduleConfigError("state.best must not be NaN")
        self.best = state.best
        self.num_bad_epochs = check.non_negative_int(
            "state.num_bad_epochs", state.num_bad_epochs
        )
        self.cooldown_counter = check.non_negative_int(
            "state.cooldown_counter", state.cooldown_counter
        )
        self._step_count = check.non_negative_int("state.step_count", state.step_count)

    def snapshot(self) -> PlateauState:
        """Capture the adaptive history for a later resume."""
        return PlateauState(
            lr=self.current_lr,
            best=self.best,
            num_bad_epochs=self.num_bad_epochs,
            cooldown_counter=self.cooldown_counter,
            step_count=self._step_count,
        )

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def in_cooldown(self) -> bool:
        return self.cooldown_counter > 0

    def is_better(self, metric: float, best: float) -> bool:
        """Whether ``metric`` improves on ``best`` by more than the threshold."""
        if self.threshold_mode == "abs":
            margin = self.threshold
        elif math.isinf(best):
            margin = 0.0
        else:
            margin = abs(best) * self.threshold
        if self.mode == "min":
            return metric < best - margin
        return metric > best + margin

    def get_lr(self, loss: Optional[float] = None) -> float:
        return self.current_lr

    def step(self, loss: Optional[float] = None) -> None:
        """
        Advance one step, observing ``loss``.

        Raises:
            ValueError: If loss is None
        """
        if loss is None:
            raise ValueError("ReduceLROnPlateau.step requires the monitored metric")
        self.observe(loss)

    def observe(self, metric: float) -> None:
        """
        Record one observation of the monitored metric.

        Args:
            metric: Latest value (loss, accuracy, ...)
        """
        metric = float(metric)
        self._step_count += 1

        if self.in_cooldown:
            self.cooldown_counter -= 1
            self.num_bad_epochs = 0
            return

        if math.isnan(metric):
            logger.warning(
                f"NaN metric at step {self._step_count}; counted as no improvement"
            )
            self.num_bad_epochs += 1
        elif self.best is None:
            self.best = metric
        elif self.is_better(metric, self.best):
            self.best = metric
            self.num_bad_epochs = 0
        else:
            self.num_bad_epochs += 1

        if self.num_bad_epochs > self.patience:
            self._reduce_lr()

    def _reduce_lr(self) -> None:
        old_lr = self.current_lr
        new_lr = max(old_lr * self.factor, self.min_lr)
        if old_lr - new_lr > self.eps:
            self.current_lr = new_lr
            logger.info(
                f"Reducing learning rate {old_lr:.4e} -> {new_lr:.4e} "
                f"at step {self._step_count}"
            )
        self.num_bad_epochs = 0
        self.cooldown_counter = self.cooldown
