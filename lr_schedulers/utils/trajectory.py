"""
Learning rate trajectory helper.

Records the rates a schedule will produce, e.g. to plot or sanity-check a
schedule before launching a run.
"""

from typing import Optional, Sequence

import numpy as np

from ..core.schedulers import Schedule


def lr_trajectory(
    schedule: Schedule,
    num_steps: int,
    losses: Optional[Sequence[float]] = None,
) -> np.ndarray:
    """
    Step a schedule and collect its learning rates.

    The schedule is advanced ``num_steps`` times; pass a fresh instance if
    the original must stay untouched.

    Args:
        schedule: Schedule to drive
        num_steps: Number of get_lr/step iterations
        losses: Metric per step (required for ReduceLROnPlateau)

    Returns:
        Array of shape (num_steps,) with the rate used at each step
    """
    if num_steps < 0:
        raise ValueError(f"num_steps must be non-negative, got {num_steps}")
    if losses is not None and len(losses) != num_steps:
        raise ValueError(
            f"Expected {num_steps} losses, got {len(losses)}"
        )

    rates = np.empty(num_steps, dtype=np.float64)
    for i in range(num_steps):
        rates[i] = schedule.get_lr()
        schedule.step(None if losses is None else losses[i])
    return rates
