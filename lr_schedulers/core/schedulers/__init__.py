"""
Learning rate schedulers.

Implements various LR scheduling strategies:
- Monotonic: constant, linear, exponential, polynomial, step, multi-step
- Periodic: cosine annealing, cosine with warm restarts, cyclic
- Adaptive: reduce-on-plateau
- Callback: multiplicative
- Phased: one-cycle policy
"""

from .protocol import Schedule, ScheduleConfigError
from .constant import ConstantLR
from .linear import LinearLR
from .exponential import ExponentialLR
from .polynomial import PolynomialLR
from .step import StepLR, MultiStepLR
from .cosine import CosineAnnealingLR, CosineAnnealingWarmRestarts
from .cyclic import CyclicLR
from .multiplicative import MultiplicativeLR
from .plateau import ReduceLROnPlateau, PlateauState
from .onecycle import OneCycleLR

__all__ = [
    "Schedule",
    "ScheduleConfigError",
    "ConstantLR",
    "LinearLR",
    "ExponentialLR",
    "PolynomialLR",
    "StepLR",
    "MultiStepLR",
    "CosineAnnealingLR",
    "CosineAnnealingWarmRestarts",
    "CyclicLR",
    "MultiplicativeLR",
    "ReduceLROnPlateau",
    "PlateauState",
    "OneCycleLR",
]
