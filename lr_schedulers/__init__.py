"""
lr_schedulers - learning rate schedule strategies for iterative training.

Usage:
    from lr_schedulers import OneCycleLR

    schedule = OneCycleLR(max_lr=0.1, total_steps=1000)
    for batch in loader:
        lr = schedule.get_lr()
        loss = train_step(batch, lr)
        schedule.step()
"""

from .core.schedulers import (
    Schedule,
    ScheduleConfigError,
    ConstantLR,
    LinearLR,
    ExponentialLR,
    PolynomialLR,
    StepLR,
    MultiStepLR,
    CosineAnnealingLR,
    CosineAnnealingWarmRestarts,
    CyclicLR,
    MultiplicativeLR,
    ReduceLROnPlateau,
    PlateauState,
    OneCycleLR,
)
from .factory import (
    ScheduleRegistry,
    create_schedule,
    list_schedules,
    is_registered,
    register_schedule,
)
from .config import ScheduleConfig
from .utils import lr_trajectory

__all__ = [
    # Protocol
    "Schedule",
    "ScheduleConfigError",
    # Schedules
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
    # Factory
    "ScheduleRegistry",
    "create_schedule",
    "list_schedules",
    "is_registered",
    "register_schedule",
    # Config
    "ScheduleConfig",
    # Utilities
    "lr_trajectory",
]

__version__ = "0.1.0"
