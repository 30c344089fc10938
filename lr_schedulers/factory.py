"""
Schedule Factory - name-based lookup and construction of schedules.

Maps schedule names to classes so schedules can be built from
configuration. The registry holds classes only; every call to
``create_schedule`` returns a new, independently owned instance.
"""

from typing import Any, Dict, List, Type
import inspect
import logging

from .core.schedulers import (
    ConstantLR,
    CosineAnnealingLR,
    CosineAnnealingWarmRestarts,
    CyclicLR,
    ExponentialLR,
    LinearLR,
    MultiplicativeLR,
    MultiStepLR,
    OneCycleLR,
    PolynomialLR,
    ReduceLROnPlateau,
    Schedule,
    StepLR,
)

logger = logging.getLogger(__name__)


class ScheduleRegistry:
    """
    Registry of available schedule classes.

    Built-in schedules are registered at import time. Projects can add
    their own classes implementing the Schedule protocol with
    ``register`` or the ``register_schedule`` decorator.
    """

    _schedules: Dict[str, Type[Schedule]] = {}

    @classmethod
    def register(cls, name: str, schedule_class: Type[Schedule]) -> None:
        """
        Register a schedule class.

        Args:
            name: Schedule name (e.g., "cosine", "onecycle")
            schedule_class: Class implementing the Schedule protocol
        """
        key = name.lower()
        if key in cls._schedules:
            logger.warning(
                f"Schedule '{key}' already registered. Overwriting with {schedule_class}"
            )
        cls._schedules[key] = schedule_class
        logger.debug(f"Registered schedule: {key} -> {schedule_class.__name__}")

    @classmethod
    def get(cls, name: str) -> Type[Schedule]:
        """
        Look up a schedule class by name.

        Raises:
            ValueError: If schedule name not found in registry
        """
        key = name.lower()
        if key not in cls._schedules:
            available = ", ".join(sorted(cls._schedules))
            raise ValueError(
                f"Unknown schedule: {name}. "
                f"Available schedules: {available}"
            )
        return cls._schedules[key]

    @classmethod
    def list_schedules(cls) -> List[str]:
        return sorted(cls._schedules)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name.lower() in cls._schedules

    @classmethod
    def unregister(cls, name: str) -> None:
        """
        Unregister a schedule (mainly for testing).

        Args:
            name: Schedule name to unregister
        """
        key = name.lower()
        if key in cls._schedules:
            del cls._schedules[key]
            logger.debug(f"Unregistered schedule: {key}")


def create_schedule(name: str, **params: Any) -> Schedule:
    """
    Create a new schedule instance by name.

    Args:
        name: Registered schedule name
        **params: Constructor arguments of the schedule class

    Returns:
        Freshly constructed schedule

    Example:
        >>> schedule = create_schedule("step", base_lr=0.1, step_size=30)
        >>> schedule = create_schedule("onecycle", max_lr=0.1, total_steps=1000)
    """
    schedule_class = ScheduleRegistry.get(name)
    try:
        inspect.signature(schedule_class).bind(**params)
    except TypeError as e:
        raise ValueError(f"Invalid parameters for schedule '{name}': {e}") from e
    schedule = schedule_class(**params)
    logger.debug(f"Created {schedule_class.__name__} from '{name}'")
    return schedule


def list_schedules() -> List[str]:
    """List all registered schedule names."""
    return ScheduleRegistry.list_schedules()


def is_registered(name: str) -> bool:
    """Check if a schedule name is registered."""
    return ScheduleRegistry.is_registered(name)


def register_schedule(name: str):
    """
    Decorator for registering schedule classes.

    Args:
        name: Schedule name to register

    Example:
        @register_schedule("inverse_sqrt")
        class InverseSqrtLR:
            ...
    """

    def decorator(cls):
        ScheduleRegistry.register(name, cls)
        return cls

    return decorator


_BUILTIN_SCHEDULES = {
    "constant": ConstantLR,
    "linear": LinearLR,
    "exponential": ExponentialLR,
    "polynomial": PolynomialLR,
    "step": StepLR,
    "multistep": MultiStepLR,
    "cosine": CosineAnnealingLR,
    "cosine_warm_restarts": CosineAnnealingWarmRestarts,
    "cyclic": CyclicLR,
    "multiplicative": MultiplicativeLR,
    "plateau": ReduceLROnPlateau,
    "onecycle": OneCycleLR,
}

for _name, _schedule_class in _BUILTIN_SCHEDULES.items():
    ScheduleRegistry.register(_name, _schedule_class)
