"""
Schedule configuration.

A ScheduleConfig names a registered schedule and carries its constructor
arguments, typically parsed from a YAML section of a training config:

    schedule:
      name: onecycle
      max_lr: 0.1
      total_steps: 10000
      pct_start: 0.25
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
import logging

import yaml

from .core.schedulers import Schedule
from .factory import ScheduleRegistry, create_schedule

logger = logging.getLogger(__name__)


@dataclass
class ScheduleConfig:
    """Configuration for building a schedule."""

    name: str
    params: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate configuration."""
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Schedule name must be a non-empty string, got {self.name!r}")
        if not ScheduleRegistry.is_registered(self.name):
            available = ScheduleRegistry.list_schedules()
            raise ValueError(
                f"Unknown schedule: {self.name}. "
                f"Registered schedules: {available}"
            )
        self.name = self.name.lower()
        self.params = dict(self.params)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScheduleConfig":
        """
        Build a config from a mapping.

        Accepts either flat parameters or a nested ``params`` mapping:
            {"name": "step", "base_lr": 0.1, "step_size": 30}
            {"name": "step", "params": {"base_lr": 0.1, "step_size": 30}}

        Raises:
            ValueError: If ``name`` is missing or params are malformed
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Schedule config must be a mapping, got {type(data).__name__}")
        data = dict(data)
        if "name" not in data:
            raise ValueError("Schedule config is missing 'name'")
        name = data.pop("name")

        params = data.pop("params", None)
        if params is None:
            params = data
        elif not isinstance(params, Mapping):
            raise ValueError("Schedule config 'params' must be a mapping")
        elif data:
            raise ValueError(
                f"Schedule config mixes 'params' with top-level keys: {sorted(data)}"
            )
        return cls(name=name, params=dict(params))

    @classmethod
    def from_yaml(cls, text: str, key: Optional[str] = None) -> "ScheduleConfig":
        """
        Parse a config from YAML text.

        Args:
            text: YAML document
            key: Optional top-level key holding the schedule section

        Returns:
            ScheduleConfig instance
        """
        data = yaml.safe_load(text)
        if key is not None:
            if not isinstance(data, Mapping) or key not in data:
                raise ValueError(f"Schedule section '{key}' not found in YAML")
            data = data[key]
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, **self.params}

    def build(self, **overrides: Any) -> Schedule:
        """
        Instantiate the configured schedule.

        Args:
            **overrides: Extra or replacement constructor arguments, e.g.
                ``lr_lambda`` for the multiplicative schedule or
                ``init_step`` when resuming

        Returns:
            New schedule instance
        """
        params = {**self.params, **overrides}
        logger.info(f"Building '{self.name}' schedule with params: {params}")
        return create_schedule(self.name, **params)
