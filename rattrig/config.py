"""Configuration helpers for the fault-checked formulas."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class FaultCheckConfig:
    """Settings for denominator checks in :mod:`rattrig.safe`.

    ``zero_tolerance`` of ``0`` compares denominators with the additive
    identity exactly. A positive value treats ``abs(denominator) <=
    zero_tolerance`` as zero, for float inputs whose denominators are only
    near zero.
    """

    zero_tolerance: Any = 0

    def __post_init__(self) -> None:
        if self.zero_tolerance < 0:
            raise ValueError(f"zero_tolerance must be non-negative, got {self.zero_tolerance}")


_FAULT_CHECK_CONFIG = FaultCheckConfig()


def get_fault_check_config() -> FaultCheckConfig:
    return copy.deepcopy(_FAULT_CHECK_CONFIG)


def set_fault_check_config(config: FaultCheckConfig) -> None:
    global _FAULT_CHECK_CONFIG
    _FAULT_CHECK_CONFIG = copy.deepcopy(config)


def resolve_config(config: Optional[FaultCheckConfig]) -> FaultCheckConfig:
    return config if config is not None else _FAULT_CHECK_CONFIG


__all__ = [
    "FaultCheckConfig",
    "get_fault_check_config",
    "resolve_config",
    "set_fault_check_config",
]
