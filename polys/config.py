"""Tolerance settings shared by the approximate shape predicates."""

from __future__ import annotations

import copy
import math
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator


@dataclass
class ToleranceConfig:
    rel_tol: float = 1e-9
    abs_tol: float = 1e-12

    def close(self, a: float, b: float) -> bool:
        return math.isclose(a, b, rel_tol=self.rel_tol, abs_tol=self.abs_tol)


_TOLERANCE_CONFIG = ToleranceConfig()


def get_tolerance_config() -> ToleranceConfig:
    return copy.deepcopy(_TOLERANCE_CONFIG)


def set_tolerance_config(config: ToleranceConfig) -> None:
    global _TOLERANCE_CONFIG
    _TOLERANCE_CONFIG = copy.deepcopy(config)


@contextmanager
def tolerance(rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> Iterator[ToleranceConfig]:
    """Temporarily replace the active tolerances."""

    previous = get_tolerance_config()
    set_tolerance_config(ToleranceConfig(rel_tol=rel_tol, abs_tol=abs_tol))
    try:
        yield get_tolerance_config()
    finally:
        set_tolerance_config(previous)


__all__ = [
    "ToleranceConfig",
    "get_tolerance_config",
    "set_tolerance_config",
    "tolerance",
]
