# wadvec/data_models/regime.py
# Regime data class: one named set of sampling ranges for (x, mean, stddev).
#
# Validation is fail-fast at construction, in this order per range:
#   V1  Finiteness  -- both bounds finite.
#   V2  Ordering    -- min <= max.
#   V3  Sign        -- s_range min > 0 (the CDF is undefined for s <= 0).
# An invalid Regime cannot exist, so a misconfigured table aborts before any
# vector is generated.

import math
from dataclasses import dataclass
from typing import Tuple

from wadvec.exceptions import RegimeConfigError


def _check_range(regime_name: str, field_name: str, bounds: Tuple[float, float]) -> None:
    if len(bounds) != 2:
        raise RegimeConfigError(regime_name, field_name, bounds, "must be a (min, max) pair")
    lo, hi = bounds
    for bound in (lo, hi):
        if not isinstance(bound, (int, float)) or isinstance(bound, bool):
            raise RegimeConfigError(regime_name, field_name, bound, "bounds must be real numbers")
        if not math.isfinite(bound):
            raise RegimeConfigError(regime_name, field_name, bound, "bounds must be finite")
    if lo > hi:
        raise RegimeConfigError(regime_name, field_name, bounds, "min must be <= max")


@dataclass(frozen=True)
class Regime:
    """
    Closed sampling ranges for one regime.

    Fields:
      name     -- Regime key in the emitted document (e.g. "fixed_dist").
      x_range  -- (min, max) of the evaluation point.
      u_range  -- (min, max) of the distribution mean.
      s_range  -- (min, max) of the standard deviation. min must be > 0.
    """
    name:    str
    x_range: Tuple[float, float]
    u_range: Tuple[float, float]
    s_range: Tuple[float, float]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise RegimeConfigError(str(self.name), "name", self.name, "must be a non-empty string")
        _check_range(self.name, "x_range", self.x_range)
        _check_range(self.name, "u_range", self.u_range)
        _check_range(self.name, "s_range", self.s_range)
        if self.s_range[0] <= 0:
            raise RegimeConfigError(self.name, "s_range", self.s_range, "min must be > 0")
