# wadvec/data_models/normal_distribution.py
# Immutable Normal(mean, std_dev) parameter pair.
# A fresh instance is passed to every CDF evaluation; nothing is mutated
# between draws.

import math
from dataclasses import dataclass

from wadvec.exceptions import RegimeConfigError


@dataclass(frozen=True)
class NormalDistribution:
    """
    Parameters of a normal distribution. mean must be finite; std_dev must
    be finite and > 0. Violations raise RegimeConfigError (CONFIG_ERROR).
    """
    mean:    float
    std_dev: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.mean):
            raise RegimeConfigError("*", "mean", self.mean, "must be finite")
        if not math.isfinite(self.std_dev) or self.std_dev <= 0.0:
            raise RegimeConfigError("*", "std_dev", self.std_dev, "must be finite and > 0")
