# wadvec/parameter_sampler.py
# ParameterSampler -- uniform draws of (x, mean, std_dev) within a regime.
#
# Each component is drawn independently and uniformly from its closed range.
# A degenerate range (min == max) yields the bound exactly, so fixed_dist
# always produces mean 0 and std_dev 1.
#
# Seeding: seed=<int> gives a reproducible sequence (numpy PCG64).
#          seed=None draws fresh OS entropy; runs are not reproducible.

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from wadvec.data_models.regime import Regime
from wadvec.exceptions import RegimeConfigError


@dataclass(frozen=True)
class ParameterDraw:
    """One sampled (x, mean, std_dev) triple."""
    x: float
    u: float
    s: float


class ParameterSampler:
    """
    Draws ParameterDraw triples from a Regime's ranges.

    The sampler owns its random generator. Two samplers built with the same
    integer seed produce identical draw sequences for identical regime order.
    """

    def __init__(self, seed: Optional[int] = 0):
        self._seed = seed
        self._rng  = np.random.default_rng(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def _uniform(self, bounds: Tuple[float, float]) -> float:
        lo, hi = float(bounds[0]), float(bounds[1])
        if lo == hi:
            return lo
        value = float(self._rng.uniform(lo, hi))
        # Closed interval: keep rounding at the upper edge inside [lo, hi].
        return min(max(value, lo), hi)

    def draw(self, regime: Regime) -> ParameterDraw:
        """Return one independent uniform draw from each of the regime's ranges."""
        if regime.s_range[0] <= 0:
            raise RegimeConfigError(regime.name, "s_range", regime.s_range, "min must be > 0")
        return ParameterDraw(
            x=self._uniform(regime.x_range),
            u=self._uniform(regime.u_range),
            s=self._uniform(regime.s_range),
        )
