# wadvec/cdf_oracle.py
# CDF oracle -- Normal(mean, std_dev) cumulative distribution function.
#
# The numerical method is scipy's; its output is treated as ground truth and
# is not cross-checked here. The only check is that the result is a usable
# probability, since a non-finite value would poison the golden file.

import math

from scipy.stats import norm

from wadvec.data_models.normal_distribution import NormalDistribution
from wadvec.exceptions import OracleError


def normal_cdf(x: float, distribution: NormalDistribution) -> float:
    """
    P(X <= x) for X ~ Normal(distribution.mean, distribution.std_dev).

    Raises:
        OracleError if the result is non-finite or outside [0, 1].
    """
    value = float(norm.cdf(x, loc=distribution.mean, scale=distribution.std_dev))
    if not math.isfinite(value) or value < 0.0 or value > 1.0:
        raise OracleError(value, x, distribution.mean, distribution.std_dev)
    return value
