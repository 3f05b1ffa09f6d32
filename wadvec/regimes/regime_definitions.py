# wadvec/regimes/regime_definitions.py
# Fixed, version-controlled regime table for the test-vector generator.
#
# Execution order: fixed_dist, full_range, tight_range, tight_range_scaled.
# The emitted document lists the regimes in this order.
#
#   fixed_dist          -- standard normal, x in the central [-4, 4] band.
#   full_range          -- extreme dynamic range: |x| up to 1e23, scaled
#                          values up to 1e41, s down to 1e-18.
#   tight_range         -- steep central region at unit scale.
#   tight_range_scaled  -- steep central region at 1e15 scale.

from typing import Tuple

from wadvec.data_models.regime import Regime


CASES_PER_REGIME: int = 1000


FIXED_DIST = Regime(
    name="fixed_dist",
    x_range=(-4.0, 4.0),
    u_range=(0.0, 0.0),
    s_range=(1.0, 1.0),
)

FULL_RANGE = Regime(
    name="full_range",
    x_range=(-1e23, 1e23),
    u_range=(-1e20, 1e20),
    s_range=(1e-18, 1e18),
)

TIGHT_RANGE = Regime(
    name="tight_range",
    x_range=(-40.0, 40.0),
    u_range=(-1.0, 1.0),
    s_range=(1e-18, 10.0),
)

TIGHT_RANGE_SCALED = Regime(
    name="tight_range_scaled",
    x_range=(-40e15, 40e15),
    u_range=(-1e15, 1e15),
    s_range=(1e-18, 1e16),
)


REGIMES: Tuple[Regime, ...] = (
    FIXED_DIST,
    FULL_RANGE,
    TIGHT_RANGE,
    TIGHT_RANGE_SCALED,
)

REGIME_NAMES: Tuple[str, ...] = tuple(r.name for r in REGIMES)
