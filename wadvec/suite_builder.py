# wadvec/suite_builder.py
# RegimeSuiteBuilder -- drives sampler -> oracle -> encoder per regime.
#
# BLD-01: All regimes are checked before the first draw. A bad table aborts
#         the run with nothing generated.
# BLD-02: Cases are appended in draw order; the regime order of the document
#         is the order of the regimes argument.
# BLD-03: Each case receives its own NormalDistribution value; no
#         distribution state is shared between draws.
# BLD-04: Oracle and encoder errors propagate. No case is skipped.

from typing import Dict, List, Sequence, Tuple

from wadvec.cdf_oracle import normal_cdf
from wadvec.data_models.normal_distribution import NormalDistribution
from wadvec.data_models.regime import Regime
from wadvec.data_models.test_case import TestCase
from wadvec.exceptions import RegimeConfigError
from wadvec.parameter_sampler import ParameterSampler
from wadvec.regimes.regime_definitions import CASES_PER_REGIME
from wadvec.wad_encoder import encode

# Ordered regime name -> generated cases. Sole persisted artifact.
TestVectorDocument = Dict[str, Tuple[TestCase, ...]]


def build_test_case(x: float, u: float, s: float) -> TestCase:
    """Evaluate and encode one (x, mean, std_dev) triple."""
    cdf = normal_cdf(x, NormalDistribution(mean=u, std_dev=s))

    x_str,   x_wad   = encode(x, "x")
    u_str,   u_wad   = encode(u, "u")
    s_str,   s_wad   = encode(s, "s")
    cdf_str, cdf_wad = encode(cdf, "cdf")

    return TestCase(
        x=x_str,
        x_wad=x_wad,
        u=u_str,
        u_wad=u_wad,
        s=s_str,
        s_wad=s_wad,
        cdf=cdf_str,
        cdf_wad=cdf_wad,
    )


class RegimeSuiteBuilder:
    """
    Builds one ordered tuple of TestCases per regime.

    The builder is deterministic iff its sampler is seeded.
    """

    def __init__(
        self,
        sampler:          ParameterSampler,
        cases_per_regime: int = CASES_PER_REGIME,
    ):
        if isinstance(cases_per_regime, bool) or not isinstance(cases_per_regime, int) \
                or cases_per_regime < 1:
            raise RegimeConfigError(
                "*", "cases_per_regime", cases_per_regime, "must be an int >= 1"
            )
        self._sampler          = sampler
        self._cases_per_regime = cases_per_regime

    @property
    def cases_per_regime(self) -> int:
        return self._cases_per_regime

    def build(self, regime: Regime) -> Tuple[TestCase, ...]:
        """Generate cases_per_regime TestCases for a single regime."""
        cases: List[TestCase] = []
        for _ in range(self._cases_per_regime):
            draw = self._sampler.draw(regime)
            cases.append(build_test_case(draw.x, draw.u, draw.s))
        return tuple(cases)

    def build_all(self, regimes: Sequence[Regime]) -> TestVectorDocument:
        """
        Validate every regime, then build all suites in the given order.

        Raises:
            RegimeConfigError on an empty regime list, a non-Regime entry, or
            a duplicate regime name (BLD-01).
        """
        if not regimes:
            raise RegimeConfigError("*", "regimes", regimes, "must not be empty")
        seen = set()
        for regime in regimes:
            if not isinstance(regime, Regime):
                raise RegimeConfigError("*", "regimes", regime, "entries must be Regime instances")
            if regime.name in seen:
                raise RegimeConfigError(regime.name, "name", regime.name, "must be unique")
            seen.add(regime.name)

        document: TestVectorDocument = {}
        for regime in regimes:
            document[regime.name] = self.build(regime)
        return document
