import pytest

from wadvec.parameter_sampler import ParameterSampler
from wadvec.regimes.regime_definitions import REGIMES
from wadvec.suite_builder import RegimeSuiteBuilder

SMALL_CASE_COUNT = 5


@pytest.fixture
def small_document():
    """Seeded document with SMALL_CASE_COUNT cases in each of the four regimes."""
    builder = RegimeSuiteBuilder(ParameterSampler(seed=7), cases_per_regime=SMALL_CASE_COUNT)
    return builder.build_all(REGIMES)


@pytest.fixture
def output_path(tmp_path):
    """Destination inside a directory that does not exist yet."""
    return tmp_path / "input" / "tests.json"
