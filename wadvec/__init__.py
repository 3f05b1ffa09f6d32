# wadvec/__init__.py
# Golden test-vector generator for fixed-point (WAD, 18-decimal) Gaussian CDF
# implementations.
#
# ENTRY POINT:
#   python -m wadvec.run_generator --output input/tests.json --seed 0
#
# The emitted JSON document holds four regimes (fixed_dist, full_range,
# tight_range, tight_range_scaled) of 1000 cases each. Every case carries
# x, u, s and cdf as plain decimal strings and as exact WAD integer strings.

from .generator_version import (
    GENERATOR_VERSION,
    FORMAT_VERSION,
    WAD_DECIMALS,
    WAD_SCALE,
)
from .exceptions import (
    VectorError,
    RegimeConfigError,
    OracleError,
    EncodingError,
    SinkWriteError,
    VectorDataError,
)
from .data_models.test_case import TestCase
from .data_models.regime import Regime
from .data_models.normal_distribution import NormalDistribution
from .regimes.regime_definitions import REGIMES, REGIME_NAMES, CASES_PER_REGIME
from .parameter_sampler import ParameterDraw, ParameterSampler
from .cdf_oracle import normal_cdf
from .wad_encoder import encode, to_decimal_string, to_wad, wad_from_decimal_string
from .suite_builder import RegimeSuiteBuilder, TestVectorDocument, build_test_case
from .vector_verifier import VectorVerifier
from .storage.vector_serializer import VectorSerializer
from .storage.vector_loader import VectorLoader
from .failure_handler import FailureHandler

__all__ = [
    # Version constants
    "GENERATOR_VERSION",
    "FORMAT_VERSION",
    "WAD_DECIMALS",
    "WAD_SCALE",
    # Exceptions
    "VectorError",
    "RegimeConfigError",
    "OracleError",
    "EncodingError",
    "SinkWriteError",
    "VectorDataError",
    # Data models
    "TestCase",
    "Regime",
    "NormalDistribution",
    "REGIMES",
    "REGIME_NAMES",
    "CASES_PER_REGIME",
    # Pipeline components
    "ParameterDraw",
    "ParameterSampler",
    "normal_cdf",
    "encode",
    "to_decimal_string",
    "to_wad",
    "wad_from_decimal_string",
    "RegimeSuiteBuilder",
    "TestVectorDocument",
    "build_test_case",
    "VectorVerifier",
    "VectorSerializer",
    "VectorLoader",
    "FailureHandler",
]
