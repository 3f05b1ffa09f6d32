# tests/test_pipeline_contract.py
# Contract tests for the full default generator run (4 regimes x 1000 cases).
#
# CONSTRAINTS:
#   Only public entry points are imported.
#   Expected WAD values are recomputed here with fractions.Fraction, not with
#   the encoder under test.
#
# Standard import pattern:
#   from wadvec.run_generator import generate_vectors

import re
from decimal import Decimal
from fractions import Fraction

import pytest

from wadvec.run_generator import generate_vectors
from wadvec.storage.vector_loader import VectorLoader
from wadvec.storage.vector_serializer import VectorSerializer
from wadvec.vector_verifier import VectorVerifier


_WAD = 10 ** 18
_PLAIN_DECIMAL = re.compile(r"-?[0-9]+(\.[0-9]+)?")
_BARE_INTEGER  = re.compile(r"0|-?[1-9][0-9]*")
_PAIRS = (("x", "x_wad"), ("u", "u_wad"), ("s", "s_wad"), ("cdf", "cdf_wad"))


def _nearest_wad(text: str) -> int:
    """round(text * 10**18), half away from zero, via exact rationals."""
    scaled = Fraction(Decimal(text)) * _WAD
    magnitude = abs(scaled)
    whole = magnitude.numerator // magnitude.denominator
    if magnitude - whole >= Fraction(1, 2):
        whole += 1
    return -whole if scaled < 0 else whole


@pytest.fixture(scope="module")
def document():
    return generate_vectors()


def _all_cases(document):
    for regime_name, cases in document.items():
        for case in cases:
            yield regime_name, case


# ---------------------------------------------------------------------------
# CONTRACT: document shape
# ---------------------------------------------------------------------------

class TestDocumentShape:

    def test_exactly_four_regimes(self, document) -> None:
        assert list(document.keys()) == [
            "fixed_dist", "full_range", "tight_range", "tight_range_scaled",
        ]

    def test_one_thousand_cases_each(self, document) -> None:
        for cases in document.values():
            assert len(cases) == 1000

    def test_verifier_accepts_default_run(self, document) -> None:
        assert VectorVerifier().verify(document) == []


# ---------------------------------------------------------------------------
# CONTRACT: WAD fields
# ---------------------------------------------------------------------------

class TestWadFields:

    def test_wad_equals_rounded_scaled_decimal(self, document) -> None:
        for _, case in _all_cases(document):
            for dec_field, wad_field in _PAIRS:
                assert int(getattr(case, wad_field)) == _nearest_wad(getattr(case, dec_field))

    def test_round_trip_within_half_unit(self, document) -> None:
        for _, case in _all_cases(document):
            for dec_field, wad_field in _PAIRS:
                exact = Fraction(Decimal(getattr(case, dec_field))) * _WAD
                assert abs(Fraction(int(getattr(case, wad_field))) - exact) <= Fraction(1, 2)

    def test_string_forms(self, document) -> None:
        for _, case in _all_cases(document):
            for dec_field, wad_field in _PAIRS:
                assert _PLAIN_DECIMAL.fullmatch(getattr(case, dec_field))
                assert _BARE_INTEGER.fullmatch(getattr(case, wad_field))

    def test_cdf_wad_in_unit_interval(self, document) -> None:
        for _, case in _all_cases(document):
            assert 0 <= int(case.cdf_wad) <= _WAD

    def test_full_range_reaches_beyond_double_precision(self, document) -> None:
        widest = max(abs(int(c.x_wad)) for c in document["full_range"])
        assert widest > 2 ** 53 * _WAD


# ---------------------------------------------------------------------------
# CONTRACT: fixed_dist
# ---------------------------------------------------------------------------

class TestFixedDist:

    def test_mean_and_std_dev_fixed(self, document) -> None:
        for case in document["fixed_dist"]:
            assert case.u == "0"
            assert case.s == "1"
            assert case.u_wad == "0"
            assert case.s_wad == "1000000000000000000"

    def test_x_within_band(self, document) -> None:
        for case in document["fixed_dist"]:
            assert Decimal(-4) <= Decimal(case.x) <= Decimal(4)


# ---------------------------------------------------------------------------
# CONTRACT: persisted artifact
# ---------------------------------------------------------------------------

class TestPersistedDocument:

    def test_written_document_reloads_identically(self, document, tmp_path) -> None:
        path = VectorSerializer().serialize(document, tmp_path / "tests.json")
        assert VectorLoader().load(path) == document

    def test_default_run_is_reproducible(self, document) -> None:
        assert generate_vectors() == document
