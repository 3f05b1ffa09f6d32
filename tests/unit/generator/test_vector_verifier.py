import dataclasses

import pytest

from wadvec.data_models.test_case import TestCase
from wadvec.regimes.regime_definitions import REGIMES
from wadvec.vector_verifier import VectorVerifier

SMALL_CASE_COUNT = 5


def _verifier() -> VectorVerifier:
    return VectorVerifier(REGIMES, expected_count=SMALL_CASE_COUNT)


def _replace_first(document, regime_name, **changes):
    cases = list(document[regime_name])
    cases[0] = dataclasses.replace(cases[0], **changes)
    tampered = dict(document)
    tampered[regime_name] = tuple(cases)
    return tampered


class TestVectorVerifierPass:

    def test_generated_document_passes(self, small_document):
        assert _verifier().verify(small_document) == []

    def test_standard_normal_case_passes(self):
        case = TestCase(
            x="0", x_wad="0", u="0", u_wad="0", s="1", s_wad="1000000000000000000",
            cdf="0.5", cdf_wad="500000000000000000",
        )
        document = {r.name: (case,) for r in REGIMES}
        assert VectorVerifier(REGIMES, expected_count=1).verify(document) == []


class TestVectorVerifierStructure:

    def test_wrong_count(self, small_document):
        violations = VectorVerifier(REGIMES, expected_count=6).verify(small_document)
        assert len(violations) == 4
        assert all("expected 6 cases" in v for v in violations)

    def test_missing_regime(self, small_document):
        document = dict(small_document)
        del document["tight_range"]
        violations = _verifier().verify(document)
        assert len(violations) == 1
        assert "regime keys" in violations[0]

    def test_extra_regime(self, small_document):
        document = dict(small_document)
        document["bonus"] = document["fixed_dist"]
        assert any("regime keys" in v for v in _verifier().verify(document))


class TestVectorVerifierFields:

    def test_tampered_wad(self, small_document):
        first = small_document["full_range"][0]
        bumped = str(int(first.x_wad) + 1)
        violations = _verifier().verify(_replace_first(small_document, "full_range", x_wad=bumped))
        assert len(violations) == 1
        assert "full_range[0].x_wad" in violations[0]

    def test_leading_zero_rejected(self, small_document):
        first = small_document["tight_range"][0]
        document = _replace_first(small_document, "tight_range", s_wad="0" + first.s_wad)
        assert any("not a bare integer" in v for v in _verifier().verify(document))

    def test_negative_zero_rejected(self, small_document):
        document = _replace_first(small_document, "fixed_dist", u_wad="-0")
        assert any("fixed_dist[0].u_wad" in v for v in _verifier().verify(document))

    def test_exponent_in_decimal_rejected(self, small_document):
        document = _replace_first(small_document, "full_range", x="1e23")
        assert any("plain decimal" in v for v in _verifier().verify(document))

    def test_cdf_above_one(self, small_document):
        document = _replace_first(
            small_document, "tight_range", cdf="1.5", cdf_wad="1500000000000000000",
        )
        assert any("cdf_wad" in v and "outside" in v for v in _verifier().verify(document))

    def test_fixed_dist_mean_must_be_zero(self, small_document):
        document = _replace_first(
            small_document, "fixed_dist", u="0.5", u_wad="500000000000000000",
        )
        assert any("fixed_dist[0].u" in v and "outside" in v for v in _verifier().verify(document))

    def test_fixed_dist_non_canonical_mean_and_std_dev(self, small_document):
        document = _replace_first(small_document, "fixed_dist", u="-0", s="1.000")
        violations = _verifier().verify(document)
        assert len(violations) == 2
        assert any("fixed_dist[0].u" in v and "canonical" in v for v in violations)
        assert any("fixed_dist[0].s" in v and "canonical" in v for v in violations)

    @pytest.mark.parametrize("padded", ["00.5", "0.50"])
    def test_non_canonical_cdf(self, small_document, padded):
        document = _replace_first(
            small_document, "fixed_dist", cdf=padded, cdf_wad="500000000000000000",
        )
        assert any("fixed_dist[0].cdf" in v and "canonical" in v
                   for v in _verifier().verify(document))

    def test_x_outside_regime_range(self, small_document):
        document = _replace_first(
            small_document, "fixed_dist", x="5", x_wad="5000000000000000000",
        )
        assert any("fixed_dist[0].x" in v for v in _verifier().verify(document))
