# wadvec/vector_verifier.py
# VectorVerifier -- checks a test-vector document before it is written
# (and any previously written document loaded back from disk).
#
# VV-01: Regime keys equal the configured regime names, in order.
# VV-02: Each regime holds exactly expected_count cases.
# VV-03: Every *_wad field is a bare integer string (optional '-', digits,
#        no leading zeros, no "-0").
# VV-04: Every *_wad field equals round(decimal field * 10**18), recomputed
#        from the decimal string with exact integer arithmetic.
# VV-05: cdf_wad in [0, 10**18].
# VV-06: x, u, s lie inside the regime's closed ranges; s > 0.
# VV-07: Every decimal field is in canonical form (the form to_decimal_string
#        emits for its value), so "-0" or "1.000" never pass. With VV-06
#        this pins fixed_dist to u == "0" and s == "1".
#
# Verification never mutates the document and never raises on a bad case;
# every problem is reported as a violation string.

import re
from decimal import Decimal
from typing import List, Sequence

from wadvec.data_models.regime import Regime
from wadvec.data_models.test_case import TestCase, WAD_FIELD_PAIRS
from wadvec.exceptions import VectorDataError
from wadvec.generator_version import WAD_SCALE
from wadvec.regimes.regime_definitions import CASES_PER_REGIME, REGIMES
from wadvec.suite_builder import TestVectorDocument
from wadvec.wad_encoder import to_decimal_string, wad_from_decimal_string

_WAD_INTEGER_RE = re.compile(r"0|-?[1-9][0-9]*")


class VectorVerifier:
    """
    Re-derives every WAD field from its decimal twin and checks the
    per-regime invariants.
    """

    def __init__(
        self,
        regimes:        Sequence[Regime] = REGIMES,
        expected_count: int = CASES_PER_REGIME,
    ):
        self._regimes        = tuple(regimes)
        self._expected_count = expected_count

    def verify(self, document: TestVectorDocument) -> List[str]:
        """Return violation descriptions. An empty list means the document passed."""
        violations: List[str] = []

        expected_names = [r.name for r in self._regimes]
        actual_names   = list(document.keys())
        if actual_names != expected_names:
            violations.append(
                f"regime keys {actual_names} do not match expected {expected_names}"
            )

        for regime in self._regimes:
            cases = document.get(regime.name)
            if cases is None:
                continue
            if len(cases) != self._expected_count:
                violations.append(
                    f"{regime.name}: expected {self._expected_count} cases, got {len(cases)}"
                )
            for index, case in enumerate(cases):
                violations.extend(self._verify_case(regime, index, case))

        return violations

    def _verify_case(self, regime: Regime, index: int, case: TestCase) -> List[str]:
        where = f"{regime.name}[{index}]"
        found: List[str] = []

        for dec_field, wad_field in WAD_FIELD_PAIRS:
            dec_text = getattr(case, dec_field)
            wad_text = getattr(case, wad_field)
            if not isinstance(wad_text, str) or not _WAD_INTEGER_RE.fullmatch(wad_text):
                found.append(f"{where}.{wad_field}: not a bare integer string: {wad_text!r}")
                continue
            try:
                expected = wad_from_decimal_string(dec_text, dec_field)
            except VectorDataError as exc:
                found.append(f"{where}.{dec_field}: {exc.message}")
                continue
            canonical = to_decimal_string(Decimal(dec_text), dec_field)
            if dec_text != canonical:
                found.append(
                    f"{where}.{dec_field}: {dec_text!r} is not in canonical form {canonical!r}"
                )
            if int(wad_text) != expected:
                found.append(
                    f"{where}.{wad_field}: {wad_text} != round({dec_field} * 10**18) = {expected}"
                )

        if found:
            return found

        cdf_wad = int(case.cdf_wad)
        if cdf_wad < 0 or cdf_wad > WAD_SCALE:
            found.append(f"{where}.cdf_wad: {cdf_wad} outside [0, {WAD_SCALE}]")

        for dec_field, bounds in (
            ("x", regime.x_range),
            ("u", regime.u_range),
            ("s", regime.s_range),
        ):
            value = float(getattr(case, dec_field))
            if value < bounds[0] or value > bounds[1]:
                found.append(
                    f"{where}.{dec_field}: {getattr(case, dec_field)} outside "
                    f"[{bounds[0]!r}, {bounds[1]!r}]"
                )
        if float(case.s) <= 0.0:
            found.append(f"{where}.s: standard deviation {case.s} is not > 0")

        return found
