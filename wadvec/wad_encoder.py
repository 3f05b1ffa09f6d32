# wadvec/wad_encoder.py
# Scaled-integer (WAD) encoder.
#
# ENC-01: The decimal string of a float is its shortest round-tripping
#         representation (repr), written without exponent, grouping,
#         trailing zeros or trailing point. Zero, including -0.0, is "0".
# ENC-02: The WAD integer is round(D * 10**18) where D is the exact decimal
#         value of the ENC-01 string, so parsing the emitted decimal string
#         always reproduces the emitted WAD string.
# ENC-03: Scaling is done on Python integers (decimal coefficient and
#         exponent). No float multiplication takes part, so values up to
#         1e23 (scaled 1e41) and down to 1e-18 stay exact.
# ENC-04: Rounding is round-half-away-from-zero, applied once, at the final
#         integer step. The rule is symmetric in sign.
# ENC-05: NaN and Inf raise EncodingError.

import math
import re
from decimal import Decimal
from typing import Tuple, Union

from wadvec.exceptions import EncodingError, VectorDataError
from wadvec.generator_version import WAD_DECIMALS

Number = Union[int, float, Decimal]

_PLAIN_DECIMAL_RE = re.compile(r"-?[0-9]+(\.[0-9]+)?")


def _decompose(value: Number, field_name: str) -> Tuple[int, int, int]:
    """
    Split a finite number into (sign, coefficient, exponent) such that
    value == (-1)**sign * coefficient * 10**exponent, with trailing zeros
    moved out of the coefficient.
    """
    if isinstance(value, bool):
        raise TypeError(f"{field_name}: bool is not a numeric value")
    if isinstance(value, int):
        dec = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError(field_name, value)
        # float() drops numpy scalar types whose repr is not a bare number.
        dec = Decimal(repr(float(value)))
    elif isinstance(value, Decimal):
        if not value.is_finite():
            raise EncodingError(field_name, value)
        dec = value
    else:
        raise TypeError(f"{field_name}: unsupported type {type(value).__name__}")

    sign, digits, exponent = dec.as_tuple()
    coefficient = int("".join(str(d) for d in digits))
    if coefficient == 0:
        return 0, 0, 0
    while coefficient % 10 == 0:
        coefficient //= 10
        exponent += 1
    return sign, coefficient, exponent


def _plain_string(sign: int, coefficient: int, exponent: int) -> str:
    if coefficient == 0:
        return "0"
    digits = str(coefficient)
    if exponent >= 0:
        body = digits + "0" * exponent
    else:
        places = -exponent
        digits = digits.rjust(places + 1, "0")
        body = digits[:-places] + "." + digits[-places:]
    return "-" + body if sign else body


def _scale(sign: int, coefficient: int, exponent: int) -> int:
    shift = exponent + WAD_DECIMALS
    if shift >= 0:
        magnitude = coefficient * 10 ** shift
    else:
        divisor = 10 ** (-shift)
        magnitude, remainder = divmod(coefficient, divisor)
        if 2 * remainder >= divisor:
            magnitude += 1
    return -magnitude if sign else magnitude


def to_decimal_string(value: Number, field_name: str = "value") -> str:
    """Plain decimal string of value (ENC-01)."""
    return _plain_string(*_decompose(value, field_name))


def to_wad(value: Number, field_name: str = "value") -> int:
    """round(value * 10**18) as an exact Python int (ENC-02 .. ENC-04)."""
    return _scale(*_decompose(value, field_name))


def wad_to_string(wad: int) -> str:
    """Base-10 integer string: optional '-' then digits, nothing else."""
    return str(int(wad))


def encode(value: Number, field_name: str = "value") -> Tuple[str, str]:
    """
    Return (decimal_string, wad_string) for value.

    Both strings are derived from the same decomposition, so
    wad_from_decimal_string(decimal_string) == int(wad_string) always holds.
    """
    parts = _decompose(value, field_name)
    return _plain_string(*parts), wad_to_string(_scale(*parts))


def wad_from_decimal_string(text: str, field_name: str = "value") -> int:
    """
    WAD integer for a plain decimal string as emitted by to_decimal_string().

    Raises:
        VectorDataError if text is not a plain decimal (sign, digits,
        optional fractional part).
    """
    if not isinstance(text, str) or not _PLAIN_DECIMAL_RE.fullmatch(text):
        raise VectorDataError(field_name, text, "must be a plain decimal string")
    return to_wad(Decimal(text), field_name)
