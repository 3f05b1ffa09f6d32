# =============================================================================
# WADVEC -- GAUSSIAN CDF WAD TEST-VECTOR GENERATOR
# File:   wadvec/exceptions.py
# =============================================================================
#
# SCOPE
# -----
# Exception hierarchy for the generator. All exceptions are pure value
# objects: no side effects, no I/O, no domain imports.
#
# EXCEPTION HIERARCHY
# -------------------
#   VectorError(Exception)                -- base; never raised directly
#     RegimeConfigError(VectorError)      -- invalid sampling range
#     OracleError(VectorError)            -- CDF result non-finite or outside [0, 1]
#     EncodingError(VectorError)          -- non-finite value handed to the encoder
#     SinkWriteError(VectorError)         -- output document could not be written
#     VectorDataError(VectorError)        -- loaded document is malformed
#
# Every concrete class carries a failure_type_id that keys into
# FAILURE_TYPES (wadvec/failure_handler.py) to select the process exit code.
#
# MESSAGE CONTRACT
# ----------------
# Deterministic: identical inputs -> identical message string.
# Explicit: field name and offending value always included.
# ASCII-safe.
# =============================================================================

from __future__ import annotations

from typing import Any


class VectorError(Exception):
    """
    Base class for all generator exceptions.

    Attributes:
        field_name:  Name of the offending field, or empty string.
        value:       Offending value, or None.
        message:     Non-empty, deterministic description.
    """

    failure_type_id: str = "GENERATOR_INTERNAL_ERROR"

    def __init__(
        self,
        message:    str,
        field_name: str = "",
        value:      Any = None,
    ) -> None:
        if not isinstance(message, str) or not message:
            raise ValueError(
                "VectorError: message must be a non-empty string"
            )
        if not isinstance(field_name, str):
            raise ValueError(
                "VectorError: field_name must be a string"
            )
        super().__init__(message)
        self.field_name: str = field_name
        self.value:      Any = value
        self.message:    str = message

    def __repr__(self) -> str:
        return (
            self.__class__.__name__
            + "(field_name=" + repr(self.field_name)
            + ", value=" + repr(self.value)
            + ", message=" + repr(self.message)
            + ")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.field_name == other.field_name
            and self.value == other.value
            and self.message == other.message
        )


class RegimeConfigError(VectorError):
    """
    Raised when a regime's sampling ranges are unusable: a non-finite bound,
    min > max, or a standard-deviation range that admits values <= 0.

    Message format:
        "RegimeConfigError: regime '<regime_name>' field '<field_name>'
         violates constraint '<constraint>': got <value>."
    """

    failure_type_id = "CONFIG_ERROR"

    def __init__(
        self,
        regime_name: str,
        field_name:  str,
        value:       Any,
        constraint:  str,
    ) -> None:
        if not field_name:
            raise ValueError(
                "RegimeConfigError: field_name must be a non-empty string"
            )
        if not isinstance(constraint, str) or not constraint:
            raise ValueError(
                "RegimeConfigError: constraint must be a non-empty string"
            )
        message = (
            "RegimeConfigError: regime '"
            + regime_name
            + "' field '"
            + field_name
            + "' violates constraint '"
            + constraint
            + "': got "
            + repr(value)
            + "."
        )
        super().__init__(message=message, field_name=field_name, value=value)
        self.regime_name: str = regime_name
        self.constraint:  str = constraint


class OracleError(VectorError):
    """
    Raised when the CDF oracle returns a value that cannot be a probability.

    A single corrupt vector poisons the downstream golden file, so this is
    fatal for the whole run.
    """

    failure_type_id = "ORACLE_ERROR"

    def __init__(self, value: Any, x: float, mean: float, std_dev: float) -> None:
        message = (
            "OracleError: CDF evaluation returned "
            + repr(value)
            + " for x="
            + repr(x)
            + ", mean="
            + repr(mean)
            + ", std_dev="
            + repr(std_dev)
            + ". Result must be finite and in [0, 1]."
        )
        super().__init__(message=message, field_name="cdf", value=value)
        self.x:       float = x
        self.mean:    float = mean
        self.std_dev: float = std_dev


class EncodingError(VectorError):
    """
    Raised when a NaN or Inf reaches the scaled-integer encoder.

    Message format:
        "EncodingError: field '<field_name>' contains non-finite
         value: <value>. Only finite values have a WAD encoding."
    """

    failure_type_id = "ENCODING_ERROR"

    def __init__(self, field_name: str, value: Any) -> None:
        if not field_name:
            raise ValueError(
                "EncodingError: field_name must be a non-empty string"
            )
        message = (
            "EncodingError: field '"
            + field_name
            + "' contains non-finite value: "
            + repr(value)
            + ". Only finite values have a WAD encoding."
        )
        super().__init__(message=message, field_name=field_name, value=value)


class SinkWriteError(VectorError):
    """Raised when the output document cannot be written in full."""

    failure_type_id = "SINK_WRITE_ERROR"

    def __init__(self, path: str, reason: str) -> None:
        message = (
            "SinkWriteError: failed to write test-vector document to '"
            + path
            + "': "
            + reason
        )
        super().__init__(message=message, field_name="output_path", value=path)
        self.reason: str = reason


class VectorDataError(VectorError):
    """
    Raised when a serialized test-vector document does not have the expected
    shape (missing regime, wrong field set, non-string value).
    """

    failure_type_id = "DATA_CORRUPTION"

    def __init__(self, field_name: str, value: Any, constraint: str) -> None:
        if not field_name:
            raise ValueError(
                "VectorDataError: field_name must be a non-empty string"
            )
        message = (
            "VectorDataError: field '"
            + field_name
            + "' violates constraint '"
            + constraint
            + "': got "
            + repr(value)
            + "."
        )
        super().__init__(message=message, field_name=field_name, value=value)
        self.constraint: str = constraint


__all__ = [
    "VectorError",
    "RegimeConfigError",
    "OracleError",
    "EncodingError",
    "SinkWriteError",
    "VectorDataError",
]
