# wadvec/data_models/failure_record.py
# FailureRecord data class and failure type registry.

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# FAILURE TYPE REGISTRY
# ---------------------------------------------------------------------------
# Exit code mapping:
#   Code 1 -- VERIFICATION_FAILURE
#   Code 2 -- CONFIG_ERROR
#   Code 3 -- ORACLE_ERROR, ENCODING_ERROR, DATA_CORRUPTION
#   Code 4 -- SINK_WRITE_ERROR
#   Code 5 -- Internal generator errors

FAILURE_TYPES = {
    # Exit Code 1
    "VERIFICATION_FAILURE":     1,
    # Exit Code 2
    "CONFIG_ERROR":             2,
    # Exit Code 3
    "ORACLE_ERROR":             3,
    "ENCODING_ERROR":           3,
    "DATA_CORRUPTION":          3,
    # Exit Code 4
    "SINK_WRITE_ERROR":         4,
    # Exit Code 5
    "GENERATOR_INTERNAL_ERROR": 5,
}


@dataclass(frozen=True)
class FailureRecord:
    """
    Summary of a hard failure, reported by FailureHandler before exit.

    Fields:
      failure_type_id   -- Key from FAILURE_TYPES.
      exit_code         -- Process exit code (1-5).
      regime_name       -- Regime being processed, or empty.
      field_name        -- Offending field, or empty.
      detected_at_iso   -- UTC ISO-8601 timestamp of detection.
      generator_version -- GENERATOR_VERSION at time of failure.
      seed              -- Seed of the run as a string ("none" if unseeded).
      detail            -- Human-readable failure description.
    """
    failure_type_id:   str
    exit_code:         int
    regime_name:       str
    field_name:        str
    detected_at_iso:   str
    generator_version: str
    seed:              str
    detail:            str
