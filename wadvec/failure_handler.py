# wadvec/failure_handler.py
# FailureHandler -- hard failure policy for the generator.
#
# HFP-01: Exit with a non-zero exit code on any hard failure.
# HFP-02: sys.exit is the last operation.
# HFP-03: No catch-and-continue. No retry. No partial output.
# HFP-04: Stdout carries only the FAIL summary block.
# HFP-05: If the handler itself raises, write to stderr and exit 5.

import sys
from datetime import datetime, timezone
from typing import Optional

from wadvec.data_models.failure_record import FailureRecord, FAILURE_TYPES
from wadvec.exceptions import VectorError
from wadvec.generator_version import GENERATOR_VERSION


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class FailureHandler:
    """
    Enforces the hard failure policy.

    On any hard failure:
      1. Construct FailureRecord.
      2. Print failure summary to stdout.
      3. Call sys.exit(exit_code).
    """

    def __init__(self, seed: Optional[int]):
        self._seed = "none" if seed is None else str(seed)

    def build_record(
        self,
        failure_type_id: str,
        detail:          str,
        regime_name:     str = "",
        field_name:      str = "",
    ) -> FailureRecord:
        return FailureRecord(
            failure_type_id=failure_type_id,
            exit_code=FAILURE_TYPES.get(failure_type_id, 5),
            regime_name=regime_name,
            field_name=field_name,
            detected_at_iso=_now_iso(),
            generator_version=GENERATOR_VERSION,
            seed=self._seed,
            detail=detail,
        )

    def handle(
        self,
        failure_type_id: str,
        detail:          str,
        regime_name:     str = "",
        field_name:      str = "",
    ) -> None:
        """Execute the hard failure policy. This method does not return."""
        try:
            record = self.build_record(failure_type_id, detail, regime_name, field_name)
            print(
                f"GENERATOR RESULT: FAIL\n"
                f"Failure type:   {record.failure_type_id}\n"
                f"Exit code:      {record.exit_code}\n"
                f"Regime:         {record.regime_name or '(not applicable)'}\n"
                f"Field:          {record.field_name or '(not applicable)'}\n"
                f"Seed:           {record.seed}\n"
                f"Detail:         {record.detail[:200]}\n"
                f"Detected at:    {record.detected_at_iso}"
            )
            sys.stdout.flush()
        except Exception as exc:
            sys.stderr.write(
                f"GENERATOR_INTERNAL_ERROR: FailureHandler failed to report: {exc}\n"
                f"Original failure: {failure_type_id} -- {detail}\n"
            )
            sys.exit(5)

        sys.exit(record.exit_code)

    def handle_from_exception(self, exc: VectorError, regime_name: str = "") -> None:
        """Map a VectorError to its failure type and invoke handle()."""
        failure_type_id = getattr(exc, "failure_type_id", "GENERATOR_INTERNAL_ERROR")
        if failure_type_id not in FAILURE_TYPES:
            failure_type_id = "GENERATOR_INTERNAL_ERROR"
        regime_name = getattr(exc, "regime_name", "") or regime_name
        self.handle(
            failure_type_id=failure_type_id,
            detail=str(exc),
            regime_name=regime_name,
            field_name=getattr(exc, "field_name", ""),
        )
