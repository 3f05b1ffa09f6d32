# wadvec/run_generator.py
# Gaussian CDF WAD test-vector generator -- Entry Point.
#
# Standard invocation:
#   python -m wadvec.run_generator --output input/tests.json --seed 0
#
# Non-reproducible run (fresh OS entropy):
#   python -m wadvec.run_generator --output input/tests.json --unseeded
#
# Verify an existing document without generating:
#   python -m wadvec.run_generator --verify-only input/tests.json
#
# EXIT CODES:
#   0  -- Document generated (or verified) and written.
#   1  -- VERIFICATION_FAILURE.
#   2  -- CONFIG_ERROR.
#   3  -- ORACLE_ERROR, ENCODING_ERROR or DATA_CORRUPTION.
#   4  -- SINK_WRITE_ERROR.
#   5  -- Internal generator error.
#
# Single-threaded. Success is reported only after the output file has been
# completely written.

import argparse
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence

from wadvec.data_models.regime import Regime
from wadvec.exceptions import VectorError
from wadvec.failure_handler import FailureHandler
from wadvec.generator_version import FORMAT_VERSION, GENERATOR_VERSION
from wadvec.parameter_sampler import ParameterSampler
from wadvec.regimes.regime_definitions import CASES_PER_REGIME, REGIMES
from wadvec.storage.vector_loader import VectorLoader
from wadvec.storage.vector_serializer import VectorSerializer
from wadvec.suite_builder import RegimeSuiteBuilder, TestVectorDocument
from wadvec.vector_verifier import VectorVerifier

DEFAULT_OUTPUT_PATH: Path = Path("input") / "tests.json"
DEFAULT_SEED:        int  = 0


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Run configuration.

    Fields:
      seed             -- PRNG seed. None draws OS entropy (not reproducible).
      cases_per_regime -- Cases generated for every regime.
      output_path      -- Destination of the JSON document.
    """
    seed:             Optional[int] = DEFAULT_SEED
    cases_per_regime: int = CASES_PER_REGIME
    output_path:      Path = DEFAULT_OUTPUT_PATH


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def generate_vectors(
    seed:             Optional[int] = DEFAULT_SEED,
    cases_per_regime: int = CASES_PER_REGIME,
    regimes:          Sequence[Regime] = REGIMES,
) -> TestVectorDocument:
    """
    Build the full test-vector document in memory.

    Raises:
        RegimeConfigError, OracleError, EncodingError.
    """
    builder = RegimeSuiteBuilder(ParameterSampler(seed), cases_per_regime)
    return builder.build_all(regimes)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"Gaussian CDF WAD test-vector generator v{GENERATOR_VERSION}",
        prog="python -m wadvec.run_generator",
    )
    parser.add_argument(
        "--output",
        default=str(DEFAULT_OUTPUT_PATH),
        help="Path of the JSON document to write (default: input/tests.json).",
    )
    seeding = parser.add_mutually_exclusive_group()
    seeding.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help="PRNG seed for a reproducible corpus (default: 0).",
    )
    seeding.add_argument(
        "--unseeded",
        action="store_true",
        default=False,
        help="Draw from OS entropy. The corpus is not reproducible.",
    )
    parser.add_argument(
        "--cases-per-regime",
        type=_positive_int,
        default=CASES_PER_REGIME,
        help="Number of cases per regime (default: 1000).",
    )
    parser.add_argument(
        "--verify-only",
        default=None,
        metavar="PATH",
        help="Load and verify an existing document instead of generating one.",
    )
    return parser.parse_args(argv)


def _config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    return GeneratorConfig(
        seed=None if args.unseeded else args.seed,
        cases_per_regime=args.cases_per_regime,
        output_path=Path(args.output),
    )


def _fail_on_violations(fh: FailureHandler, violations: List[str]) -> None:
    if violations:
        fh.handle(
            failure_type_id="VERIFICATION_FAILURE",
            detail=f"{len(violations)} violation(s). First: {violations[0]}",
        )


def _verify_only(path: Path, config: GeneratorConfig, fh: FailureHandler) -> None:
    try:
        document = VectorLoader().load(path)
    except VectorError as exc:
        fh.handle_from_exception(exc)
    except OSError as exc:
        fh.handle("DATA_CORRUPTION", f"Cannot read {path}: {exc}")

    _fail_on_violations(fh, VectorVerifier(REGIMES, config.cases_per_regime).verify(document))

    print(
        f"GENERATOR RESULT: PASS\n"
        f"Mode:            verify-only\n"
        f"Document:        {path}\n"
        f"Regimes:         {len(document)}\n"
        f"Vectors:         {sum(len(c) for c in document.values())}\n"
        f"Timestamp:       {_now_iso()}"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """
    Generator pipeline. On pass prints a summary and exits 0.
    On any failure FailureHandler invokes sys.exit(non-zero).

    Pipeline sequence:
      RSB (RegimeSuiteBuilder: sampler -> oracle -> encoder)
      VV  (VectorVerifier)
      VS  (VectorSerializer)
      FH  (FailureHandler) -- invoked only on failure
    """
    args   = _parse_args(argv)
    config = _config_from_args(args)
    fh     = FailureHandler(seed=config.seed)

    if args.verify_only is not None:
        _verify_only(Path(args.verify_only), config, fh)
        sys.exit(0)

    # -----------------------------------------------------------------------
    # STAGE 1: REGIME SUITE BUILDER (RSB)
    # -----------------------------------------------------------------------
    try:
        document = generate_vectors(config.seed, config.cases_per_regime, REGIMES)
    except VectorError as exc:
        fh.handle_from_exception(exc)

    # -----------------------------------------------------------------------
    # STAGE 2: VECTOR VERIFIER (VV) -- nothing is written on a violation.
    # -----------------------------------------------------------------------
    _fail_on_violations(fh, VectorVerifier(REGIMES, config.cases_per_regime).verify(document))

    # -----------------------------------------------------------------------
    # STAGE 3: VECTOR SERIALIZER (VS)
    # -----------------------------------------------------------------------
    try:
        written = VectorSerializer().serialize(document, config.output_path)
    except VectorError as exc:
        fh.handle_from_exception(exc)

    print(
        f"GENERATOR RESULT: PASS\n"
        f"Generator:       {GENERATOR_VERSION} (format {FORMAT_VERSION})\n"
        f"Seed:            {'none' if config.seed is None else config.seed}\n"
        f"Regimes:         {', '.join(document.keys())}\n"
        f"Vectors:         {sum(len(c) for c in document.values())}\n"
        f"Output:          {written}\n"
        f"Timestamp:       {_now_iso()}"
    )
    sys.exit(0)


if __name__ == "__main__":
    main()
