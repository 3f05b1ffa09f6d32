# wadvec/storage/vector_loader.py
# VectorLoader -- loads a previously written test-vector document.
#
# VLD-01: Top level must be a JSON object of regime name -> array.
# VLD-02: Each case must be an object with exactly the eight TestCase fields.
# VLD-03: Every field value must be a string.
# Any violation raises VectorDataError (hard failure). Content-level checks
# (WAD arithmetic, ranges, counts) belong to VectorVerifier.

import json
from pathlib import Path
from typing import List

from wadvec.data_models.test_case import TestCase, TEST_CASE_FIELDS
from wadvec.exceptions import VectorDataError
from wadvec.suite_builder import TestVectorDocument


def _load_case(d: object, where: str) -> TestCase:
    if not isinstance(d, dict):
        raise VectorDataError(where, type(d).__name__, "must be a JSON object")
    if set(d.keys()) != set(TEST_CASE_FIELDS):
        raise VectorDataError(
            where, sorted(d.keys()), "must have exactly the fields " + ", ".join(TEST_CASE_FIELDS)
        )
    for name in TEST_CASE_FIELDS:
        if not isinstance(d[name], str):
            raise VectorDataError(f"{where}.{name}", d[name], "must be a string")
    return TestCase(**{name: d[name] for name in TEST_CASE_FIELDS})


class VectorLoader:
    """Loads and shape-checks a serialized TestVectorDocument."""

    def load(self, filepath: Path) -> TestVectorDocument:
        """
        Parse filepath into a TestVectorDocument.

        Raises:
            VectorDataError if the file is not valid UTF-8 JSON or has the wrong
            shape.
            OSError if the file cannot be read.
        """
        with open(filepath, "r", encoding="utf-8") as f:
            try:
                raw = json.load(f)
            except json.JSONDecodeError as exc:
                raise VectorDataError("document", str(filepath), f"must be valid JSON ({exc.msg})")
            except UnicodeDecodeError:
                raise VectorDataError("document", str(filepath), "must be UTF-8 JSON")

        if not isinstance(raw, dict):
            raise VectorDataError("document", type(raw).__name__, "must be a JSON object")

        document: TestVectorDocument = {}
        for regime_name, entries in raw.items():
            if not isinstance(entries, list):
                raise VectorDataError(regime_name, type(entries).__name__, "must be a JSON array")
            cases: List[TestCase] = [
                _load_case(entry, f"{regime_name}[{i}]") for i, entry in enumerate(entries)
            ]
            document[regime_name] = tuple(cases)
        return document
