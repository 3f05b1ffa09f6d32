# wadvec/storage/vector_serializer.py
# VectorSerializer -- writes a test-vector document to a JSON file.
#
# VSF-01: Top level is an object keyed by regime name, in generation order.
# VSF-02: Each case is an object with the eight string fields in the order
#         cdf, cdf_wad, s, s_wad, u, u_wad, x, x_wad.
# VSF-03: All values are strings. WAD integers exceed 2**53 and would lose
#         digits as JSON numbers in most consumers.
# VSF-04: The document is written to a temporary file beside the target and
#         renamed over it, so the target is either complete or untouched.
# VSF-05: Parent directories are created if they do not exist.
# VSF-06: Any OSError is raised as SinkWriteError. Nothing is swallowed.

import json
import os
import tempfile
from pathlib import Path

from wadvec.data_models.test_case import TestCase, TEST_CASE_FIELDS
from wadvec.exceptions import SinkWriteError
from wadvec.suite_builder import TestVectorDocument


def _serialize_case(case: TestCase) -> dict:
    return {name: getattr(case, name) for name in TEST_CASE_FIELDS}


def serialize_document(document: TestVectorDocument) -> dict:
    """JSON-ready mapping for a document (VSF-01 .. VSF-03)."""
    return {
        regime_name: [_serialize_case(c) for c in cases]
        for regime_name, cases in document.items()
    }


class VectorSerializer:
    """Serializes a TestVectorDocument to a single JSON file."""

    def serialize(self, document: TestVectorDocument, output_path: Path) -> Path:
        """
        Write document to output_path and return the path written.

        Raises:
            SinkWriteError if the directory cannot be created or the file
            cannot be written or renamed.
        """
        output_path = Path(output_path)
        payload     = serialize_document(document)

        tmp_name = None
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{output_path.name}.",
                suffix=".tmp",
                dir=str(output_path.parent),
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
                f.write("\n")
            os.replace(tmp_name, output_path)
            tmp_name = None
        except OSError as exc:
            raise SinkWriteError(str(output_path), str(exc)) from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        return output_path
