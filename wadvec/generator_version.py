# wadvec/generator_version.py
# Generator version constants. Single authoritative definition.
# Referenced by run_generator.py, vector_serializer.py and failure_handler.py.
# A change to the emitted document layout requires a FORMAT_VERSION increment.

GENERATOR_VERSION: str = "1.0.0"

# Layout version of the emitted test-vector document.
FORMAT_VERSION: str = "1.0.0"

# WAD fixed-point scale: a real v is represented by round(v * 10**18).
WAD_DECIMALS: int = 18
WAD_SCALE:    int = 10 ** WAD_DECIMALS
