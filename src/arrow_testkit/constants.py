"""Constant values shared by the test utilities."""

from pathlib import Path

# Project root holding ``pyproject.toml``; fallback data dirs are relative to it
PACKAGE_ROOT = Path(__file__).resolve().parent.parent.parent

# Fixed seed for every deterministic generator
SEED = 42

# Generated bytes lie in ``range(BYTE_UPPER_BOUND)``, so 255 never appears
BYTE_UPPER_BOUND = 255

ARROW_TEST_DATA_ENV = "ARROW_TEST_DATA"
ARROW_TEST_DATA_FALLBACK = "../testing/data"

PARQUET_TEST_DATA_ENV = "PARQUET_TEST_DATA"
PARQUET_TEST_DATA_FALLBACK = "../parquet-testing/data"

# Temp files land in ``<cwd>/target/debug/testdata``
TEMP_DIR_PARTS = ("target", "debug", "testdata")
