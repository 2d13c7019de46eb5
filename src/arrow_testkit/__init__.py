"""Utilities that make testing the arrow libraries easier."""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import re

from .bad_iterator import BadIterator
from .data_dir import (
    ConfiguredPathNotFound,
    DataDir,
    DataDirError,
    DataDirSource,
    NoFallbackAvailable,
    arrow_test_data,
    get_data_dir,
    parquet_test_data,
    resolve_data_dir,
)
from .rng import random_bytes, seedable_rng
from .temp_file import get_temp_file

_pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"


def _read_version(path: Path) -> str:
    text = path.read_text(encoding="utf-8")
    match = re.search(r'^version\s*=\s*"([^"]+)"', text, flags=re.MULTILINE)
    if not match:
        raise RuntimeError("version not found in pyproject.toml")
    return match.group(1)


try:
    __version__ = version("arrow-testkit")
except PackageNotFoundError:
    __version__ = _read_version(_pyproject)

__all__ = [
    "BadIterator",
    "ConfiguredPathNotFound",
    "DataDir",
    "DataDirError",
    "DataDirSource",
    "NoFallbackAvailable",
    "arrow_test_data",
    "get_data_dir",
    "get_temp_file",
    "parquet_test_data",
    "random_bytes",
    "resolve_data_dir",
    "seedable_rng",
    "__version__",
]
