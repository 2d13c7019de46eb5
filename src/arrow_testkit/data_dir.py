"""Locate checked-in test data directories.

Each fixture corpus is found through an optional environment variable that
overrides its location, and otherwise through a path relative to the project
root where the corpus is normally checked out as a git submodule. The
environment is read on every call so tests may change it between lookups.
"""

import enum
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .constants import (
    ARROW_TEST_DATA_ENV,
    ARROW_TEST_DATA_FALLBACK,
    PACKAGE_ROOT,
    PARQUET_TEST_DATA_ENV,
    PARQUET_TEST_DATA_FALLBACK,
)

__all__ = [
    "ConfiguredPathNotFound",
    "DataDir",
    "DataDirError",
    "DataDirSource",
    "NoFallbackAvailable",
    "arrow_test_data",
    "get_data_dir",
    "parquet_test_data",
    "resolve_data_dir",
]


class DataDirSource(enum.Enum):
    """Where a resolved data directory came from."""

    ENV = "env"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class DataDir:
    """Directory confirmed to exist when it was resolved."""

    path: Path
    source: DataDirSource
    env_var: str


class DataDirError(RuntimeError):
    """Raised when no test data directory can be resolved."""

    def __init__(self, message: str, env_var: str, path: Path) -> None:
        super().__init__(message)
        self.env_var = env_var
        self.path = path


class ConfiguredPathNotFound(DataDirError):
    """The environment variable points at something that is not a directory."""

    def __init__(self, env_var: str, path: Path) -> None:
        super().__init__(
            f"the data dir `{path}` defined by env {env_var} not found",
            env_var,
            path,
        )


class NoFallbackAvailable(DataDirError):
    """Neither the environment variable nor the fallback path is usable."""

    def __init__(self, env_var: str, path: Path) -> None:
        super().__init__(
            f"env `{env_var}` is undefined or has empty value, and the "
            f"pre-defined data dir `{path}` not found\n"
            "HINT: try running `git submodule update --init`",
            env_var,
            path,
        )


def resolve_data_dir(
    env_var: str, fallback: str | Path, root: Path | None = None
) -> DataDir:
    """Return the data directory named by ``env_var`` or ``fallback``.

    Args:
        env_var: Name of the overriding environment variable.
        fallback: Path relative to ``root``; an absolute path is used as is.
        root: Base for ``fallback``. Defaults to the project root.

    Returns:
        DataDir: Resolved directory and where it came from.

    Raises:
        ConfiguredPathNotFound: If ``env_var`` is set to a non-blank value
            that is not an existing directory. The fallback is not tried.
        NoFallbackAvailable: If ``env_var`` is unset or blank and the
            fallback directory does not exist.
    """

    log = logging.getLogger(__name__)
    configured = os.environ.get(env_var, "").strip()
    if configured:
        path = Path(configured)
        if not path.is_dir():
            raise ConfiguredPathNotFound(env_var, path)
        log.debug("using %s from env %s", path, env_var)
        return DataDir(path=path, source=DataDirSource.ENV, env_var=env_var)

    path = (PACKAGE_ROOT if root is None else root) / fallback
    if not path.is_dir():
        raise NoFallbackAvailable(env_var, path)
    log.debug("env %s unset, using fallback %s", env_var, path)
    return DataDir(path=path, source=DataDirSource.FALLBACK, env_var=env_var)


def get_data_dir(
    env_var: str, fallback: str | Path, root: Path | None = None
) -> Path:
    """Return only the path of :func:`resolve_data_dir`."""

    return resolve_data_dir(env_var, fallback, root=root).path


def arrow_test_data() -> str:
    """Return the arrow test data directory.

    Defaults to the ``testing/data`` submodule next to the project and can be
    overridden with ``ARROW_TEST_DATA``.

    Raises:
        RuntimeError: When the directory can not be found.
    """

    try:
        return str(get_data_dir(ARROW_TEST_DATA_ENV, ARROW_TEST_DATA_FALLBACK))
    except DataDirError as exc:
        raise RuntimeError(f"failed to get arrow data dir: {exc}") from exc


def parquet_test_data() -> str:
    """Return the parquet test data directory.

    Defaults to the ``parquet-testing/data`` submodule next to the project and
    can be overridden with ``PARQUET_TEST_DATA``.

    Raises:
        RuntimeError: When the directory can not be found.
    """

    try:
        return str(
            get_data_dir(PARQUET_TEST_DATA_ENV, PARQUET_TEST_DATA_FALLBACK)
        )
    except DataDirError as exc:
        raise RuntimeError(f"failed to get parquet data dir: {exc}") from exc
