import pytest

import arrow_testkit.data_dir as data_dir
from arrow_testkit.constants import ARROW_TEST_DATA_ENV, PARQUET_TEST_DATA_ENV


@pytest.fixture
def clean_env(monkeypatch):
    """Drop the data dir overrides so fallbacks are exercised."""

    monkeypatch.delenv(ARROW_TEST_DATA_ENV, raising=False)
    monkeypatch.delenv(PARQUET_TEST_DATA_ENV, raising=False)


@pytest.fixture
def project_root(tmp_path, monkeypatch):
    """Fake project root with both submodule data dirs checked out beside it."""

    root = tmp_path / "arrow"
    root.mkdir()
    (tmp_path / "testing" / "data").mkdir(parents=True)
    (tmp_path / "parquet-testing" / "data").mkdir(parents=True)
    monkeypatch.setattr(data_dir, "PACKAGE_ROOT", root)
    return root
