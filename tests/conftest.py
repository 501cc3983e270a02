"""Shared fixtures for cali tests."""

import logging
from datetime import date

import pytest

from cali.storage.datafile import DataFile

DAY = date(2026, 10, 19)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    monkeypatch.delenv("CALI_DATA_FILE", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    yield
    logging.getLogger("cali").handlers.clear()


@pytest.fixture
def data_path(tmp_path):
    return tmp_path / "data" / "cali_data.json"


@pytest.fixture
def data_file(data_path) -> DataFile:
    return DataFile(data_path)
