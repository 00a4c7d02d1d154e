from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from vehicles_api.data.loader import load_vehicles
from vehicles_api.main import create_app

SAMPLE_RECORDS = [{"id": 1, "make": "Toyota"}, {"id": 2, "make": "Honda"}]


@pytest.fixture
def write_data(tmp_path: Path):
    """Write a data file into tmp_path; raw strings are written verbatim."""

    def _write(content, name: str = "vehicles.json") -> Path:
        path = tmp_path / name
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_path(write_data) -> Path:
    return write_data(SAMPLE_RECORDS)


@pytest.fixture
def client(sample_path: Path) -> TestClient:
    return TestClient(create_app(load_vehicles(sample_path)))
