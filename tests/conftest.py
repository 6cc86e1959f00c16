"""Pytest fixtures for person grouping tests."""

import csv
import textwrap

import pytest


@pytest.fixture
def write_csv(tmp_path):
    """Write dedented CSV text to a temp file and return its path as str."""

    def _write(content: str, name: str = "people.csv") -> str:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def read_csv():
    """Read a CSV file back as a list of rows."""

    def _read(path: str) -> list:
        with open(path, newline="", encoding="utf-8") as f:
            return list(csv.reader(f))

    return _read
