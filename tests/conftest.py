"""Shared fixtures: reference files written with mpmath."""

from __future__ import annotations

from pathlib import Path

import pytest

from euler_digits import write_reference_file
from euler_digits.config import LINE_WIDTH_ENV, LOG_LEVEL_ENV, REFERENCE_ENV

# First 50 decimal places of e, as published
E_50 = "2.71828182845904523536028747135266249775724709369995"

REFERENCE_DECIMAL_PLACES = 2500


@pytest.fixture(scope="session")
def reference_file(tmp_path_factory) -> Path:
    """A reference file holding 2500 decimal places of e."""
    path = tmp_path_factory.mktemp("reference") / "control_e.txt"
    return write_reference_file(path, REFERENCE_DECIMAL_PLACES)


@pytest.fixture
def corrupted_reference(tmp_path: Path) -> Path:
    """A reference file whose ninth character (the 7th decimal place) is wrong."""
    text = E_50[:8] + "0" + E_50[9:]
    path = tmp_path / "corrupted_e.txt"
    path.write_text(text + "\n", encoding="ascii")
    return path


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    for name in (REFERENCE_ENV, LOG_LEVEL_ENV, LINE_WIDTH_ENV):
        monkeypatch.delenv(name, raising=False)
