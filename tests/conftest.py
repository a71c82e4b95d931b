"""Shared fixtures."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch

from flexver import VersionParser


@pytest.fixture
def parser() -> VersionParser:
    """Parser with arbitrary-precision integers."""
    return VersionParser(has_bignum=True)


@pytest.fixture
def float_parser() -> VersionParser:
    """Parser that approximates large values with floats."""
    return VersionParser(has_bignum=False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Empty working directory with no configuration files."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
