"""Shared test fixtures and utilities for countryemoji tests."""

from pathlib import Path
from typing import Callable, Dict, List

import pytest
import yaml

from countryemoji.countries.countrytable import CountryTable, load_countries


@pytest.fixture
def table() -> CountryTable:
    """The packaged country table."""
    return load_countries()


@pytest.fixture
def sample_countries() -> Dict[str, str]:
    """Fixture providing sample country names and codes with their ISO2 codes."""
    return {
        "USA": "US",
        "United States": "US",
        "United Kingdom": "GB",
        "England": "GB",
        "Australia": "AU",
        "Canada": "CA",
        "Germany": "DE",
        "France": "FR",
        "Holland": "NL",
        "Ivory Coast": "CI",
    }


@pytest.fixture
def write_countries_yaml(tmp_path: Path) -> Callable[[List[dict]], Path]:
    """Fixture returning a helper that writes a countries.yaml into tmp_path.

    Example:
        def test_custom(write_countries_yaml):
            path = write_countries_yaml([{"code": "AA", "name": "Aland"}])
            table = load_countries(path)
    """
    def _write(countries: List[dict], filename: str = "countries.yaml") -> Path:
        path = tmp_path / filename
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump({"countries": countries}, f, allow_unicode=True)
        return path

    return _write
