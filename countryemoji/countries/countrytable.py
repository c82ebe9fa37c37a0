"""
Country Table
-------------

Immutable mapping of ISO 3166-1 alpha-2 code -> canonical name and
alternative names. Built once from the packaged dataset and shared
read-only by every lookup.

The packaged dataset is pycountry's ISO 3166-1 list (name, official_name,
common_name) with the curated overlay in data/countries.yaml applied on top:
display names, colloquial aliases, excluded ISO names and the codes
pycountry does not carry (AN, XK).

Data Loading Priority:
  1. Explicit path (YAML, parquet or CSV holding complete rows)
  2. Module-local data: countryemoji/countries/data/countries.parquet
     (written by data/build_countries.py)
  3. pycountry + countryemoji/countries/data/countries.yaml overlay

A malformed dataset (duplicate code, empty name, code that is not two
letters) raises CountryDataError when the table is built. It never
degrades into a partial table.

API:
  load_countries(path=None) -> CountryTable
  build_table(rows) -> CountryTable
  read_country_rows(path) -> list[dict]
  catalog_rows() -> list[dict]

Examples:
  >>> table = load_countries()
  >>> table.lookup_by_code("gb").name
  'United Kingdom'

  >>> table.all_codes()[:3]
  ('AD', 'AE', 'AF')
"""

from __future__ import annotations
import warnings
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

try:
    import pycountry
except ImportError as e:
    raise ImportError("pycountry not installed. pip install pycountry") from e

from countryemoji.countries.countrynormalize import country_name_variants, normalize_country_name
from countryemoji.utils.build_utils import collect_aliases, load_yaml_file
from countryemoji.utils.dataloader import (
    find_data_file,
    format_not_found_error,
    load_parquet_or_csv,
)


class CountryDataError(ValueError):
    """The country dataset is malformed."""


@dataclass(frozen=True)
class CountryRecord:
    """One country: alpha-2 code, canonical display name and aliases."""

    code: str
    name: str
    aliases: Tuple[str, ...] = ()

    @property
    def names(self) -> Tuple[str, ...]:
        """Canonical name followed by every alias."""
        return (self.name,) + self.aliases


def _is_alpha2(code: Any) -> bool:
    return isinstance(code, str) and len(code) == 2 and all("A" <= c <= "Z" for c in code)


class CountryTable:
    """Read-only country lookup table.

    Records are kept sorted by code. No method mutates the table, so one
    instance can be shared across threads.
    """

    def __init__(self, records: Iterable[CountryRecord]):
        by_code: Dict[str, CountryRecord] = {}
        for record in records:
            if not _is_alpha2(record.code):
                raise CountryDataError(f"Malformed country code: {record.code!r}")
            if not record.name or not record.name.strip():
                raise CountryDataError(f"Missing canonical name for {record.code}")
            if record.code in by_code:
                raise CountryDataError(f"Duplicate country code: {record.code}")
            by_code[record.code] = record

        if not by_code:
            raise CountryDataError("Country dataset is empty")

        self._records: Mapping[str, CountryRecord] = MappingProxyType(dict(sorted(by_code.items())))
        self._codes = tuple(self._records)
        self._name_candidates = tuple(
            (record.code, name) for record in self._records.values() for name in record.names
        )

    def lookup_by_code(self, code: str) -> Optional[CountryRecord]:
        """Record for a code (case and surrounding whitespace ignored), or None."""
        if not isinstance(code, str):
            return None
        return self._records.get(code.strip().upper())

    def name_candidates(self) -> Tuple[Tuple[str, str], ...]:
        """Every (code, name) pair, canonical names and aliases alike."""
        return self._name_candidates

    def all_codes(self) -> Tuple[str, ...]:
        """All codes in alphabetical order."""
        return self._codes

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.lookup_by_code(code) is not None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CountryRecord]:
        return iter(self._records.values())

    def __repr__(self) -> str:
        return f"CountryTable({len(self)} countries)"


# ---- Building from raw rows ----

def _row_to_record(row: Mapping[str, Any]) -> CountryRecord:
    code = row.get("code")
    if not isinstance(code, str):
        # YAML reads an unquoted NO as False
        raise CountryDataError(f"Malformed country code {code!r} in row {dict(row)}")
    code = code.strip().upper()

    name = row.get("name")
    if not isinstance(name, str) or not name.strip():
        raise CountryDataError(f"Missing canonical name for {code or row!r}")

    aliases = row.get("aliases") or []
    if isinstance(aliases, str) or not isinstance(aliases, (list, tuple)):
        raise CountryDataError(f"Aliases for {code} must be a list, got {aliases!r}")

    cleaned = []
    for alias in aliases:
        if not isinstance(alias, str):
            raise CountryDataError(f"Alias {alias!r} for {code} is not a string")
        alias = alias.strip()
        if alias and alias not in cleaned:
            cleaned.append(alias)

    return CountryRecord(code=code, name=name.strip(), aliases=tuple(cleaned))


def shared_names(table: CountryTable) -> Dict[str, Tuple[str, ...]]:
    """Normalized names claimed by more than one code.

    Any such name makes the exact tier ambiguous for that input.

    Returns:
        Dict of normalized name -> sorted codes sharing it
    """
    owners: Dict[str, set] = {}
    for code, name in table.name_candidates():
        for variant in country_name_variants(name):
            owners.setdefault(variant, set()).add(code)
    return {
        variant: tuple(sorted(codes))
        for variant, codes in owners.items()
        if len(codes) > 1
    }


def build_table(rows: Iterable[Mapping[str, Any]]) -> CountryTable:
    """Validate raw rows ({code, name, aliases}) and freeze them into a table.

    Raises:
        CountryDataError: duplicate code, empty name, malformed code or aliases

    Warns:
        UserWarning: when a normalized name belongs to more than one code
    """
    table = CountryTable(_row_to_record(row) for row in rows)

    for variant, codes in sorted(shared_names(table).items()):
        warnings.warn(
            f"Country name '{variant}' is shared by {', '.join(codes)}; "
            f"exact matches on it will be ambiguous.",
            UserWarning,
            stacklevel=2,
        )

    return table


def read_country_rows(path: Path) -> List[Dict[str, Any]]:
    """Read raw country rows from a YAML, parquet or CSV file.

    YAML files hold a top-level ``countries`` list of {code, name, aliases}.
    Parquet/CSV files use the flat layout written by build_countries.py:
    ``code``, ``name`` and ``alias1``...``aliasN`` columns.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the extension is not supported
        CountryDataError: If the file does not have the expected layout
    """
    path = Path(path)

    if path.suffix in (".yaml", ".yml"):
        data = load_yaml_file(path)
        if not isinstance(data, dict) or not isinstance(data.get("countries"), list):
            raise CountryDataError(f"{path} has no top-level 'countries' list")
        return data["countries"]

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    df = load_parquet_or_csv(path)
    missing = [col for col in ("code", "name") if col not in df.columns]
    if missing:
        raise CountryDataError(f"{path} is missing columns: {missing}")

    return [
        {"code": row["code"], "name": row["name"], "aliases": collect_aliases(row)}
        for row in df.to_dict("records")
    ]


# ---- Packaged dataset: pycountry base + curated overlay ----

def pycountry_rows() -> List[Dict[str, Any]]:
    """
    Base rows for every ISO 3166-1 country known to pycountry.

    The display name is common_name when pycountry has one ("Bolivia"),
    else name. The remaining ISO names become aliases.

    Returns:
        List of {code, name, aliases} dicts
    """
    rows = []
    for c in pycountry.countries:
        alpha2 = getattr(c, "alpha_2", None)
        if not alpha2:
            continue

        name = getattr(c, "name", None)
        official = getattr(c, "official_name", None)
        common = getattr(c, "common_name", None)
        display = common or name

        aliases = []
        for alt in (name, official):
            if alt and alt != display and alt not in aliases:
                aliases.append(alt)

        rows.append({"code": alpha2, "name": display, "aliases": aliases})
    return rows


def apply_overlay(
    base_rows: Iterable[Mapping[str, Any]],
    overlay_rows: Iterable[Mapping[str, Any]],
) -> List[Dict[str, Any]]:
    """
    Apply curated overlay entries to base rows.

    An overlay entry for a known code may replace the display name (the old
    one stays as an alias), add aliases ahead of the base ones and exclude
    base names by normalized form. An entry for an unknown code adds a new
    row and must carry its own name.

    Raises:
        CountryDataError: If an overlay code, aliases or exclude list is malformed

    Examples:
        >>> apply_overlay(
        ...     [{"code": "CG", "name": "Congo", "aliases": ["Republic of the Congo"]}],
        ...     [{"code": "CG", "name": "Congo-Brazzaville", "exclude": ["Congo"]}],
        ... )
        [{'code': 'CG', 'name': 'Congo-Brazzaville', 'aliases': ['Republic of the Congo']}]
    """
    merged: Dict[str, Dict[str, Any]] = {}
    for row in base_rows:
        merged[row["code"]] = {
            "code": row["code"],
            "name": row["name"],
            "aliases": list(row.get("aliases") or []),
        }

    for entry in overlay_rows:
        code = entry.get("code")
        if not isinstance(code, str):
            # YAML reads an unquoted NO as False
            raise CountryDataError(f"Malformed country code {code!r} in overlay entry {dict(entry)}")
        code = code.strip().upper()

        extra = entry.get("aliases") or []
        exclude = entry.get("exclude") or []
        for field, values in (("aliases", extra), ("exclude", exclude)):
            if not isinstance(values, list):
                raise CountryDataError(f"Overlay {field} for {code} must be a list, got {values!r}")

        base = merged.get(code)
        if base is None:
            merged[code] = {"code": code, "name": entry.get("name"), "aliases": list(extra)}
            continue

        excluded = {normalize_country_name(n) for n in exclude if isinstance(n, str)}
        display = entry.get("name") or base["name"]
        names = list(extra) + [base["name"]] + base["aliases"]
        merged[code] = {
            "code": code,
            "name": display,
            "aliases": [
                n for n in names
                if n != display and normalize_country_name(n) not in excluded
            ],
        }

    return [merged[code] for code in sorted(merged)]


def catalog_rows() -> List[Dict[str, Any]]:
    """
    Packaged country rows: pycountry with data/countries.yaml applied.

    Raises:
        FileNotFoundError: If the overlay file is missing from the install
    """
    overlay_path = find_data_file(module_file=__file__, filenames=["countries.yaml"])

    if overlay_path is None:
        data_dir = Path(__file__).parent / "data"
        error_msg = format_not_found_error(
            subdirectory="countries",
            searched_locations=[
                ("Module-local data", data_dir),
            ],
            fix_instructions=[
                "Reinstall countryemoji; countries.yaml ships as package data.",
            ],
        )
        raise FileNotFoundError(error_msg)

    return apply_overlay(pycountry_rows(), read_country_rows(overlay_path))


@lru_cache(maxsize=8)
def load_countries(path: Optional[Union[str, Path]] = None) -> CountryTable:
    """Load the country table once and reuse it.

    Args:
        path: Optional path to a countries .yaml/.parquet/.csv file holding
              complete rows. If None, uses the compiled countries.parquet
              when present, else pycountry with the packaged overlay

    Returns:
        Immutable CountryTable

    Raises:
        FileNotFoundError: If no dataset is found
        CountryDataError: If the dataset is malformed

    Examples:
        >>> table = load_countries()
        >>> "GB" in table
        True
    """
    if path is not None:
        return build_table(read_country_rows(Path(path)))

    compiled = find_data_file(module_file=__file__, filenames=["countries.parquet"])
    if compiled is not None:
        return build_table(read_country_rows(compiled))

    return build_table(catalog_rows())


__all__ = [
    "CountryDataError",
    "CountryRecord",
    "CountryTable",
    "build_table",
    "shared_names",
    "read_country_rows",
    "pycountry_rows",
    "apply_overlay",
    "catalog_rows",
    "load_countries",
]
