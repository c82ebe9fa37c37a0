"""Country conversion API.

Public functions converting between alpha-2 codes, English names and flag
emoji. Inputs that match nothing, or match more than one country, give
None; malformed input never raises.

Every function takes an optional ``table`` keyword to resolve against a
custom dataset (see load_countries). By default the packaged table is used.
"""

from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from countryemoji.countries.countryidentity import (
    resolve as _resolve,
    resolve_code as _resolve_code,
)
from countryemoji.countries.countrynormalize import (
    country_name_variants,
    normalize_country_name,
)
from countryemoji.countries.countrytable import CountryTable, load_countries
from countryemoji.flags.flagcodec import (
    code_to_flag,
    flag_to_code,
    is_flag_shape,
)
from countryemoji.utils.build_utils import expand_aliases


def _table(table: Optional[CountryTable]) -> CountryTable:
    return load_countries() if table is None else table


def code(text: str, *, table: Optional[CountryTable] = None) -> Optional[str]:
    """Alpha-2 code for a flag, code or country name.

    Flag input is decoded directly and must name a code in the table.
    Anything else goes through the name resolver.

    Args:
        text: Flag emoji ("🇬🇧"), code ("gb") or name ("United Kingdom", "UK")

    Returns:
        Uppercase alpha-2 code, or None if unknown or ambiguous

    Examples:
        >>> code("🇯🇵")
        'JP'

        >>> code("Tanzania, United Republic of")
        'TZ'

        >>> code("Korea") is None  # North or South
        True
    """
    table = _table(table)

    if is_flag_shape(text):
        decoded = flag_to_code(text)
        return decoded if decoded in table else None

    return _resolve_code(text, table)


def flag(text: str, *, table: Optional[CountryTable] = None) -> Optional[str]:
    """Flag emoji for a flag, code or country name.

    Examples:
        >>> flag("Taiwan number one!")
        '🇹🇼'

        >>> flag("XX") is None
        True
    """
    found = code(text, table=table)
    return code_to_flag(found) if found else None


def name(text: str, *, table: Optional[CountryTable] = None) -> Optional[str]:
    """Canonical English name for a flag, code or country name.

    Examples:
        >>> name("🇬🇧")
        'United Kingdom'

        >>> name("Korea, Democratic People's Republic of")
        'North Korea'
    """
    table = _table(table)
    found = code(text, table=table)
    return table.lookup_by_code(found).name if found else None


def countries(*, table: Optional[CountryTable] = None) -> Dict[str, str]:
    """Ordered mapping of every code to its canonical name, sorted by code."""
    return {record.code: record.name for record in _table(table)}


def name_to_code(text: str, *, table: Optional[CountryTable] = None) -> Optional[str]:
    """Alpha-2 code for a country name (codes are accepted too).

    Examples:
        >>> name_to_code("chile")
        'CL'

        >>> name_to_code("Vatican")
        'VA'
    """
    return _resolve_code(text, _table(table))


def code_to_name(code: str, *, table: Optional[CountryTable] = None) -> Optional[str]:
    """Canonical name for a code, case-insensitive; None for unknown codes."""
    record = _table(table).lookup_by_code(code)
    return record.name if record else None


def is_code(code: Optional[str], *, table: Optional[CountryTable] = None) -> bool:
    """True when code (any case) is in the country table. None gives False."""
    if not isinstance(code, str):
        return False
    return code in _table(table)


def is_country_flag(text: str) -> bool:
    """True for any pair of regional indicator symbols, assigned or not."""
    return is_flag_shape(text)


def codes(texts: Iterable[str], *, table: Optional[CountryTable] = None) -> List[Optional[str]]:
    """Batch version of code().

    Examples:
        >>> codes(["USA", "Holland", "🇨🇱", "Atlantis"])
        ['US', 'NL', 'CL', None]
    """
    table = _table(table)
    return [code(text, table=table) for text in texts]


def resolve_country(text: str, *, table: Optional[CountryTable] = None) -> Dict[str, Any]:
    """Resolution with the decision and every candidate, for review and debugging.

    code() collapses "no match" and "ambiguous" into None; this keeps them apart.

    Returns:
        Dict with:
          - query, query_norm: raw and normalized input
          - decision: "unique" | "ambiguous" | "no_match"
          - tier: "flag" | "code" | "exact" | "containment" | None
          - candidates: list of {code, name, flag} dicts from the deciding tier
          - final: the chosen candidate dict, or None

    Examples:
        >>> result = resolve_country("Korea")
        >>> result["decision"], [c["code"] for c in result["candidates"]]
        ('ambiguous', ['KP', 'KR'])
    """
    table = _table(table)

    query_norm = normalize_country_name(text) if isinstance(text, str) else ""
    result: Dict[str, Any] = {
        "query": text,
        "query_norm": query_norm,
        "decision": "no_match",
        "tier": None,
        "candidates": [],
        "final": None,
    }

    if is_flag_shape(text):
        decoded = flag_to_code(text)
        result["tier"] = "flag"
        candidate_codes = (decoded,) if decoded in table else ()
        decision = "unique" if candidate_codes else "no_match"
    else:
        resolution = _resolve(text, table)
        result["tier"] = resolution.tier
        candidate_codes = resolution.candidates
        decision = resolution.status.value

    result["decision"] = decision
    result["candidates"] = [
        {
            "code": candidate,
            "name": table.lookup_by_code(candidate).name,
            "flag": code_to_flag(candidate),
        }
        for candidate in candidate_codes
    ]
    if decision == "unique":
        result["final"] = result["candidates"][0]

    return result


def list_countries(
    search: Optional[str] = None,
    *,
    table: Optional[CountryTable] = None,
) -> pd.DataFrame:
    """List countries as a DataFrame, optionally filtered.

    Args:
        search: Optional text; keeps countries whose code equals it or whose
                normalized name or alias contains it as a substring
                (non-string search matches nothing)

    Returns:
        DataFrame with columns code, name, name_norm, flag, alias1...aliasN,
        one row per country, sorted by code

    Examples:
        >>> list_countries("guinea")["code"].tolist()
        ['GN', 'GQ', 'GW', 'PG']
    """
    table = _table(table)
    records = list(table)

    if search is not None and not isinstance(search, str):
        records = []
    elif search is not None:
        search_code = search.strip().upper()
        search_norm = normalize_country_name(search)
        records = [
            record for record in records
            if record.code == search_code
            or (search_norm and any(
                search_norm in variant
                for n in record.names
                for variant in country_name_variants(n)
            ))
        ]

    max_aliases = max([10] + [len(record.aliases) for record in table])
    rows = []
    for record in records:
        row = {
            "code": record.code,
            "name": record.name,
            "name_norm": normalize_country_name(record.name),
            "flag": code_to_flag(record.code),
        }
        row.update(expand_aliases(list(record.aliases), max_columns=max_aliases))
        rows.append(row)

    columns = ["code", "name", "name_norm", "flag"] + [f"alias{i}" for i in range(1, max_aliases + 1)]
    return pd.DataFrame(rows, columns=columns)


__all__ = [
    "load_countries",
    "flag",
    "code",
    "name",
    "countries",
    "code_to_flag",
    "flag_to_code",
    "name_to_code",
    "code_to_name",
    "is_code",
    "is_country_flag",
    "codes",
    "resolve_country",
    "list_countries",
]
