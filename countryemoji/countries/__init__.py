"""Country table, name normalization and name resolution."""

from countryemoji.countries.countryapi import (
    flag,
    code,
    name,
    countries,
    name_to_code,
    code_to_name,
    is_code,
    is_country_flag,
    codes,
    resolve_country,
    list_countries,
)
from countryemoji.countries.countrytable import (
    CountryDataError,
    CountryRecord,
    CountryTable,
    build_table,
    load_countries,
)

__all__ = [
    "flag",
    "code",
    "name",
    "countries",
    "name_to_code",
    "code_to_name",
    "is_code",
    "is_country_flag",
    "codes",
    "resolve_country",
    "list_countries",
    "CountryDataError",
    "CountryRecord",
    "CountryTable",
    "build_table",
    "load_countries",
]
