"""Country Emoji - country codes, names and flag emoji

Public API for converting between ISO 3166-1 alpha-2 codes, English
country names and regional-indicator flag emoji.

Usage:
    from countryemoji import flag, code, name

    flag("United Kingdom")       # Returns: '🇬🇧'
    code("🇯🇵")                  # Returns: 'JP'
    code("Korea, Republic of")   # Returns: 'KR'
    name("CI")                   # Returns: "Côte d'Ivoire"

    # Ambiguous or unknown input gives None
    code("Korea")                # Returns: None (North or South)
    code("Atlantis")             # Returns: None

    # Find a country mentioned in a sentence
    flag("Taiwan number one!")   # Returns: '🇹🇼'
"""

__version__ = "0.1.0"

# ============================================================================
# Conversion API
# ============================================================================

from .countries.countryapi import (
    flag,              # Any input -> flag emoji
    code,              # Any input -> alpha-2 code
    name,              # Any input -> canonical name
    countries,         # Ordered code -> name mapping
    name_to_code,      # Country name -> alpha-2 code
    code_to_name,      # Alpha-2 code -> canonical name
    is_code,           # Table membership test
    is_country_flag,   # Flag shape test
    codes,             # Batch code()
    resolve_country,   # Decision, tier and candidates for an input
    list_countries,    # DataFrame listing, optional search
)

from .flags.flagcodec import (
    code_to_flag,      # Two letters -> flag emoji
    flag_to_code,      # Flag emoji -> two letters
)

# ============================================================================
# Country Table
# ============================================================================

from .countries.countrytable import (
    load_countries,    # Cached table loader
    build_table,       # Validate raw rows into a table
    CountryTable,
    CountryRecord,
    CountryDataError,
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "flag",
    "code",
    "name",
    "countries",

    # ========================================================================
    # Direct conversions
    # ========================================================================
    "code_to_flag",
    "flag_to_code",
    "name_to_code",
    "code_to_name",
    "is_code",
    "is_country_flag",

    # ========================================================================
    # Batch and diagnostics
    # ========================================================================
    "codes",
    "resolve_country",
    "list_countries",

    # ========================================================================
    # Country Table
    # ========================================================================
    "load_countries",
    "build_table",
    "CountryTable",
    "CountryRecord",
    "CountryDataError",
]
