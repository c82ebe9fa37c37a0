"""Shared utilities for the countryemoji package."""

from countryemoji.utils.dataloader import (
    find_data_file,
    load_parquet_or_csv,
    format_not_found_error,
)
from countryemoji.utils.normalize import (
    normalize_name,
    normalize_quotes,
)
from countryemoji.utils.build_utils import (
    load_yaml_file,
    expand_aliases,
    collect_aliases,
)

__all__ = [
    # Data loading
    "find_data_file",
    "load_parquet_or_csv",
    "format_not_found_error",
    # Normalization
    "normalize_name",
    "normalize_quotes",
    # Build utilities
    "load_yaml_file",
    "expand_aliases",
    "collect_aliases",
]
