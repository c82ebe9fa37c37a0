"""Shared data loading utilities for the country dataset.

This module provides common data loading patterns for files shipped in a
module's data/ directory.
"""

from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd


def find_data_file(
    module_file: str,
    filenames: List[str],
) -> Optional[Path]:
    """Find a data file in the calling module's data/ directory.

    Filenames are tried in the order given, so a compiled file listed first
    wins over its source.

    Args:
        module_file: __file__ from the calling module
        filenames: Candidate filenames (e.g., ['countries.parquet', 'countries.yaml'])

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> path = find_data_file(__file__, ['countries.parquet', 'countries.yaml'])
    """
    data_dir = Path(module_file).parent / "data"
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p

    return None


def load_parquet_or_csv(file_path: Path) -> pd.DataFrame:
    """Load DataFrame from parquet or CSV file based on extension.

    CSV columns are read as strings with pandas' NA sniffing disabled, since
    "NA" is Namibia's code and not a missing value.

    Args:
        file_path: Path to parquet or CSV file

    Returns:
        Loaded DataFrame

    Raises:
        ValueError: If file extension is not .parquet or .csv
    """
    if file_path.suffix == ".parquet":
        return pd.read_parquet(file_path)
    elif file_path.suffix == ".csv":
        return pd.read_csv(file_path, dtype=str, keep_default_na=False)
    else:
        raise ValueError(f"Unsupported file format: {file_path.suffix}. Use .parquet or .csv")


def format_not_found_error(
    subdirectory: str,
    searched_locations: List[Tuple[str, Path]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        subdirectory: Data subdirectory name (e.g., 'countries')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of commands/instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {subdirectory} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "find_data_file",
    "load_parquet_or_csv",
    "format_not_found_error",
]
