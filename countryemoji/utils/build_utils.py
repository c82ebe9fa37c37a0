"""
Build Utility Functions
-----------------------

Helpers shared by the dataset loader and the countries build script.

Functions:
  - load_yaml_file: Load and parse YAML file
  - expand_aliases: Expand alias list into alias1...aliasN columns
  - collect_aliases: Inverse of expand_aliases for a flat row
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd
import yaml


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary

    Raises:
        FileNotFoundError: If file does not exist

    Examples:
        >>> data = load_yaml_file(Path("countries.yaml"))
        >>> data['countries'][0]['code']
        'AD'
    """
    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


def expand_aliases(aliases: Optional[List[str]], max_columns: int = 10) -> Dict[str, str]:
    """
    Expand aliases list into alias1...alias10 columns.

    Args:
        aliases: List of alias strings
        max_columns: Maximum number of alias columns to generate (default: 10)

    Returns:
        Dictionary mapping alias1...alias{max_columns} to values

    Raises:
        ValueError: If there are more aliases than columns

    Examples:
        >>> expand_aliases(['UK', 'Great Britain'], max_columns=3)
        {'alias1': 'UK', 'alias2': 'Great Britain', 'alias3': ''}

        >>> expand_aliases(None, max_columns=2)
        {'alias1': '', 'alias2': ''}
    """
    if not aliases:
        aliases = []

    if len(aliases) > max_columns:
        raise ValueError(
            f"{len(aliases)} aliases do not fit in {max_columns} alias columns: {aliases}"
        )

    result = {}
    for i in range(1, max_columns + 1):
        col_name = f"alias{i}"
        if i <= len(aliases):
            result[col_name] = str(aliases[i - 1])
        else:
            result[col_name] = ""

    return result


def collect_aliases(row: Mapping[str, Any]) -> List[str]:
    """
    Collect non-empty alias1...aliasN values from a flat row, in column order.

    Examples:
        >>> collect_aliases({'code': 'GB', 'alias1': 'UK', 'alias2': '', 'alias3': 'Britain'})
        ['UK', 'Britain']
    """
    numbered = []
    for key, value in row.items():
        key = str(key)
        if key.startswith("alias") and key[5:].isdigit():
            numbered.append((int(key[5:]), value))

    aliases = []
    for _, value in sorted(numbered):
        if value is None or pd.isna(value):
            continue
        value = str(value).strip()
        if value:
            aliases.append(value)
    return aliases


__all__ = [
    "load_yaml_file",
    "expand_aliases",
    "collect_aliases",
]
