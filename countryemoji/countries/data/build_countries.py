#!/usr/bin/env python3
"""
Build countries.parquet from pycountry and the countries.yaml overlay.

This script:
1. Loads pycountry rows and applies the countries.yaml overlay
2. Normalizes codes and adds name_norm and flag columns
3. Expands aliases into alias1...aliasN columns (at least 10)
4. Generates validation report for duplicate codes, missing names and
   names shared between countries
5. Writes countries.parquet with all columns as strings

Once written, countries.parquet is picked up by load_countries() ahead of
the pycountry catalog.
"""

import sys
from pathlib import Path
from typing import List

import pandas as pd

try:
    import pyarrow  # noqa: F401
except ImportError as e:
    raise ImportError("pyarrow not installed. pip install pyarrow") from e

from countryemoji.countries.countrynormalize import (
    country_name_variants,
    normalize_country_name,
)
from countryemoji.countries.countrytable import catalog_rows
from countryemoji.flags.flagcodec import code_to_flag
from countryemoji.utils.build_utils import expand_aliases


def process_country(country: dict, max_aliases: int = 10) -> dict:
    """Convert a catalog row to a DataFrame row."""
    code = country.get('code')
    code = code.strip().upper() if isinstance(code, str) else ''
    name = str(country.get('name') or '').strip()

    row = {
        'code': code,
        'name': name,
        'name_norm': normalize_country_name(name),
        'flag': code_to_flag(code) or '',
    }
    row.update(expand_aliases(country.get('aliases', []), max_columns=max_aliases))

    return row


def validate_data(df: pd.DataFrame) -> List[str]:
    """
    Validate the data and return list of issues found.
    """
    issues = []

    # Check for codes that are not two letters (includes YAML booleans like NO)
    bad_codes = df[df['flag'] == '']
    if not bad_codes.empty:
        issues.append(f"Malformed codes for countries: {bad_codes['name'].tolist()}")

    # Check for duplicate codes
    duplicates = df[df.duplicated(subset=['code'], keep=False)]
    if not duplicates.empty:
        dup_names = duplicates[['name', 'code']].to_dict('records')
        issues.append(f"Duplicate codes found: {dup_names}")

    # Check for missing names
    missing = df[df['name'] == '']
    if not missing.empty:
        issues.append(f"Missing name for codes: {missing['code'].tolist()}")

    # Check for normalized names claimed by more than one code
    alias_cols = [col for col in df.columns if col.startswith('alias')]
    owners = {}
    for _, row in df.iterrows():
        for value in [row['name']] + [row[col] for col in alias_cols]:
            for variant in country_name_variants(value):
                owners.setdefault(variant, set()).add(row['code'])
    for variant, codes in sorted(owners.items()):
        if len(codes) > 1:
            issues.append(f"Name '{variant}' shared by codes: {sorted(codes)}")

    return issues


def main():
    """Main build process."""
    data_dir = Path(__file__).parent
    countries_yaml = data_dir / "countries.yaml"
    output_parquet = data_dir / "countries.parquet"

    print(f"Building countries database from pycountry + {countries_yaml}")

    print("Loading pycountry and applying overlay...")
    entries = catalog_rows()
    max_aliases = max([10] + [len(country.get('aliases') or []) for country in entries])

    print(f"Processing {len(entries)} countries...")
    rows = [process_country(country, max_aliases) for country in entries]

    df = pd.DataFrame(rows)

    # Ensure all columns are strings
    for col in df.columns:
        df[col] = df[col].astype(str)

    print("\nValidating data...")
    issues = validate_data(df)

    if issues:
        print("\n⚠️  Validation issues found:")
        for issue in issues:
            print(f"  - {issue}")
        print()
    else:
        print("✅ All validations passed")

    df = df.sort_values('code').reset_index(drop=True)

    print(f"\nWriting {len(df)} countries to {output_parquet}")
    df.to_parquet(output_parquet, index=False, engine='pyarrow')

    print("\n" + "=" * 60)
    print("BUILD SUMMARY")
    print("=" * 60)
    print(f"Total countries: {len(df)}")
    print(f"Output file: {output_parquet}")
    print(f"File size: {output_parquet.stat().st_size / 1024:.1f} KB")

    with_aliases = df[df['alias1'] != '']
    print(f"\nCountries with aliases: {len(with_aliases)}")

    if issues:
        print(f"\n⚠️  Build completed with {len(issues)} validation issues")
        return 1
    else:
        print("\n✅ Build completed successfully")
        return 0


if __name__ == "__main__":
    sys.exit(main())
