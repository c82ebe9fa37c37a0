"""
Country Name Resolution
-----------------------

Rule-based, deterministic resolution of a noisy string to one country code.

Tiers, evaluated in order:
  1) code:        trimmed, uppercased input, or its normalized form, is a
                  two-letter code in the table
  2) exact:       a normalized query form equals a normalized table name
  3) containment: a table name appears in the query, or the query appears
                  in a table name, as whole words (both at least
                  MIN_CONTAINMENT_LENGTH characters).
                  A name seen only inside a longer matched name of
                  another country ("guinea" in "papua new guinea") is
                  not counted.

A tier with no candidates hands over to the next one. A tier with exactly
one candidate code wins. A tier with two or more candidate codes ends
resolution as ambiguous: looser tiers are never consulted once a tighter
tier produced candidates.

API:
  resolve(text, table, min_length=4) -> Resolution
  resolve_code(text, table, min_length=4) -> str | None

Examples:
  >>> table = load_countries()
  >>> resolve("Korea, Republic of", table).code
  'KR'

  >>> resolve("Taiwan number one!", table)
  Resolution(status=<MatchStatus.UNIQUE: 'unique'>, code='TW', tier='containment', candidates=('TW',))

  >>> resolve("Congo and Burma", table).status
  <MatchStatus.AMBIGUOUS: 'ambiguous'>
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterable, List, Optional, Set, Tuple

from countryemoji.countries.countrynormalize import country_name_variants
from countryemoji.countries.countrytable import CountryTable

MIN_CONTAINMENT_LENGTH = 4

TIER_CODE = "code"
TIER_EXACT = "exact"
TIER_CONTAINMENT = "containment"


class MatchStatus(Enum):
    UNIQUE = "unique"
    AMBIGUOUS = "ambiguous"
    NONE = "no_match"


@dataclass(frozen=True)
class Resolution:
    """Outcome of one resolution call.

    code is set only for UNIQUE. tier names the tier that decided the
    outcome (None when every tier came up empty). candidates lists every
    code the deciding tier matched, sorted.
    """

    status: MatchStatus
    code: Optional[str] = None
    tier: Optional[str] = None
    candidates: Tuple[str, ...] = ()


_NO_MATCH = Resolution(MatchStatus.NONE)


@lru_cache(maxsize=8)
def name_index(table: CountryTable) -> Tuple[Tuple[str, str], ...]:
    """Normalized (code, name) pairs for every name variant in the table.

    Computed once per table; comma-reversed names contribute both orderings.
    """
    entries = []
    seen = set()
    for code, name in table.name_candidates():
        for variant in country_name_variants(name):
            if (code, variant) not in seen:
                seen.add((code, variant))
                entries.append((code, variant))
    return tuple(entries)


def _decide(tier: str, codes: Iterable[str]) -> Optional[Resolution]:
    """Turn a tier's candidate set into a terminal Resolution, or None to fall through."""
    candidates = tuple(sorted(set(codes)))
    if not candidates:
        return None
    if len(candidates) == 1:
        return Resolution(MatchStatus.UNIQUE, candidates[0], tier, candidates)
    return Resolution(MatchStatus.AMBIGUOUS, None, tier, candidates)


def _match_code(text: str, table: CountryTable) -> Set[str]:
    code = text.strip().upper()
    if len(code) == 2 and code.isascii() and code.isalpha() and code in table:
        return {code}
    return set()


def _match_exact(variants: Tuple[str, ...], index: Tuple[Tuple[str, str], ...]) -> Set[str]:
    return {code for code, name in index if name in variants}


def _word_spans(padded_name: str, padded_query: str) -> List[Tuple[int, int]]:
    spans = []
    start = padded_query.find(padded_name)
    while start != -1:
        spans.append((start, start + len(padded_name)))
        start = padded_query.find(padded_name, start + 1)
    return spans


def _names_in_query(
    padded_query: str,
    index: Tuple[Tuple[str, str], ...],
    min_length: int,
) -> Set[str]:
    """Codes whose names occur in the query, minus names only seen inside a longer match.

    "guinea" inside "papua new guinea" is part of that match, not a second
    country; "guinea" elsewhere in the text still counts.
    """
    hits = []
    for code, name in index:
        if len(name) < min_length:
            continue
        spans = _word_spans(f" {name} ", padded_query)
        if spans:
            hits.append((code, spans))

    def covered(code: str, span: Tuple[int, int]) -> bool:
        start, end = span
        return any(
            other != code and o_start <= start and end <= o_end and o_end - o_start > end - start
            for other, other_spans in hits
            for o_start, o_end in other_spans
        )

    return {code for code, spans in hits if not all(covered(code, span) for span in spans)}


def _match_containment(
    variants: Tuple[str, ...],
    index: Tuple[Tuple[str, str], ...],
    min_length: int,
) -> Set[str]:
    # Space padding makes substring tests respect word boundaries
    queries = [f" {v} " for v in variants if len(v) >= min_length]
    if not queries:
        return set()

    codes = set()
    for q in queries:
        codes |= _names_in_query(q, index, min_length)

    for code, name in index:
        if len(name) < min_length:
            continue
        padded = f" {name} "
        if any(q in padded for q in queries):
            codes.add(code)
    return codes


def resolve(
    text: str,
    table: CountryTable,
    *,
    min_length: int = MIN_CONTAINMENT_LENGTH,
) -> Resolution:
    """
    Resolve a code, name or sentence to a single country.

    Args:
        text: Raw input ("GB", "United Kingdom", "Korea, Republic of", ...)
        table: Country table to resolve against
        min_length: Minimum normalized length, for both the query and the
                    table name, to take part in the containment tier

    Returns:
        Resolution with status UNIQUE (code set), AMBIGUOUS or NONE

    Examples:
        >>> resolve("uk", table).code
        'GB'

        >>> resolve("Korea", table).candidates
        ('KP', 'KR')
    """
    if not isinstance(text, str) or not text.strip():
        return _NO_MATCH

    variants = country_name_variants(text)

    codes = _match_code(text, table)
    if not codes and variants:
        # "U.S." normalizes to "us"
        codes = _match_code(variants[0], table)
    decided = _decide(TIER_CODE, codes)
    if decided is not None:
        return decided

    if not variants:
        return _NO_MATCH

    index = name_index(table)

    decided = _decide(TIER_EXACT, _match_exact(variants, index))
    if decided is not None:
        return decided

    decided = _decide(TIER_CONTAINMENT, _match_containment(variants, index, min_length))
    if decided is not None:
        return decided

    return _NO_MATCH


def resolve_code(
    text: str,
    table: CountryTable,
    *,
    min_length: int = MIN_CONTAINMENT_LENGTH,
) -> Optional[str]:
    """Code for text when it identifies exactly one country, else None."""
    return resolve(text, table, min_length=min_length).code


__all__ = [
    "MIN_CONTAINMENT_LENGTH",
    "MatchStatus",
    "Resolution",
    "name_index",
    "resolve",
    "resolve_code",
]
