"""Integration tests for the public country conversion API."""

import pandas as pd
import pytest

import countryemoji
from countryemoji import (
    code,
    code_to_flag,
    code_to_name,
    codes,
    countries,
    flag,
    flag_to_code,
    is_code,
    is_country_flag,
    list_countries,
    load_countries,
    name,
    name_to_code,
    resolve_country,
)
from countryemoji.countries.countrytable import build_table


@pytest.fixture
def custom_table():
    return build_table([
        {"code": "AA", "name": "Alphaland", "aliases": ["Alpha Republic"]},
        {"code": "BB", "name": "Betastan"},
    ])


# ---- flag() ----

class TestFlag:

    def test_from_code(self):
        assert flag("US") == "🇺🇸"
        assert flag("us") == "🇺🇸"

    def test_from_name(self):
        assert flag("United States") == "🇺🇸"
        assert flag("Chile") == "🇨🇱"
        assert flag("United Kingdom") == "🇬🇧"
        assert flag("UK") == "🇬🇧"

    def test_from_flag(self):
        assert flag("🇯🇵") == "🇯🇵"

    def test_from_sentence(self):
        assert flag("Taiwan number one!") == "🇹🇼"

    def test_unknown(self):
        assert flag("XX") is None
        assert flag("Atlantis") is None
        assert flag("🇿🇿") is None
        assert flag("") is None

    def test_ambiguous(self):
        assert flag("Korea") is None
        assert flag("Congo and Burma") is None


# ---- code() ----

class TestCode:

    def test_from_flag(self):
        assert code("🇺🇸") == "US"
        assert code("🇬🇧") == "GB"

    def test_unassigned_flag(self):
        assert code("🇿🇿") is None

    def test_from_name(self, sample_countries):
        for text, expected in sample_countries.items():
            assert code(text) == expected, text

    def test_formal_names(self):
        assert code("Korea, Republic of") == "KR"
        assert code("Tanzania, United Republic of") == "TZ"
        assert code("Republic of Tanzania") == "TZ"
        assert code("Iran, Islamic Republic of") == "IR"
        assert code("Bolivia, Plurinational State of") == "BO"

    def test_short_common_names(self):
        assert code("Congo") == "CD"
        assert code("Vatican") == "VA"
        assert code("Netherlands Antilles") == "AN"
        assert code("Guinea") == "GN"
        assert code("U.S. Virgin Islands") == "VI"
        assert code("St. Kitts & Nevis") == "KN"

    @pytest.mark.parametrize("text", ["Korea", "United", "Virgin Islands", "Congo and Burma"])
    def test_ambiguous(self, text):
        assert code(text) is None

    @pytest.mark.parametrize("text", ["", "A", "AB", "123", "a" * 1000, None, 7])
    def test_malformed_never_raises(self, text):
        assert code(text) is None


# ---- name() ----

class TestName:

    def test_from_code(self):
        assert name("CI") == "Côte d'Ivoire"
        assert name("gb") == "United Kingdom"

    def test_from_flag(self):
        assert name("🇺🇸") == "United States"

    def test_from_name(self):
        assert name("Korea, Democratic People's Republic of") == "North Korea"
        assert name("Ivory Coast") == "Côte d'Ivoire"

    def test_unknown(self):
        assert name("Atlantis") is None
        assert name("🇿🇿") is None


# ---- Direct conversions ----

class TestDirectConversions:

    def test_code_to_flag(self):
        assert code_to_flag("CL") == "🇨🇱"
        assert code_to_flag("XX") is not None

    def test_flag_to_code(self):
        assert flag_to_code("🇨🇱") == "CL"

    def test_name_to_code(self):
        assert name_to_code("chile") == "CL"
        assert name_to_code("Holland") == "NL"
        assert name_to_code("Korea") is None

    def test_code_to_name(self):
        assert code_to_name("JP") == "Japan"
        assert code_to_name("jp") == "Japan"
        assert code_to_name("XX") is None
        assert code_to_name(None) is None

    def test_is_code(self):
        assert is_code("US")
        assert is_code("us")
        assert not is_code("XX")
        assert not is_code("USA")
        assert not is_code(None)

    def test_is_country_flag(self):
        assert is_country_flag("🇺🇸")
        assert is_country_flag("🇿🇿")
        assert not is_country_flag("US")
        assert not is_country_flag("🎌")

    def test_flag_and_code_agree(self, table):
        for c in table.all_codes():
            assert code(flag(c)) == c
            assert name(code_to_flag(c)) == code_to_name(c)


# ---- countries() / codes() ----

def test_countries_ordered():
    mapping = countries()
    keys = list(mapping)
    assert keys == sorted(keys)
    assert mapping["GB"] == "United Kingdom"
    assert len(mapping) == len(load_countries())


def test_codes_batch():
    assert codes(["USA", "Holland", "🇨🇱", "Atlantis", "Korea"]) == ["US", "NL", "CL", None, None]
    assert codes([]) == []


# ---- resolve_country() ----

class TestResolveCountry:

    def test_unique(self):
        result = resolve_country("Korea, Republic of")
        assert result["query"] == "Korea, Republic of"
        assert result["query_norm"] == "korea republic of"
        assert result["decision"] == "unique"
        assert result["tier"] == "exact"
        assert result["final"] == {"code": "KR", "name": "South Korea", "flag": "🇰🇷"}
        assert result["candidates"] == [result["final"]]

    def test_ambiguous(self):
        result = resolve_country("Korea")
        assert result["decision"] == "ambiguous"
        assert result["tier"] == "containment"
        assert [c["code"] for c in result["candidates"]] == ["KP", "KR"]
        assert result["final"] is None

    def test_no_match(self):
        result = resolve_country("Atlantis")
        assert result["decision"] == "no_match"
        assert result["tier"] is None
        assert result["candidates"] == []
        assert result["final"] is None

    def test_flag(self):
        result = resolve_country("🇨🇱")
        assert result["tier"] == "flag"
        assert result["final"]["code"] == "CL"

    def test_unassigned_flag(self):
        result = resolve_country("🇿🇿")
        assert result["tier"] == "flag"
        assert result["decision"] == "no_match"

    def test_non_string(self):
        result = resolve_country(None)
        assert result["decision"] == "no_match"
        assert result["query_norm"] == ""


# ---- list_countries() ----

class TestListCountries:

    def test_all(self):
        df = list_countries()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns[:4]) == ["code", "name", "name_norm", "flag"]
        assert "alias10" in df.columns
        assert len(df) == len(load_countries())
        assert df["code"].tolist() == sorted(df["code"].tolist())

    def test_row(self):
        df = list_countries()
        row = df[df["code"] == "GB"].iloc[0]
        assert row["name"] == "United Kingdom"
        assert row["name_norm"] == "united kingdom"
        assert row["flag"] == "🇬🇧"
        assert row["alias1"] == "UK"

    def test_search_by_name(self):
        found = list_countries("guinea")["code"].tolist()
        assert {"GN", "GQ", "GW", "PG"} <= set(found)
        assert "FR" not in found

    def test_search_by_code(self):
        assert list_countries("jp")["code"].tolist() == ["JP"]

    def test_search_no_match(self):
        df = list_countries("Atlantis")
        assert df.empty
        assert "code" in df.columns

    @pytest.mark.parametrize("search", [5, 1.5, b"JP", ["JP"]])
    def test_search_non_string(self, search):
        df = list_countries(search)
        assert df.empty
        assert list(df.columns[:4]) == ["code", "name", "name_norm", "flag"]


# ---- Custom tables ----

class TestCustomTable:

    def test_resolves_against_given_table(self, custom_table):
        assert code("Alpha Republic", table=custom_table) == "AA"
        assert code("United Kingdom", table=custom_table) is None
        assert flag("Betastan", table=custom_table) == code_to_flag("BB")
        assert name("🇦🇦", table=custom_table) == "Alphaland"

    def test_lookup_helpers(self, custom_table):
        assert is_code("AA", table=custom_table)
        assert not is_code("US", table=custom_table)
        assert code_to_name("bb", table=custom_table) == "Betastan"
        assert countries(table=custom_table) == {"AA": "Alphaland", "BB": "Betastan"}
        assert codes(["Alphaland", "Gamma"], table=custom_table) == ["AA", None]

    def test_list_countries(self, custom_table):
        df = list_countries(table=custom_table)
        assert df["code"].tolist() == ["AA", "BB"]
        assert df.iloc[0]["alias1"] == "Alpha Republic"


def test_package_exports():
    for attr in countryemoji.__all__:
        assert hasattr(countryemoji, attr), attr
    assert countryemoji.__version__
