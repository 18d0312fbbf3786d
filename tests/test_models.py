import json

import pytest
from pydantic import ValidationError

from dxclparser import parse
from dxclparser.models import (
    DX,
    RBN,
    SPOT_TYPES,
    WWV,
    ToLocal,
    rbn_from_json,
    spot_from_dict,
    spot_from_json,
)


def test_dx_exchange_format_is_tagged_and_ordered() -> None:
    spot = parse(
        "DX de DF2MX:     18160.0  DL8AW/P      EU-156 Tombelaine Isl.         2259Z RF80"
    )
    data = json.loads(spot.to_json())

    assert list(data) == ["DX"]
    assert list(data["DX"]) == ["call_de", "call_dx", "freq", "utc", "loc", "comment"]
    assert data["DX"] == {
        "call_de": "DF2MX",
        "call_dx": "DL8AW/P",
        "freq": 18160000,
        "utc": 2259,
        "loc": "RF80",
        "comment": "EU-156 Tombelaine Isl.",
    }


def test_missing_optional_fields_are_null() -> None:
    spot = parse("To LOCAL de IW5CLM: off")
    assert json.loads(spot.to_json()) == {
        "ToLocal": {"call_de": "IW5CLM", "utc": None, "msg": "off"}
    }


def test_exchange_format_round_trip(cluster_line) -> None:
    spot = parse(cluster_line)
    assert spot_from_json(spot.to_json()) == spot


def test_variant_tags() -> None:
    assert sorted(SPOT_TYPES) == ["DX", "ToAll", "ToLocal", "WCY", "WWV", "WX"]


def test_records_are_immutable() -> None:
    spot = parse("WWV de VE7CC <21>:   SFI=70, A=12, K=3, No Storms -> No Storms")
    with pytest.raises(ValidationError):
        spot.sfi = 100
    assert spot.sfi == 70


def test_equal_fields_of_different_variants_are_not_equal() -> None:
    assert parse("To ALL de IW5CLM: off") != parse("To LOCAL de IW5CLM: off")


def test_field_ranges_are_validated() -> None:
    with pytest.raises(ValidationError):
        DX(call_de="DF2MX", call_dx="DL8AW", freq=-1, utc=1200)
    with pytest.raises(ValidationError):
        WWV(call_de="VE7CC", utc=24, sfi=70, a=1, k=1, info1="x", info2="y")
    with pytest.raises(ValidationError):
        ToLocal(call_de="N5UXT", utc=70000)
    with pytest.raises(ValidationError):
        RBN(mode="CW", db=-40000, info="CQ")
    with pytest.raises(ValidationError):
        RBN(mode="CW", db=1, speed=20, speed_unit="KMH", info="CQ")


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        '{"FOO": {"call_de": "DF2MX"}}',
        '{"DX": {"call_de": "DF2MX"}}',
        '{"WX": {"call_de": "DF2MX"}, "ToAll": {"call_de": "DF2MX"}}',
        '{"WX": {"call_de": "DF2MX", "colour": "red"}}',
    ],
)
def test_spot_reader_rejects_malformed_input(text) -> None:
    with pytest.raises(ValueError):
        spot_from_json(text)


def test_spot_from_dict() -> None:
    assert spot_from_dict({"WX": {"call_de": "VA3SAE", "msg": "va3sub"}}).msg == "va3sub"


def test_rbn_round_trip() -> None:
    rbn = RBN(mode="FT8", db=-12, info="CQ", loc="FK68")
    assert json.loads(rbn.to_json()) == {
        "mode": "FT8",
        "db": -12,
        "speed": None,
        "speed_unit": None,
        "info": "CQ",
        "loc": "FK68",
    }
    assert rbn_from_json(rbn.to_json()) == rbn
    with pytest.raises(ValueError):
        rbn_from_json('{"mode": "FT8"}')
