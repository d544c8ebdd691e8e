import pytest

from config import Settings, parse_seed_patrons


def test_parse_seed_patrons():
    assert parse_seed_patrons("1001:Mandeep,1002:Cameron") == [("1001", "Mandeep"), ("1002", "Cameron")]


def test_parse_seed_patrons_ignores_blanks_and_trims():
    assert parse_seed_patrons(" 1:Ada Lovelace , ,") == [("1", "Ada Lovelace")]
    assert parse_seed_patrons("") == []


def test_parse_seed_patrons_rejects_malformed_entry():
    with pytest.raises(ValueError, match="must look like"):
        parse_seed_patrons("1001Mandeep")


def test_settings_defaults():
    s = Settings(seed_patrons="1001:Mandeep,1002:Cameron")
    assert s.seed_patron_pairs() == [("1001", "Mandeep"), ("1002", "Cameron")]
    assert s.array_capacity >= 1
