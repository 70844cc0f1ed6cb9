"""Tests for front-matter settings."""

from kandown.config import DEFAULTS, read_config


def test_read_config_defaults():
    """No front-matter gives the defaults."""
    assert read_config({}) == {"default_view": None, "strict_display": False}
    assert read_config(None) == {"default_view": None, "strict_display": False}


def test_read_config_values():
    """Hyphenated keys map to underscored keys."""
    meta = {"kandown": {"default-view": "Main", "strict-display": True}}
    assert read_config(meta) == {"default_view": "Main", "strict_display": True}


def test_read_config_coerces_booleans():
    """Boolean settings accept string spellings."""
    for raw, expected in [("yes", True), ("true", True), ("1", True), ("no", False), ("off", False)]:
        assert read_config({"kandown": {"strict-display": raw}})["strict_display"] is expected


def test_read_config_coerces_strings():
    """String settings are stringified."""
    assert read_config({"kandown": {"default-view": 2024}})["default_view"] == "2024"


def test_read_config_underscored_keys():
    """Keys written with underscores are accepted too."""
    assert read_config({"kandown": {"strict_display": True}})["strict_display"] is True


def test_read_config_unknown_keys_pass_through():
    config = read_config({"kandown": {"theme": "dark"}})
    assert config["theme"] == "dark"


def test_read_config_ignores_other_meta():
    """Only the kandown key is read."""
    assert read_config({"title": "Roadmap", "kandown": "nonsense"}) == {
        "default_view": None,
        "strict_display": False,
    }


def test_read_config_does_not_mutate_defaults():
    read_config({"kandown": {"strict-display": True}})
    assert DEFAULTS["strict-display"] is False
