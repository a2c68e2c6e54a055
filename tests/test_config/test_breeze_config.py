"""Tests for configuration loading and identity."""

import json
from pathlib import Path

import pytest

from breeze.config import BreezeConfig, DarkMode, load_config
from breeze.errors import ConfigError
from breeze.theme import DEFAULT_SCREENS, default_theme, flatten_colors

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Defaults and validation
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_separator_and_prefix(self) -> None:
        config = BreezeConfig()
        assert config.separator == ":"
        assert config.prefix == ""

    def test_dark_mode_off(self) -> None:
        assert BreezeConfig().dark_mode is DarkMode.OFF

    def test_default_screens_in_order(self) -> None:
        assert list(BreezeConfig().screens) == ["sm", "md", "lg", "xl", "2xl"]
        assert BreezeConfig().screens["md"] == "768px"

    def test_theme_is_a_copy(self) -> None:
        config = BreezeConfig()
        config.theme["screens"]["md"] = "1px"
        assert DEFAULT_SCREENS["md"] == "768px"

    def test_missing_theme_section(self) -> None:
        assert BreezeConfig().theme_section("nothing") == {}

    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            BreezeConfig(separator="")
        assert exc_info.value.key == "separator"

    def test_non_string_prefix_rejected(self) -> None:
        with pytest.raises(ConfigError):
            BreezeConfig(prefix=None)  # type: ignore[arg-type]


class TestDarkModeParse:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, DarkMode.OFF),
            (False, DarkMode.OFF),
            ("off", DarkMode.OFF),
            ("class", DarkMode.CLASS),
            ("MEDIA", DarkMode.MEDIA),
            (DarkMode.CLASS, DarkMode.CLASS),
        ],
    )
    def test_accepted_values(self, value: object, expected: DarkMode) -> None:
        assert DarkMode.parse(value) is expected

    @pytest.mark.parametrize("value", ["sometimes", True, 3])
    def test_rejected_values(self, value: object) -> None:
        with pytest.raises(ConfigError):
            DarkMode.parse(value)


# ---------------------------------------------------------------------------
# from_dict / load_config
# ---------------------------------------------------------------------------


class TestFromDict:
    def test_empty_dict_gives_defaults(self) -> None:
        config = BreezeConfig.from_dict({})
        assert config.separator == ":"
        assert config.theme == default_theme()

    def test_theme_key_replaces_default(self) -> None:
        config = BreezeConfig.from_dict({"theme": {"screens": {"tablet": "640px"}}})
        assert config.screens == {"tablet": "640px"}

    def test_extend_merges(self) -> None:
        config = BreezeConfig.from_dict({"theme": {"extend": {"spacing": {"128": "32rem"}}}})
        spacing = config.theme_section("spacing")
        assert spacing["128"] == "32rem"
        assert spacing["4"] == "1rem"

    def test_content_string_becomes_tuple(self) -> None:
        config = BreezeConfig.from_dict({"content": "src/**/*.html"})
        assert config.content == ("src/**/*.html",)

    def test_unknown_keys_ignored(self) -> None:
        config = BreezeConfig.from_dict({"plugins": ["x"], "prefix": "tw-"})
        assert config.prefix == "tw-"

    def test_non_object_rejected(self) -> None:
        with pytest.raises(ConfigError):
            BreezeConfig.from_dict([])  # type: ignore[arg-type]

    def test_bad_theme_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            BreezeConfig.from_dict({"theme": "dark"})
        assert exc_info.value.key == "theme"

    def test_bad_extend_entry_rejected(self) -> None:
        with pytest.raises(ConfigError):
            BreezeConfig.from_dict({"theme": {"extend": {"colors": "red"}}})

    def test_bad_content_rejected(self) -> None:
        with pytest.raises(ConfigError):
            BreezeConfig.from_dict({"content": [1, 2]})

    def test_bad_dark_mode_rejected(self) -> None:
        with pytest.raises(ConfigError):
            BreezeConfig.from_dict({"darkMode": "always"})


class TestLoadConfig:
    def test_fixture(self) -> None:
        config = load_config(FIXTURES / "breeze.json")
        assert config.dark_mode is DarkMode.CLASS
        assert list(config.screens) == ["tablet", "desktop"]
        colors = config.theme_section("colors")
        assert colors["brand"] == "#123456"
        assert "red" in colors

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(path)

    def test_round_trip_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "breeze.json"
        path.write_text(json.dumps({"separator": "_", "debug": True}))
        config = load_config(str(path))
        assert config.separator == "_"
        assert config.debug is True


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


class TestFingerprint:
    def test_equal_configs_share_fingerprint(self) -> None:
        assert BreezeConfig().fingerprint() == BreezeConfig().fingerprint()

    def test_prefix_changes_fingerprint(self) -> None:
        assert BreezeConfig().fingerprint() != BreezeConfig(prefix="tw-").fingerprint()

    def test_theme_changes_fingerprint(self) -> None:
        theme = default_theme()
        theme["screens"] = {"md": "700px"}
        assert BreezeConfig().fingerprint() != BreezeConfig(theme=theme).fingerprint()

    def test_distinct_extractors_differ(self) -> None:
        def first(text: str) -> list[str]:
            return text.split()

        def second(text: str) -> list[str]:
            return text.split()

        a = BreezeConfig(extractors={"html": first})
        b = BreezeConfig(extractors={"html": second})
        assert a.fingerprint() != b.fingerprint()
        assert a.fingerprint() == BreezeConfig(extractors={"html": first}).fingerprint()

    def test_hashable_and_usable_as_key(self) -> None:
        theme = default_theme()
        theme["screens"] = {"md": "700px"}
        cache = {BreezeConfig(): "default", BreezeConfig(theme=theme): "custom"}
        assert cache[BreezeConfig()] == "default"
        assert cache[BreezeConfig(theme=default_theme() | {"screens": {"md": "700px"}})] == "custom"
        assert hash(BreezeConfig()) == hash(BreezeConfig())


class TestFlattenColors:
    def test_nested_palette(self) -> None:
        flat = flatten_colors({"red": {"100": "#f00", "DEFAULT": "#e00"}, "black": "#000"})
        assert flat == {"red-100": "#f00", "red": "#e00", "black": "#000"}
