"""Tests for romanization style loading."""
import json
import pytest

from romanji import styles
from romanji.base import StyleError, StyleLoadError, StyleNotFoundError
from romanji.converter import RomanjiConverter
from romanji.schema import ConversionTables


def write_style(directory, name, **tables):
    data = {"name": name}
    data.update(tables)
    (directory / f"{name}.json").write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


class TestPackagedStyles:
    """The styles shipped with the package."""

    def test_available_styles(self):
        names = styles.available_styles()
        for name in ["hepburn_modified", "hepburn_traditional", "kunrei_shiki", "nihon_shiki", "wapuro"]:
            assert name in names

    def test_packaged_style_location(self):
        import os
        from romanji import STYLES_DIR
        assert STYLES_DIR.endswith(os.path.join("romanji", "data", "styles"))
        assert os.path.isfile(os.path.join(STYLES_DIR, "hepburn_modified.json"))

    def test_default_style(self):
        assert styles.load_style() == styles.load_style("hepburn_modified")

    def test_load_returns_tables(self):
        tables = styles.load_style("hepburn_modified")
        assert isinstance(tables, ConversionTables)
        assert tables.conversions["し"] == "shi"
        assert tables.verb_combos["o"] == "ō"
        assert tables.tsu_conversions["c"] == "t"
        assert tables.tsu_conversions["a"] == "'"

    def test_traditional_inherits_and_overrides(self):
        tables = styles.load_style("hepburn_traditional")
        assert tables.conversions["ち"] == "chi"
        assert tables.n_conversions["b"] == "m"
        assert tables.n_conversions["a"] == "n-"

    def test_kunrei_removes_inherited_entries(self):
        tables = styles.load_style("kunrei_shiki")
        assert tables.conversions["し"] == "si"
        assert "c" not in tables.tsu_conversions
        assert tables.verb_combos["i"] == "î"

    def test_nihon_extends_kunrei(self):
        tables = styles.load_style("nihon_shiki")
        assert tables.conversions["し"] == "si"
        assert tables.conversions["ぢ"] == "di"
        assert tables.conversions["を"] == "wo"

    def test_wapuro_has_no_contextual_rules(self):
        tables = styles.load_style("wapuro")
        assert tables.verb_combos == {}
        assert tables.n_conversions == {}
        assert tables.particle_conversions == {}
        assert tables.conversions["ん"] == "nn"
        assert tables.tsu_conversions == {"c": "t"}

    def test_callers_get_independent_copies(self):
        first = styles.load_style("kunrei_shiki")
        second = styles.load_style("kunrei_shiki")
        assert first == second
        assert first is not second
        assert first.conversions is not second.conversions

    def test_mutating_loaded_tables_does_not_leak(self, word):
        tables = styles.load_style("hepburn_modified")
        tables.conversions["か"] = "XX"
        tables.verb_combos.clear()

        converter = RomanjiConverter.from_style("hepburn_modified")
        assert converter.convert("か", word()) == "ka"
        assert converter.convert("とう", word(pronunciation="トー")) == "tō"


class TestStyleConversion:
    """End-to-end conversion with each style."""

    def test_kunrei(self, word):
        converter = RomanjiConverter.from_style("kunrei_shiki")
        assert converter.convert("しんぶん", word()) == "sinbun"
        assert converter.convert("とうきょう", word(pronunciation="トーキョー")) == "tôkyô"
        assert converter.convert("まっちゃ", word()) == "mattya"

    def test_nihon(self, word):
        converter = RomanjiConverter.from_style("nihon_shiki")
        assert converter.convert("ちぢむ", word()) == "tidimu"

    def test_wapuro(self, word):
        converter = RomanjiConverter.from_style("wapuro")
        assert converter.convert("とうきょう", word(pronunciation="トーキョー")) == "toukyou"
        assert converter.convert("さんぽ", word()) == "sannpo"
        assert converter.convert("は", word(pos="postposition")) == "ha"
        assert converter.convert("こーひー", word()) == "ko-hi-"
        assert converter.convert("っあ", word()) == "aa"


class TestUserStyles:
    """Styles from ROMANJI_STYLES_DIR."""

    def test_user_style_extends_packaged(self, user_styles_dir, word):
        write_style(user_styles_dir, "mine", extends="hepburn_modified", conversions={"を": "wo"})
        assert "mine" in styles.available_styles()

        converter = RomanjiConverter.from_style("mine")
        assert converter.convert("を", word()) == "wo"
        assert converter.convert("か", word()) == "ka"

    def test_user_directory_takes_precedence(self, user_styles_dir):
        write_style(user_styles_dir, "wapuro", conversions={"か": "KA"})
        assert styles.load_style("wapuro").conversions == {"か": "KA"}

    def test_unknown_style(self):
        with pytest.raises(StyleNotFoundError) as exc_info:
            styles.load_style("does_not_exist")
        assert exc_info.value.style == "does_not_exist"
        assert isinstance(exc_info.value, StyleError)

    def test_unknown_parent(self, user_styles_dir):
        write_style(user_styles_dir, "orphan", extends="missing_parent", conversions={"か": "ka"})
        with pytest.raises(StyleNotFoundError) as exc_info:
            styles.load_style("orphan")
        assert exc_info.value.style == "missing_parent"

    def test_inheritance_cycle(self, user_styles_dir):
        write_style(user_styles_dir, "first", extends="second", conversions={"か": "ka"})
        write_style(user_styles_dir, "second", extends="first", conversions={"き": "ki"})
        with pytest.raises(StyleLoadError) as exc_info:
            styles.load_style("first")
        assert "cycle" in str(exc_info.value)

    def test_empty_conversion_rejected(self, user_styles_dir):
        write_style(user_styles_dir, "broken", conversions={"か": ""})
        with pytest.raises(StyleLoadError):
            styles.load_style("broken")

    def test_empty_key_rejected(self, user_styles_dir):
        write_style(user_styles_dir, "broken", conversions={"か": "ka"}, n_conversions={"": "m"})
        with pytest.raises(StyleLoadError):
            styles.load_style("broken")

    def test_unknown_field_rejected(self, user_styles_dir):
        write_style(user_styles_dir, "broken", conversions={"か": "ka"}, colour="blue")
        with pytest.raises(StyleLoadError):
            styles.load_style("broken")

    def test_invalid_json(self, user_styles_dir):
        (user_styles_dir / "garbled.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(StyleLoadError):
            styles.load_style("garbled")
