"""Tests for theme discovery.

Tests for ThemeScanner and select_default_theme().
"""

import json
import sys
from pathlib import Path

import pytest

from overlaytheme.theming import ThemeMeta, ThemeScanner, select_default_theme


def _write_theme(path: Path, name=None, **groups):
    details = dict(groups.pop("details", {}))
    if name is not None:
        details["name"] = name
    path.write_text(json.dumps({"details": details, **groups}), encoding="utf-8")
    return path


class TestCheckTheme:
    """Tests for ThemeScanner.check_theme()."""

    def test_named_theme(self, tmp_path):
        path = _write_theme(tmp_path / "a.json", "Alpha")
        assert ThemeScanner.check_theme(path) == ThemeMeta(name="Alpha", path=path)

    def test_missing_file(self, tmp_path):
        assert ThemeScanner.check_theme(tmp_path / "missing.json") is None

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert ThemeScanner.check_theme(path) is None

    def test_no_name(self, tmp_path):
        path = _write_theme(tmp_path / "anon.json", details={"author": "someone"})
        assert ThemeScanner.check_theme(path) is None

    def test_name_not_a_string(self, tmp_path):
        path = _write_theme(tmp_path / "num.json", 42)
        assert ThemeScanner.check_theme(path) is None

    def test_details_not_an_object(self, tmp_path):
        path = tmp_path / "weird.json"
        path.write_text('{"details": "Alpha"}', encoding="utf-8")
        assert ThemeScanner.check_theme(path) is None

    def test_other_fields_not_validated(self, tmp_path):
        path = _write_theme(tmp_path / "a.json", "Alpha", other={"uiScale": "huge"}, colors=[])
        meta = ThemeScanner.check_theme(path)
        assert meta is not None
        assert meta.name == "Alpha"

    def test_accepts_string_path(self, tmp_path):
        path = _write_theme(tmp_path / "a.json", "Alpha")
        assert ThemeScanner.check_theme(str(path)).path == path

    def test_deeply_nested_file(self, tmp_path):
        path = tmp_path / "deep.json"
        path.write_text("[" * 200000, encoding="utf-8")
        assert ThemeScanner.check_theme(path) is None

    @pytest.mark.skipif(not getattr(sys, "get_int_max_str_digits", lambda: 0)(),
                        reason="interpreter has no integer digit limit")
    def test_integer_over_digit_limit(self, tmp_path):
        path = tmp_path / "big.json"
        digits = "1" * (sys.get_int_max_str_digits() + 1)
        path.write_text('{"details": {"name": "Big", "renderer": %s}}' % digits, encoding="utf-8")
        assert ThemeScanner.check_theme(path) is None


class TestListAvailableThemes:
    """Tests for ThemeScanner.list_available_themes()."""

    def _make_scanner(self, tmp_path):
        resources = tmp_path / "resources"
        resources.mkdir()
        return ThemeScanner(resources, tmp_path / "config" / "themes")

    def test_mixed_directory(self, tmp_path):
        scanner = self._make_scanner(tmp_path)
        (scanner.resources_dir / "broken.json").write_text("{{{", encoding="utf-8")
        _write_theme(scanner.resources_dir / "named.json", "Named")
        _write_theme(scanner.resources_dir / "unnamed.json", details={"author": "x"})

        themes = scanner.list_available_themes()

        assert themes == [ThemeMeta(name="Named", path=scanner.resources_dir / "named.json")]

    def test_creates_themes_dir(self, tmp_path):
        scanner = self._make_scanner(tmp_path)
        assert not scanner.themes_dir.exists()
        assert scanner.list_available_themes() == []
        assert scanner.themes_dir.is_dir()

    def test_extension_filter(self, tmp_path):
        scanner = self._make_scanner(tmp_path)
        _write_theme(scanner.resources_dir / "theme.txt", "Text")
        _write_theme(scanner.resources_dir / "theme.json.bak", "Backup")
        _write_theme(scanner.resources_dir / "theme.json", "Json")

        names = [meta.name for meta in scanner.list_available_themes()]
        assert names == ["Json"]

    def test_not_recursive(self, tmp_path):
        scanner = self._make_scanner(tmp_path)
        nested = scanner.resources_dir / "nested"
        nested.mkdir()
        _write_theme(nested / "deep.json", "Deep")
        assert scanner.list_available_themes() == []

    def test_duplicates_kept_resources_first(self, tmp_path):
        scanner = self._make_scanner(tmp_path)
        scanner.themes_dir.mkdir(parents=True)
        _write_theme(scanner.resources_dir / "dark.json", "Dark")
        _write_theme(scanner.themes_dir / "dark.json", "Dark")

        themes = scanner.list_available_themes()

        assert [meta.name for meta in themes] == ["Dark", "Dark"]
        assert themes[0].path.parent == scanner.resources_dir
        assert themes[1].path.parent == scanner.themes_dir

    def test_missing_resources_dir_is_created(self, tmp_path):
        scanner = ThemeScanner(tmp_path / "nope", tmp_path / "themes")
        assert scanner.list_available_themes() == []
        assert (tmp_path / "nope").is_dir()

    def test_unscannable_directory(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        scanner = ThemeScanner(blocker / "resources", tmp_path / "themes")
        _write_theme(self._mkdir(tmp_path / "themes") / "ok.json", "Ok")

        names = [meta.name for meta in scanner.list_available_themes()]
        assert names == ["Ok"]

    def test_pathological_files_skipped(self, tmp_path):
        scanner = self._make_scanner(tmp_path)
        (scanner.resources_dir / "deep.json").write_text("{\"a\": " + "[" * 200000, encoding="utf-8")
        (scanner.resources_dir / "huge.json").write_text(
            '{"details": {"name": "Huge"}, "other": {"uiScale": 1%s}}' % ("0" * 400),
            encoding="utf-8",
        )
        _write_theme(scanner.resources_dir / "good.json", "Good")

        names = sorted(meta.name for meta in scanner.list_available_themes())
        assert names == ["Good", "Huge"]

    @staticmethod
    def _mkdir(path):
        path.mkdir(parents=True)
        return path


class TestSelectDefaultTheme:
    """Tests for select_default_theme()."""

    def test_empty(self):
        assert select_default_theme([]) is None

    def test_lexicographic_by_name(self):
        themes = [
            ThemeMeta("midnight", Path("/a/m.json")),
            ThemeMeta("Aurora", Path("/b/a.json")),
            ThemeMeta("daylight", Path("/a/d.json")),
        ]
        assert select_default_theme(themes).name == "Aurora"

    def test_same_name_breaks_on_path(self):
        themes = [
            ThemeMeta("Dark", Path("/z/dark.json")),
            ThemeMeta("Dark", Path("/a/dark.json")),
        ]
        assert select_default_theme(themes).path == Path("/a/dark.json")

    def test_custom_key(self):
        themes = [ThemeMeta("A", Path("/1.json")), ThemeMeta("B", Path("/2.json"))]
        chosen = select_default_theme(themes, key=lambda meta: meta.name != "B")
        assert chosen.name == "B"
