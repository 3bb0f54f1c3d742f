"""Tests for the deck module — files, titles, templates, themes."""

from pathlib import Path

import pytest
from jinja2 import TemplateSyntaxError, UndefinedError

from revealmd.deck import DEFAULT_THEME, DEFAULT_TRANSITION
from revealmd.deck.files import DeckFiles, resolve_files
from revealmd.deck.generator import derive_title, join_titles, load_template, render_shell
from revealmd.deck.reference import reference_text
from revealmd.deck.themes import THEMES, TRANSITIONS, unknown_choices


FIXTURES = Path(__file__).parent / "fixtures"


# ── Defaults ─────────────────────────────────────────────────────────


class TestDefaults:
    def test_default_theme_is_documented(self):
        assert DEFAULT_THEME == "league"
        assert DEFAULT_THEME in THEMES

    def test_default_transition_is_documented(self):
        assert DEFAULT_TRANSITION == "fade"
        assert DEFAULT_TRANSITION in TRANSITIONS


# ── Title derivation ─────────────────────────────────────────────────


class TestTitles:
    def test_single_file(self):
        assert join_titles(["a.md"]) == "a.md"

    def test_two_files(self):
        assert join_titles(["a.md", "b.md"]) == "a.md and b.md"

    def test_three_files_oxford_comma(self):
        assert join_titles(["a.md", "b.md", "c.md"]) == "a.md, b.md, and c.md"

    def test_many_files_keep_every_name(self):
        names = ["a.md", "b.md", "c.md", "d.md"]
        assert join_titles(names) == "a.md, b.md, c.md, and d.md"

    def test_explicit_title_wins(self):
        assert derive_title("My Talk", ["a.md", "b.md"]) == "My Talk"

    def test_empty_title_is_derived(self):
        assert derive_title("", ["a.md", "b.md"]) == "a.md and b.md"
        assert derive_title(None, ["a.md"]) == "a.md"


# ── File validation ──────────────────────────────────────────────────


class TestResolveFiles:
    def test_single_file(self, deck_dir):
        deck = resolve_files([str(deck_dir / "intro.md")])
        assert isinstance(deck, DeckFiles)
        assert deck.root == deck_dir.resolve()
        assert deck.filenames == ["intro.md"]

    def test_order_is_preserved(self, deck_dir):
        deck = resolve_files([deck_dir / "outro.md", deck_dir / "intro.md"])
        assert deck.filenames == ["outro.md", "intro.md"]

    def test_relative_and_absolute_share_directory(self, deck_dir, monkeypatch):
        monkeypatch.chdir(deck_dir)
        deck = resolve_files(["intro.md", str(deck_dir / "outro.md")])
        assert deck.root == deck_dir.resolve()
        assert deck.filenames == ["intro.md", "outro.md"]

    def test_missing_file(self, deck_dir):
        with pytest.raises(FileNotFoundError) as exc_info:
            resolve_files([str(deck_dir / "nope.md")])
        assert exc_info.value.filename == str(deck_dir / "nope.md")

    def test_directory_rejected(self, deck_dir):
        with pytest.raises(IsADirectoryError):
            resolve_files([str(deck_dir)])

    def test_different_directories(self, deck_dir, tmp_path):
        other = tmp_path / "other"
        other.mkdir()
        (other / "extra.md").write_text("# Extra\n")
        with pytest.raises(ValueError, match="same directory"):
            resolve_files([str(deck_dir / "intro.md"), str(other / "extra.md")])

    def test_no_files(self):
        with pytest.raises(ValueError):
            resolve_files([])


# ── Templates ────────────────────────────────────────────────────────


class TestTemplates:
    def test_default_template_renders_every_file(self):
        template = load_template()
        html = render_shell(
            template,
            title="a.md and b.md",
            filenames=["a.md", "b.md"],
            theme="night",
            transition="zoom",
        ).decode("utf-8")
        assert "<title>a.md and b.md</title>" in html
        assert 'data-markdown="a.md"' in html
        assert 'data-markdown="b.md"' in html
        assert "/reveal.js/dist/theme/night.css" in html
        assert 'transition: "zoom"' in html

    def test_default_template_escapes_values(self):
        html = render_shell(
            load_template(),
            title="<script>x</script>",
            filenames=["a.md"],
            theme="league",
            transition="fade",
        ).decode("utf-8")
        assert "<script>x</script>" not in html
        assert "&lt;script&gt;" in html

    def test_custom_template_singular_filename(self):
        template = load_template(FIXTURES / "custom.html.j2")
        html = render_shell(
            template, title="T", filenames=["only.md"], theme="sky", transition="none",
        ).decode("utf-8")
        assert 'data-markdown="only.md"' in html
        assert 'data-theme="sky"' in html
        assert 'data-transition="none"' in html

    def test_broken_template_fails_to_load(self):
        with pytest.raises(TemplateSyntaxError):
            load_template(FIXTURES / "broken.html.j2")

    def test_missing_template_file(self, tmp_path):
        with pytest.raises(OSError):
            load_template(tmp_path / "missing.html")

    def test_unknown_variable_fails_to_render(self, tmp_path):
        path = tmp_path / "typo.html"
        path.write_text("<title>{{ Titel }}</title>")
        template = load_template(path)
        with pytest.raises(UndefinedError):
            render_shell(template, title="T", filenames=["a.md"], theme="x", transition="y")

    def test_render_returns_bytes(self):
        out = render_shell(
            load_template(), title="T", filenames=["a.md"], theme="league", transition="fade",
        )
        assert isinstance(out, bytes)


# ── Themes and reference ─────────────────────────────────────────────


class TestThemes:
    def test_known_values_produce_no_warnings(self):
        assert unknown_choices("league", "fade") == []

    def test_unknown_theme(self):
        warnings = unknown_choices("neon", "fade")
        assert len(warnings) == 1
        assert "neon" in warnings[0]

    def test_unknown_both(self):
        assert len(unknown_choices("neon", "spin")) == 2

    def test_reference_lists_everything(self):
        text = reference_text()
        assert "Available transitions:" in text
        assert "Available themes:" in text
        for name in TRANSITIONS + THEMES:
            assert name in text
        assert "![Title](path)" in text
        assert 'class="fragment"' in text
