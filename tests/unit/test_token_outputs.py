"""Tests for utility classes and token documentation pages."""

from pathlib import Path

from swatchkit.tokens.models import CompiledToken, TokenContext
from swatchkit.tokens.pages import generate_token_pages, render_token_pages
from swatchkit.tokens.utilities import generate_utilities, render_utilities


def make_context() -> TokenContext:
    context = TokenContext()
    context.tokens["colors"] = [
        CompiledToken("colors", "Primary", "primary", "--color-primary", "#3b82f6")
    ]
    context.tokens["spacing"] = [
        CompiledToken("spacing", "s", "s", "--space-s", "clamp(1rem, 1rem + 0vw, 1rem)")
    ]
    return context


class TestUtilities:
    def test_rules_reference_custom_properties(self) -> None:
        css = render_utilities(make_context())

        assert ".color-primary { color: var(--color-primary); }" in css
        assert ".bg-primary { background-color: var(--color-primary); }" in css
        assert ".gap-s { gap: var(--space-s); }" in css
        assert css.index("/* colors */") < css.index("/* spacing */")

    def test_empty_context_writes_nothing(self, tmp_path: Path) -> None:
        assert generate_utilities(TokenContext(), tmp_path) is None
        assert not (tmp_path / "utilities.css").exists()

    def test_writes_file(self, tmp_path: Path) -> None:
        path = generate_utilities(make_context(), tmp_path / "css")

        assert path == tmp_path / "css" / "utilities.css"
        assert path.read_text(encoding="utf-8").endswith("\n")


class TestTokenPages:
    def test_one_page_per_compiled_category(self) -> None:
        pages = render_token_pages(make_context())

        assert sorted(pages) == ["colors.html", "spacing.html"]
        assert "var(--color-primary)" in pages["colors.html"]
        assert "--space-s" in pages["spacing.html"]

    def test_unchanged_pages_are_not_rewritten(self, tmp_path: Path) -> None:
        context = make_context()

        first = generate_token_pages(context, tmp_path)
        second = generate_token_pages(context, tmp_path)

        assert {p.name for p in first} == {"colors.html", "spacing.html"}
        assert second == []

    def test_stale_pages_are_removed(self, tmp_path: Path) -> None:
        generate_token_pages(make_context(), tmp_path)
        (tmp_path / "notes.html").write_text("mine", encoding="utf-8")

        context = TokenContext()
        context.tokens["colors"] = make_context().tokens["colors"]
        generate_token_pages(context, tmp_path)

        assert (tmp_path / "colors.html").exists()
        assert not (tmp_path / "spacing.html").exists()
        assert (tmp_path / "notes.html").exists()
