"""Tests for project scaffolding."""

from pathlib import Path

from swatchkit.core.build import build
from swatchkit.core.init import backup_path, init_project
from swatchkit.core.manifest import ProjectConfig
from swatchkit.core.settings import resolve_settings
from swatchkit.tokens.compiler import TOKEN_FILENAMES


class TestInitProject:
    def test_scaffolds_a_buildable_project(self, tmp_path: Path) -> None:
        settings = resolve_settings(ProjectConfig(), tmp_path)
        messages: list[str] = []

        created = init_project(settings, log=messages.append)

        for filename in TOKEN_FILENAMES:
            assert (settings.tokens_dir / filename).exists()
        assert settings.tokens_css_file.exists()
        assert settings.styles_css_file.exists()
        assert settings.project_layout.exists()
        assert settings.project_layout in created
        assert messages

        result = build(settings)
        assert "Design Tokens" in result.sections
        assert result.warnings == ()

    def test_existing_files_are_kept(self, tmp_path: Path) -> None:
        settings = resolve_settings(ProjectConfig(), tmp_path)
        colors = settings.tokens_dir / "colors.json"
        colors.parent.mkdir(parents=True)
        colors.write_text('{"items": []}', encoding="utf-8")
        settings.project_layout.write_text("mine <!-- CONTENT -->", encoding="utf-8")

        created = init_project(settings)

        assert colors.read_text(encoding="utf-8") == '{"items": []}'
        assert settings.project_layout.read_text(encoding="utf-8") == "mine <!-- CONTENT -->"
        assert colors not in created

    def test_force_backs_up_layout(self, tmp_path: Path) -> None:
        settings = resolve_settings(ProjectConfig(), tmp_path)
        settings.swatchkit_dir.mkdir()
        settings.project_layout.write_text("mine", encoding="utf-8")

        init_project(settings, force=True)

        backup = settings.swatchkit_dir / "_layout.html.bak"
        assert backup.read_text(encoding="utf-8") == "mine"
        assert settings.project_layout.read_text(encoding="utf-8") != "mine"

    def test_backup_names_do_not_clobber(self, tmp_path: Path) -> None:
        layout = tmp_path / "_layout.html"
        (tmp_path / "_layout.html.bak").write_text("older", encoding="utf-8")

        assert backup_path(layout) == tmp_path / "_layout.html.bak.1"
