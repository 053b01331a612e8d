"""
Tests for template lookup and loading
"""

from datetime import date

import pytest

from mdpdf.template_store import (
    PROJECT_TEMPLATES_DIR,
    TemplateNotFoundError,
    TemplateStore,
    format_date,
    load_html_template,
    load_logo,
)
from conftest import PNG_BYTES


@pytest.mark.parametrize("day, expected", [
    (date(2026, 10, 19), "19 octobre 2026"),
    (date(2025, 3, 5), "05 mars 2025"),
    (date(2024, 8, 1), "01 août 2024"),
])
def test_format_date(day, expected):
    assert format_date(day) == expected


class TestLoadHtmlTemplate:
    """Tests for placeholder substitution."""

    def test_replaces_variables(self, temp_dir):
        path = temp_dir / "header.html"
        path.write_text("<span>{{DATE}}</span><b>{{ TITLE }}</b><i>{{MISSING}}</i>", encoding="utf-8")
        result = load_html_template(path, {"DATE": "19 octobre 2026", "TITLE": "Rapport"})
        assert result == "<span>19 octobre 2026</span><b>Rapport</b><i></i>"

    def test_repeated_placeholder(self, temp_dir):
        path = temp_dir / "footer.html"
        path.write_text("{{X}}-{{X}}", encoding="utf-8")
        assert load_html_template(path, {"X": "a"}) == "a-a"

    def test_missing_file(self, temp_dir):
        assert load_html_template(temp_dir / "nope.html", {}) == ""


def test_load_logo(temp_dir, recording_logger):
    logo = temp_dir / "logo.png"
    logo.write_bytes(PNG_BYTES)
    assert load_logo(logo).startswith("data:image/png;base64,")
    assert load_logo(temp_dir / "absent.png", recording_logger) is None
    assert recording_logger.of_level("warning")


class TestTemplateStore:
    """Tests for TemplateStore."""

    def test_user_template_wins(self, temp_dir):
        user_dir = temp_dir / "user"
        project_dir = temp_dir / "project"
        (user_dir / "default").mkdir(parents=True)
        (project_dir / "default").mkdir(parents=True)
        store = TemplateStore(user_dir, project_dir)
        assert store.find("default").root == user_dir / "default"

    def test_falls_back_to_project(self, temp_dir):
        project_dir = temp_dir / "project"
        (project_dir / "qualiopi").mkdir(parents=True)
        template = TemplateStore(temp_dir / "user", project_dir).find("qualiopi")
        assert template.header == project_dir / "qualiopi" / "header.html"
        assert template.css.name == "template.css"
        assert template.logo.name == "logo.png"

    def test_not_found(self, temp_dir):
        store = TemplateStore(temp_dir / "user", temp_dir / "project")
        with pytest.raises(TemplateNotFoundError, match="ghost"):
            store.find("ghost")

    def test_list_templates(self, temp_dir):
        user_dir = temp_dir / "user"
        (user_dir / "mine").mkdir(parents=True)
        (user_dir / "notes.txt").write_text("not a template")
        listing = TemplateStore(user_dir, temp_dir / "project").list_templates()
        assert listing == {"user": ["mine"], "project": []}

    def test_bundled_default_template(self, temp_dir):
        template = TemplateStore(temp_dir / "user").find("default")
        assert template.root == PROJECT_TEMPLATES_DIR / "default"
        assert "{{DATE}}" in template.header.read_text(encoding="utf-8")
        assert template.css.is_file()
