"""Tests for actions_bootstrap.rendering.engine."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError
from jinja2.exceptions import SecurityError

from actions_bootstrap.rendering.engine import SecureTemplateEngine


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "hello.md.j2").write_text("Hello {{ name }}\n")
    (templates / "attr.md.j2").write_text("{{ obj.__class__ }}")
    return templates


class TestSecureTemplateEngine:
    def test_default_template_dir_has_guide(self) -> None:
        engine = SecureTemplateEngine()

        assert (engine.template_dir / "github-actions-setup.md.j2").is_file()

    def test_render(self, template_dir: Path) -> None:
        assert SecureTemplateEngine(template_dir).render("hello.md.j2", {"name": "acme"}) == "Hello acme\n"

    def test_missing_variable_fails(self, template_dir: Path) -> None:
        with pytest.raises(UndefinedError):
            SecureTemplateEngine(template_dir).render("hello.md.j2", {})

    def test_missing_template(self, template_dir: Path) -> None:
        with pytest.raises(TemplateNotFound):
            SecureTemplateEngine(template_dir).render("nope.md.j2", {})

    def test_path_traversal_rejected(self, template_dir: Path) -> None:
        with pytest.raises(ValueError, match="escapes"):
            SecureTemplateEngine(template_dir).validate_template_path("../secrets.txt")

    def test_sandbox_blocks_dunder_access(self, template_dir: Path) -> None:
        with pytest.raises(SecurityError):
            SecureTemplateEngine(template_dir).render("attr.md.j2", {"obj": object()})

    def test_missing_template_dir(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="does not exist"):
            SecureTemplateEngine(tmp_path / "missing")
