"""Tests for actions_bootstrap.generators.config_emitter."""

from pathlib import Path

import yaml

from actions_bootstrap.generators.config_emitter import ConfigEmitter, StateDocument
from actions_bootstrap.git.models import RepositoryIdentity
from actions_bootstrap.git.parser import RepositoryUrlParser
from actions_bootstrap.secrets.catalog import SECRET_CATALOG


def _emitter(root: Path) -> ConfigEmitter:
    return ConfigEmitter(
        vars_path=root / "inventory/group_vars/cicd_servers/github_secrets.yml",
        docs_path=root / "docs/GITHUB-ACTIONS-SETUP.md",
    )


class TestStateDocument:
    """Tests for the vars file content."""

    def test_schema_and_defaults(self, identity: RepositoryIdentity) -> None:
        data = yaml.safe_load(StateDocument.for_repository(identity).to_yaml())

        assert data == {
            "repo_url": "https://github.com/acme/widgets",
            "deployment_vars": {"ssh_user": "deploy", "ssh_port": 22, "backup_retention_days": 30},
            "notifications": {"slack_enabled": True, "email_enabled": False},
            "monitoring": {
                "prometheus_enabled": True,
                "grafana_dashboard_enabled": True,
                "metrics_retention_days": 15,
            },
        }

    def test_token_is_only_a_commented_placeholder(self, identity: RepositoryIdentity) -> None:
        content = StateDocument.for_repository(identity).to_yaml()

        assert "# github_token:" in content
        assert "ansible-vault" in content
        assert "github_token" not in yaml.safe_load(content)

    def test_header_warns_against_committing(self, identity: RepositoryIdentity) -> None:
        content = StateDocument.for_repository(identity).to_yaml()

        assert content.startswith("# GitHub Actions variables - DO NOT COMMIT THIS FILE\n")

    def test_keys_in_schema_order(self, identity: RepositoryIdentity) -> None:
        content = StateDocument.for_repository(identity).to_yaml()

        positions = [content.index(f"\n{key}:") for key in ("repo_url", "deployment_vars", "notifications", "monitoring")]
        assert positions == sorted(positions)


class TestConfigEmitter:
    """Tests for ConfigEmitter.emit()."""

    def test_writes_both_artifacts(self, tmp_path: Path, identity: RepositoryIdentity) -> None:
        artifacts = _emitter(tmp_path).emit(identity)

        assert [a.path for a in artifacts] == [
            tmp_path / "inventory/group_vars/cicd_servers/github_secrets.yml",
            tmp_path / "docs/GITHUB-ACTIONS-SETUP.md",
        ]
        for artifact in artifacts:
            assert artifact.path.read_text() == artifact.rendered_content

    def test_regeneration_is_byte_identical(self, tmp_path: Path, identity: RepositoryIdentity) -> None:
        emitter = _emitter(tmp_path)

        emitter.emit(identity)
        first = emitter.vars_path.read_bytes()
        emitter.emit(identity)
        second = emitter.vars_path.read_bytes()

        assert first == second

    def test_overwrites_existing_content(self, tmp_path: Path, identity: RepositoryIdentity) -> None:
        emitter = _emitter(tmp_path)
        emitter.vars_path.parent.mkdir(parents=True)
        emitter.vars_path.write_text("repo_url: https://github.com/old/repo\ncustom: kept?\n")
        emitter.docs_path.parent.mkdir(parents=True)
        emitter.docs_path.write_text("hand edited")

        emitter.emit(identity)

        data = yaml.safe_load(emitter.vars_path.read_text())
        assert data["repo_url"] == "https://github.com/acme/widgets"
        assert "custom" not in data
        assert "hand edited" not in emitter.docs_path.read_text()

    def test_repo_url_from_ssh_remote(self, tmp_path: Path) -> None:
        identity = RepositoryUrlParser("git@github.com:acme/widgets.git").identity()

        _emitter(tmp_path).emit(identity)

        data = yaml.safe_load((tmp_path / "inventory/group_vars/cicd_servers/github_secrets.yml").read_text())
        assert identity.owner == "acme"
        assert identity.name == "widgets"
        assert data["repo_url"] == "https://github.com/acme/widgets"


class TestSetupGuide:
    """Tests for the rendered setup guide."""

    def test_guide_lists_every_secret(self, tmp_path: Path) -> None:
        guide = _emitter(tmp_path).render_guide().rendered_content

        for spec in SECRET_CATALOG:
            assert f"| `{spec.name}` | {spec.description} |" in guide

    def test_guide_is_independent_of_identity(self, tmp_path: Path) -> None:
        emitter = _emitter(tmp_path)
        first = RepositoryIdentity(source_url="https://github.com/acme/widgets", owner="acme", name="widgets")
        second = RepositoryIdentity(source_url="https://github.com/other/thing", owner="other", name="thing")

        emitter.emit(first)
        guide_first = emitter.docs_path.read_text()
        emitter.emit(second)

        assert emitter.docs_path.read_text() == guide_first
        assert "acme" not in guide_first

    def test_guide_has_troubleshooting(self, tmp_path: Path) -> None:
        guide = _emitter(tmp_path).render_guide().rendered_content

        assert guide.startswith("# GitHub Actions Setup")
        assert "## Troubleshooting" in guide
        assert guide.endswith("\n")
