"""Generation of the Ansible vars file and the setup guide.

Both artifacts are derived: they are recomputed from the repository identity
on every run and overwrite whatever is on disk. Rendering is deterministic,
so running twice for the same repository produces identical files.
"""

from dataclasses import dataclass
from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field

from actions_bootstrap.git.models import RepositoryIdentity
from actions_bootstrap.rendering.engine import SecureTemplateEngine
from actions_bootstrap.secrets.catalog import SECRET_CATALOG, SecretSpec

log = structlog.get_logger(__name__)

GUIDE_TEMPLATE = "github-actions-setup.md.j2"

STATE_HEADER = (
    "# GitHub Actions variables - DO NOT COMMIT THIS FILE\n"
    "# Add it to .gitignore if it contains sensitive information\n"
    "---\n"
)

TOKEN_PLACEHOLDER = (
    "# GitHub token (encrypt with ansible-vault in production)\n"
    '# github_token: "SET_WITH_ANSIBLE_VAULT"\n'
)


class DeploymentVars(BaseModel):
    ssh_user: str = "deploy"
    ssh_port: int = 22
    backup_retention_days: int = 30


class NotificationSettings(BaseModel):
    slack_enabled: bool = True
    email_enabled: bool = False


class MonitoringSettings(BaseModel):
    prometheus_enabled: bool = True
    grafana_dashboard_enabled: bool = True
    metrics_retention_days: int = 15


class StateDocument(BaseModel):
    """Vars file read by the Ansible CI/CD role.

    ``github_token`` is part of the schema but is never filled in by this
    tool; the rendered file only carries a commented placeholder for it.
    """

    model_config = ConfigDict(frozen=True)

    repo_url: str
    github_token: str | None = Field(default=None, exclude=True)
    deployment_vars: DeploymentVars = Field(default_factory=DeploymentVars)
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)

    @classmethod
    def for_repository(cls, identity: RepositoryIdentity) -> "StateDocument":
        return cls(repo_url=identity.source_url)

    def to_yaml(self) -> str:
        """Render as commented YAML with keys in schema order."""
        data = self.model_dump(mode="json")

        def section(comment: str, key: str) -> str:
            body = yaml.safe_dump({key: data[key]}, default_flow_style=False, sort_keys=False)
            return f"# {comment}\n{body}"

        return "\n".join(
            [
                STATE_HEADER + section("Repository URL", "repo_url"),
                TOKEN_PLACEHOLDER,
                section("Deployment variables", "deployment_vars"),
                section("Notification settings", "notifications"),
                section("Monitoring settings", "monitoring"),
            ]
        )


@dataclass(frozen=True)
class GeneratedArtifact:
    """A file written by the emitter.

    Attributes:
        path: Where the content was written
        rendered_content: Exact text written
    """

    path: Path
    rendered_content: str

    def write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.rendered_content)


class ConfigEmitter:
    """Regenerates the vars file and the setup guide.

    Only the repository identity flows into the output; provisioning results
    never do.
    """

    def __init__(
        self,
        vars_path: Path,
        docs_path: Path,
        engine: SecureTemplateEngine | None = None,
        catalog: tuple[SecretSpec, ...] = SECRET_CATALOG,
    ) -> None:
        self.vars_path = vars_path
        self.docs_path = docs_path
        self.engine = engine or SecureTemplateEngine()
        self.catalog = catalog

    def render_state_document(self, identity: RepositoryIdentity) -> GeneratedArtifact:
        content = StateDocument.for_repository(identity).to_yaml()
        return GeneratedArtifact(path=self.vars_path, rendered_content=content)

    def render_guide(self) -> GeneratedArtifact:
        content = self.engine.render(GUIDE_TEMPLATE, {"secrets": self.catalog})
        return GeneratedArtifact(path=self.docs_path, rendered_content=content)

    def emit(self, identity: RepositoryIdentity) -> list[GeneratedArtifact]:
        """Write the vars file, then the guide, overwriting both.

        Returns:
            The written artifacts, vars file first.
        """
        artifacts = []
        for artifact in (self.render_state_document(identity), self.render_guide()):
            artifact.write()
            log.info("artifact_written", path=str(artifact.path), size=len(artifact.rendered_content))
            artifacts.append(artifact)
        return artifacts
