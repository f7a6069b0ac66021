"""Interactive provisioning of repository secrets.

Walks the secret catalog in order, asking the operator about each secret.
A declined secret never reaches the GitHub CLI. A secret whose value cannot
be collected, or whose submission fails, is recorded as failed and the
remaining secrets are still processed.

Example:
    >>> provisioner = SecretProvisioner(GitHubCLI(), ClickInputProvider())
    >>> outcomes = provisioner.provision(identity)
    >>> [str(o.status) for o in outcomes]
    ['applied', 'skipped', 'skipped', 'failed']
"""

from collections.abc import Callable, Sequence

import click
import structlog
from pydantic import BaseModel, ConfigDict

from actions_bootstrap.enums import ProvisionStatus
from actions_bootstrap.exceptions import PlatformCommandError, SecretSourceError
from actions_bootstrap.git.models import RepositoryIdentity
from actions_bootstrap.providers.gh_cli import GitHubCLI
from actions_bootstrap.secrets.catalog import SECRET_CATALOG, SecretSpec
from actions_bootstrap.utils.prompts import InputProvider

log = structlog.get_logger(__name__)


class ProvisionOutcome(BaseModel):
    """What happened to one secret during this run."""

    model_config = ConfigDict(frozen=True)

    secret_name: str
    status: ProvisionStatus
    detail: str = ""


class SecretProvisioner:
    """Offers each catalog secret to the operator and submits accepted ones.

    Attributes:
        gh: GitHub CLI used for submission.
        prompter: Source of operator answers.
        catalog: Secrets to offer, in order.
    """

    def __init__(
        self,
        gh: GitHubCLI,
        prompter: InputProvider,
        catalog: Sequence[SecretSpec] = SECRET_CATALOG,
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        self.gh = gh
        self.prompter = prompter
        self.catalog = tuple(catalog)
        self._echo = echo

    def provision(self, identity: RepositoryIdentity) -> list[ProvisionOutcome]:
        """Process every catalog secret for ``identity``.

        Returns:
            One outcome per catalog entry, in catalog order.
        """
        log.info("provisioning_secrets", repo=identity.full_name, count=len(self.catalog))
        return [self._provision_one(spec, identity) for spec in self.catalog]

    def _provision_one(self, spec: SecretSpec, identity: RepositoryIdentity) -> ProvisionOutcome:
        self._echo(click.style(f"Secret: {spec.name}", bold=True, fg="yellow"))
        self._echo(f"  Description: {spec.description}")

        if not self.prompter.confirm(f"Configure {spec.name} now?", default=False):
            log.info("secret_skipped", secret=spec.name)
            return ProvisionOutcome(secret_name=spec.name, status=ProvisionStatus.SKIPPED, detail="declined")

        try:
            value = spec.source.collect(self.prompter, spec)
        except SecretSourceError as e:
            log.warning("secret_source_failed", secret=spec.name, kind=str(spec.source_kind), error=e.message)
            self._echo(click.style(f"  ✗ {e.message}", fg="red"))
            return ProvisionOutcome(secret_name=spec.name, status=ProvisionStatus.FAILED, detail=e.message)

        try:
            self.gh.set_secret(spec.name, value, repo=identity.full_name)
        except PlatformCommandError as e:
            log.warning("secret_submit_failed", secret=spec.name, repo=identity.full_name, returncode=e.returncode)
            self._echo(click.style(f"  ✗ Failed to set {spec.name}", fg="red"))
            return ProvisionOutcome(secret_name=spec.name, status=ProvisionStatus.FAILED, detail=e.message)

        log.info("secret_applied", secret=spec.name, repo=identity.full_name)
        self._echo(click.style(f"  ✓ Secret {spec.name} configured", fg="green"))
        return ProvisionOutcome(secret_name=spec.name, status=ProvisionStatus.APPLIED)
