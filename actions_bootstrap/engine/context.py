"""Run context and summary.

``RunContext`` carries the state produced by one phase to the next, so no
phase reads repository identity or credentials from the environment.
"""

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import SecretStr

from actions_bootstrap.enums import ProvisionStatus
from actions_bootstrap.exceptions import IdentityNotResolvedError
from actions_bootstrap.generators.config_emitter import GeneratedArtifact
from actions_bootstrap.git.models import RepositoryIdentity
from actions_bootstrap.secrets.provisioner import ProvisionOutcome


@dataclass
class RunContext:
    """State accumulated during a single onboarding run.

    Attributes:
        repo_path: Working copy the tool was started in
        identity: Repository identity, once resolved
        token: Token exported from the GitHub CLI, kept in memory only
    """

    repo_path: Path
    identity: RepositoryIdentity | None = None
    token: SecretStr | None = None

    def require_identity(self) -> RepositoryIdentity:
        """Return the resolved identity.

        Raises:
            IdentityNotResolvedError: If the identity phase has not run.
        """
        if self.identity is None:
            raise IdentityNotResolvedError()
        return self.identity


@dataclass(frozen=True)
class RunSummary:
    """Result of a completed run."""

    identity: RepositoryIdentity
    outcomes: list[ProvisionOutcome] = field(default_factory=list)
    artifacts: list[GeneratedArtifact] = field(default_factory=list)

    def count(self, status: ProvisionStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def applied(self) -> int:
        return self.count(ProvisionStatus.APPLIED)

    @property
    def skipped(self) -> int:
        return self.count(ProvisionStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self.count(ProvisionStatus.FAILED)
