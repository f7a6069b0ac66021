"""Onboarding orchestrator.

Sequences the onboarding phases:

    dependency preflight -> authentication -> repository identity
        -> secret provisioning -> vars file + setup guide

The first three phases are fatal gates and run before anything is changed.
Secret provisioning records per-secret outcomes and never aborts the run.
An operator interrupt propagates untouched: nothing is emitted and secrets
already set stay set.

Example:
    >>> orchestrator = OnboardingOrchestrator(Path("."), BootstrapSettings(), ClickInputProvider())
    >>> summary = orchestrator.run()
    >>> summary.applied, summary.skipped, summary.failed
    (2, 1, 1)
"""

from pathlib import Path

import click
import structlog

from actions_bootstrap.config.settings import BootstrapSettings
from actions_bootstrap.engine.context import RunContext, RunSummary
from actions_bootstrap.engine.preflight import AuthenticationCheck, DependencyPreflight
from actions_bootstrap.generators.config_emitter import ConfigEmitter
from actions_bootstrap.git.discovery import RepoIdentityResolver
from actions_bootstrap.providers.gh_cli import GitHubCLI
from actions_bootstrap.secrets.provisioner import SecretProvisioner
from actions_bootstrap.utils.prompts import InputProvider

log = structlog.get_logger(__name__)


class OnboardingOrchestrator:
    """Runs one onboarding pass for a repository.

    Collaborators are built from settings unless passed in, which lets tests
    substitute any of them.
    """

    def __init__(
        self,
        repo_path: Path,
        settings: BootstrapSettings,
        prompter: InputProvider,
        gh: GitHubCLI | None = None,
        preflight: DependencyPreflight | None = None,
        resolver: RepoIdentityResolver | None = None,
        provisioner: SecretProvisioner | None = None,
        emitter: ConfigEmitter | None = None,
    ) -> None:
        self.repo_path = repo_path
        self.settings = settings
        self.prompter = prompter

        self.gh = gh or GitHubCLI(settings.gh_executable, timeout=settings.command_timeout)
        self.preflight = preflight or DependencyPreflight(settings.required_tools)
        self.auth = AuthenticationCheck(self.gh)
        self.resolver = resolver or RepoIdentityResolver(repo_path, prompter, remote_name=settings.remote_name)
        self.provisioner = provisioner or SecretProvisioner(self.gh, prompter)
        self.emitter = emitter or ConfigEmitter(
            vars_path=settings.vars_path(repo_path),
            docs_path=settings.docs_path(repo_path),
        )

    def run(self) -> RunSummary:
        """Execute all phases.

        Raises:
            PreflightError: Missing tools or GitHub CLI authentication.
            RepositoryIdentityError: Repository URL could not be resolved.
        """
        context = RunContext(repo_path=self.repo_path)

        _step("Checking dependencies...")
        self.preflight.ensure()

        _step("Checking GitHub authentication...")
        context.token = self.auth.ensure()

        _step("Resolving repository...")
        context.identity = self.resolver.resolve()
        click.echo(f"  Repository: {context.identity.full_name}")
        click.echo(f"  URL: {context.identity.source_url}")

        _step("Configuring repository secrets...")
        outcomes = self.provisioner.provision(context.require_identity())

        _step("Writing Ansible variables and setup guide...")
        artifacts = self.emitter.emit(context.require_identity())

        summary = RunSummary(identity=context.require_identity(), outcomes=outcomes, artifacts=artifacts)
        log.info(
            "onboarding_complete",
            repo=summary.identity.full_name,
            applied=summary.applied,
            skipped=summary.skipped,
            failed=summary.failed,
        )
        return summary


def _step(message: str) -> None:
    click.echo(click.style(message, fg="blue"))
